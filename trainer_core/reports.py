from trainer_core.metrics import build_metrics, training_info
from trainer_core.workouts import WorkoutRecord

SUMMARY_KEYS = ("kind", "duration", "distance", "mean_speed", "calories")


def summary(record: WorkoutRecord, metrics: dict | None = None) -> str:
    """ Takes a record, computes its metrics and returns the text block, one newline-terminated line per metric """
    metrics = metrics or build_metrics()
    info = training_info(record)
    values = {
        "kind": info.kind,
        "duration": info.duration,
        "distance": info.distance,
        "mean_speed": info.mean_speed,
        "calories": info.calories,
    }

    lines = []
    for k in SUMMARY_KEYS:
        spec = metrics[k]
        text = f'{spec["label"]}: {spec["formatter"](values[k])}'
        if spec.get("unit"):
            text += f' {spec["unit"]}'
        lines.append(text + "\n")
    return "".join(lines)
