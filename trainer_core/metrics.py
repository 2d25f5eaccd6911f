import logging
import math
from dataclasses import dataclass
from datetime import timedelta
from typing import TypedDict, Callable, Any

from trainer_core.config import (M_IN_KM, MIN_IN_HOUR, CM_IN_M, KMH_IN_MSEC,
                                 RUN_SPEED_MULTIPLIER, RUN_SPEED_SHIFT,
                                 WALK_WEIGHT_MULTIPLIER, WALK_SPEED_HEIGHT_MULTIPLIER,
                                 SWIM_SPEED_SHIFT, SWIM_WEIGHT_MULTIPLIER)
from trainer_core.utils_formatting import fmt_str_decimals, fmt_minutes
from trainer_core.workouts import WorkoutKind, WorkoutRecord


logger = logging.getLogger(__name__)


class MetricInfo(TypedDict, total=False):
    key: str
    label: str
    unit: str
    formatter: str | Callable[[Any], Any]

# This is the dictionary from which the metrics dict will be built, used by the summary #
METRICS_SPEC: dict[str, MetricInfo] = {
    "kind":       {"key": "kind",           "label": "Training type",                      "formatter": "kind"},
    "duration":   {"key": "duration_min",   "label": "Duration",         "unit": "min",    "formatter": "minutes"},
    "distance":   {"key": "distance_km",    "label": "Distance",         "unit": "km",     "formatter": "decimals"},
    "mean_speed": {"key": "mean_speed_kmh", "label": "Mean speed",       "unit": "km/h",   "formatter": "decimals"},
    "calories":   {"key": "calories",       "label": "Calories burned",                    "formatter": "decimals"},
}


def build_metrics():
    """ Builds a dictionary based on the METRICS_SPEC registry """
    reg = {"kind": lambda kind: kind.label,
           "minutes": fmt_minutes,
           "decimals": fmt_str_decimals}
    return {k: {**spec, "formatter": reg[spec["formatter"]]} for k, spec in METRICS_SPEC.items()}


@dataclass(frozen=True)
class TrainingInfo:
    """ Metrics derived from a WorkoutRecord, rebuilt on every request """
    kind: WorkoutKind
    duration: timedelta
    distance: float     # km
    mean_speed: float   # km/h
    calories: float     # kcal


def _positive(value) -> bool:
    """ True for finite numbers above zero, guards every division and factor below """
    # ints too large for a float are treated like inf
    try:
        value = float(value)
    except OverflowError:
        return False
    return math.isfinite(value) and value > 0


# ------------------ DISTANCE / SPEED ---------------------------- #
def distance(record: WorkoutRecord) -> float:
    """ Distance in km: repetitions * step length / metres in km """
    if not _positive(record.action) or not _positive(record.len_step):
        return 0.0
    return record.action * record.len_step / M_IN_KM


def _default_mean_speed(record: WorkoutRecord) -> float:
    hours = record.duration_hours
    if not _positive(hours):
        return 0.0
    return distance(record) / hours


def _swimming_mean_speed(record: WorkoutRecord) -> float:
    """ Pool length * crossings / metres in km / hours, stroke count is not used """
    hours = record.duration_hours
    if not (_positive(record.length_pool) and _positive(record.count_pool) and _positive(hours)):
        return 0.0
    return record.length_pool * record.count_pool / M_IN_KM / hours


MEAN_SPEED_FORMULAS: dict[WorkoutKind, Callable[[WorkoutRecord], float]] = {
    WorkoutKind.RUNNING: _default_mean_speed,
    WorkoutKind.WALKING: _default_mean_speed,
    WorkoutKind.SWIMMING: _swimming_mean_speed,
}


def mean_speed(record: WorkoutRecord) -> float:
    """ Mean speed in km/h for the record's kind """
    return MEAN_SPEED_FORMULAS[record.kind](record)


# ------------------ CALORIES ---------------------------- #
def _running_calories(record: WorkoutRecord) -> float:
    """ (18 * speed + 1.79) * weight / metres in km * hours * minutes in hour """
    speed = mean_speed(record)
    if not _positive(record.weight) or not _positive(speed):
        return 0.0
    return ((RUN_SPEED_MULTIPLIER * speed + RUN_SPEED_SHIFT)
            * record.weight / M_IN_KM * record.duration_hours * MIN_IN_HOUR)


def _walking_calories(record: WorkoutRecord) -> float:
    """ (0.035 * weight + (speed_ms^2 / height_m) * 0.029 * weight) * hours * minutes in hour """
    speed = mean_speed(record)
    if not (_positive(record.weight) and _positive(record.height) and _positive(speed)):
        return 0.0
    speed_ms = speed * KMH_IN_MSEC
    height_m = record.height / CM_IN_M
    return ((WALK_WEIGHT_MULTIPLIER * record.weight
             + (speed_ms ** 2 / height_m) * WALK_SPEED_HEIGHT_MULTIPLIER * record.weight)
            * record.duration_hours * MIN_IN_HOUR)


def _swimming_calories(record: WorkoutRecord) -> float:
    """ (speed + 1.1) * 2 * weight * hours """
    speed = mean_speed(record)
    if not _positive(record.weight) or not _positive(speed):
        return 0.0
    return (speed + SWIM_SPEED_SHIFT) * SWIM_WEIGHT_MULTIPLIER * record.weight * record.duration_hours


CALORIE_FORMULAS: dict[WorkoutKind, Callable[[WorkoutRecord], float]] = {
    WorkoutKind.RUNNING: _running_calories,
    WorkoutKind.WALKING: _walking_calories,
    WorkoutKind.SWIMMING: _swimming_calories,
}


def calories(record: WorkoutRecord) -> float:
    """ Calories burned (kcal) for the record's kind """
    return CALORIE_FORMULAS[record.kind](record)


def training_info(record: WorkoutRecord) -> TrainingInfo:
    """ Takes a record, computes distance, mean speed and calories, returns them as TrainingInfo """
    info = TrainingInfo(
        kind=record.kind,
        duration=record.duration,
        distance=distance(record),
        mean_speed=mean_speed(record),
        calories=calories(record),
    )
    logger.debug(f"📐 [{info.kind.label}] distance={info.distance:.3f} km, "
                 f"speed={info.mean_speed:.3f} km/h, calories={info.calories:.3f}")
    return info
