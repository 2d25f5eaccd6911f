from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from trainer_core.config import LEN_STEP, SWIMMING_LEN_STEP, SEC_IN_HOUR


class WorkoutKind(Enum):
    """ The closed set of supported workouts, value is the display label """
    RUNNING = "Running"
    WALKING = "Walking"
    SWIMMING = "Swimming"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class WorkoutRecord:
    """ One workout. Fields a kind doesn't use stay at 0 and are ignored """
    kind: WorkoutKind
    action: int                 # steps or strokes
    len_step: float             # metres per step/stroke
    duration: timedelta
    weight: float               # kg
    height: float = 0.0         # cm, walking only
    length_pool: float = 0.0    # m, swimming only
    count_pool: int = 0         # pool crossings, swimming only

    def __post_init__(self):
        if not isinstance(self.kind, WorkoutKind):
            raise ValueError(f"Unsupported workout kind: {self.kind!r}")

    @property
    def duration_hours(self) -> float:
        return self.duration.total_seconds() / SEC_IN_HOUR


def running(action: int, duration: timedelta, weight: float, len_step: float = LEN_STEP) -> WorkoutRecord:
    return WorkoutRecord(WorkoutKind.RUNNING, action, len_step, duration, weight)


def walking(action: int, duration: timedelta, weight: float, height: float,
            len_step: float = LEN_STEP) -> WorkoutRecord:
    return WorkoutRecord(WorkoutKind.WALKING, action, len_step, duration, weight, height=height)


def swimming(action: int, duration: timedelta, weight: float, length_pool: float, count_pool: int,
             len_step: float = SWIMMING_LEN_STEP) -> WorkoutRecord:
    return WorkoutRecord(WorkoutKind.SWIMMING, action, len_step, duration, weight,
                         length_pool=length_pool, count_pool=count_pool)
