from dataclasses import dataclass
from enum import Enum
from typing import Union

Number = Union[int, float]


class TimeUnit(Enum):
    """Units a Period can be expressed in, valued in milliseconds"""
    MILLISECONDS = 1
    SECONDS = 1000
    MINUTES = 60 * 1000
    HOURS = 60 * 60 * 1000

    def to_seconds(self, duration: Number) -> float:
        return duration * self.value / 1000

    def to_millis(self, duration: Number) -> Number:
        return duration * self.value


_LABELS = {
    TimeUnit.MILLISECONDS: "millis",
    TimeUnit.SECONDS: "secs",
    TimeUnit.MINUTES: "mins",
    TimeUnit.HOURS: "hours",
}


@dataclass(frozen=True)
class Period:
    """How long a scoped call may wait before the driver gives up"""
    how_long: Number
    time_unit: TimeUnit = TimeUnit.SECONDS

    def __post_init__(self):
        if not isinstance(self.time_unit, TimeUnit):
            raise TypeError(f"time_unit must be a TimeUnit, got {self.time_unit!r}")
        if self.how_long < 0:
            raise ValueError("Period duration must not be negative")

    @classmethod
    def millis(cls, how_long: Number) -> "Period":
        return cls(how_long, TimeUnit.MILLISECONDS)

    @classmethod
    def secs(cls, how_long: Number) -> "Period":
        return cls(how_long, TimeUnit.SECONDS)

    @classmethod
    def mins(cls, how_long: Number) -> "Period":
        return cls(how_long, TimeUnit.MINUTES)

    @classmethod
    def hours(cls, how_long: Number) -> "Period":
        return cls(how_long, TimeUnit.HOURS)

    def to_seconds(self) -> float:
        return self.time_unit.to_seconds(self.how_long)

    def to_millis(self) -> float:
        return self.time_unit.to_millis(self.how_long)

    def __str__(self) -> str:
        return f"{_LABELS[self.time_unit]}({self.how_long})"
