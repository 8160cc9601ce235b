"""Match-minute interval filters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, Sequence, TypeVar

from .constants import MAX_MATCH_MINUTE, OVERTIME_START_MINUTE

IntervalCategory = Literal["all", "10min", "half", "overtime"]

_EventT = TypeVar("_EventT")


@dataclass(frozen=True)
class TimeInterval:
    """Half-open ``[start, end)`` minute range."""

    label: str
    start: int
    end: int
    category: IntervalCategory = "10min"

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"Interval end ({self.end}) must be >= start ({self.start})")

    def contains(self, minute: int) -> bool:
        return self.start <= minute < self.end


TEN_MIN_INTERVALS: tuple[TimeInterval, ...] = tuple(
    TimeInterval(f"{start}-{start + 10}'", start, start + 10, "10min") for start in range(0, 90, 10)
)

HALF_INTERVALS: tuple[TimeInterval, ...] = (
    TimeInterval("1st Half", 0, 45, "half"),
    TimeInterval("2nd Half", 45, 90, "half"),
    TimeInterval("Extra Time", 90, MAX_MATCH_MINUTE, "overtime"),
)

FULL_MATCH = TimeInterval("Full Match", 0, MAX_MATCH_MINUTE, "all")


def filter_by_interval(events: Iterable[_EventT], interval: TimeInterval) -> list[_EventT]:
    """Keep events whose minute falls inside the interval."""
    return [event for event in events if interval.contains(event.minute)]


def has_overtime(events: Iterable[object]) -> bool:
    return any(event.minute > OVERTIME_START_MINUTE for event in events)


def available_intervals(
    events: Sequence[object], mode: Literal["10min", "half"] = "10min"
) -> tuple[TimeInterval, ...]:
    """Selectable intervals for a mode; extra time only appears when it was played."""
    if mode == "half":
        if has_overtime(events):
            return HALF_INTERVALS
        return tuple(interval for interval in HALF_INTERVALS if interval.category != "overtime")
    if mode == "10min":
        return TEN_MIN_INTERVALS
    raise ValueError(f"Unknown interval mode {mode!r}; expected '10min' or 'half'")


def find_interval(label: str) -> TimeInterval:
    """Resolve one of the standard interval labels (case-insensitive)."""
    wanted = label.strip().lower()
    for interval in (FULL_MATCH, *TEN_MIN_INTERVALS, *HALF_INTERVALS):
        if interval.label.lower() == wanted:
            return interval
    known = [FULL_MATCH.label, *(i.label for i in TEN_MIN_INTERVALS), *(i.label for i in HALF_INTERVALS)]
    raise ValueError(f"Unknown interval {label!r}; expected one of {known}")
