"""Match event model, record conversion, and file loading."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
import logging
from pathlib import Path
from typing import Any, ClassVar, Iterable, Literal, Mapping, Sequence, Union

import pandas as pd

from .geometry import clamp_point

logger = logging.getLogger(__name__)

EventType = Literal["pass", "shot", "dribble", "interception", "tackle"]
ShotOutcome = Literal["goal", "saved", "missed", "blocked"]

EVENT_TYPES: tuple[EventType, ...] = ("pass", "shot", "dribble", "interception", "tackle")
SHOT_OUTCOMES: tuple[ShotOutcome, ...] = ("goal", "saved", "missed", "blocked")

# camelCase keys used by the dashboard payloads.
_KEY_ALIASES = {
    "targetX": "target_x",
    "targetY": "target_y",
    "isGoal": "is_goal",
    "shotOutcome": "shot_outcome",
    "isBigChance": "is_big_chance",
    "xG": "xg",
    "passTarget": "pass_target",
    "passTargetName": "pass_target_name",
    "playerId": "player_id",
}


@dataclass(frozen=True)
class _EventBase:
    minute: int
    x: float
    y: float
    target_x: float
    target_y: float
    success: bool
    player_id: str | None = None

    event_type: ClassVar[EventType]

    def __post_init__(self) -> None:
        if self.minute < 0:
            raise ValueError(f"minute must be >= 0, got {self.minute}")


@dataclass(frozen=True)
class PassEvent(_EventBase):
    """Pass from (x, y) to (target_x, target_y)."""

    pass_target: str | None = None
    pass_target_name: str | None = None

    event_type: ClassVar[EventType] = "pass"


@dataclass(frozen=True)
class ShotEvent(_EventBase):
    """Shot taken from (x, y); ``xg`` is a provider value when available."""

    is_goal: bool = False
    shot_outcome: ShotOutcome | None = None
    is_big_chance: bool = False
    xg: float | None = None

    event_type: ClassVar[EventType] = "shot"

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.shot_outcome is not None and self.shot_outcome not in SHOT_OUTCOMES:
            raise ValueError(f"Unknown shot_outcome: {self.shot_outcome!r}")

    @property
    def scored(self) -> bool:
        return self.is_goal or self.shot_outcome == "goal"


@dataclass(frozen=True)
class DribbleEvent(_EventBase):
    event_type: ClassVar[EventType] = "dribble"


@dataclass(frozen=True)
class InterceptionEvent(_EventBase):
    event_type: ClassVar[EventType] = "interception"


@dataclass(frozen=True)
class TackleEvent(_EventBase):
    event_type: ClassVar[EventType] = "tackle"


MatchEvent = Union[PassEvent, ShotEvent, DribbleEvent, InterceptionEvent, TackleEvent]

EVENT_CLASSES: dict[str, type] = {
    "pass": PassEvent,
    "shot": ShotEvent,
    "dribble": DribbleEvent,
    "interception": InterceptionEvent,
    "tackle": TackleEvent,
}


def event_from_record(record: Mapping[str, Any], *, clamp: bool = False) -> MatchEvent:
    """Build a typed event from a loosely-typed mapping.

    Missing numeric fields become 0 and missing flags become False. Passes and
    shots keep a missing destination as (0, 0); other event types fall back to
    their origin since they have no direction.
    """
    data = {_KEY_ALIASES.get(str(key), str(key)): value for key, value in record.items()}

    event_type = _as_str(data.get("type"))
    if event_type not in EVENT_CLASSES:
        raise ValueError(f"Unknown event type {event_type!r}; expected one of {list(EVENT_TYPES)}")

    x = _as_float(data.get("x"))
    y = _as_float(data.get("y"))
    if event_type in ("pass", "shot"):
        target_x = _as_float(data.get("target_x"))
        target_y = _as_float(data.get("target_y"))
    else:
        target_x = _as_float(data.get("target_x"), default=x)
        target_y = _as_float(data.get("target_y"), default=y)

    if clamp:
        x, y = clamp_point(x, y)
        target_x, target_y = clamp_point(target_x, target_y)

    common: dict[str, Any] = {
        "minute": int(_as_float(data.get("minute"))),
        "x": x,
        "y": y,
        "target_x": target_x,
        "target_y": target_y,
        "success": _as_bool(data.get("success")),
        "player_id": _as_str(data.get("player_id")),
    }

    if event_type == "pass":
        return PassEvent(
            **common,
            pass_target=_as_str(data.get("pass_target")),
            pass_target_name=_as_str(data.get("pass_target_name")),
        )
    if event_type == "shot":
        xg = data.get("xg")
        return ShotEvent(
            **common,
            is_goal=_as_bool(data.get("is_goal")),
            shot_outcome=_as_str(data.get("shot_outcome")),
            is_big_chance=_as_bool(data.get("is_big_chance")),
            xg=None if _is_missing(xg) else float(xg),
        )
    return EVENT_CLASSES[event_type](**common)


def events_from_records(
    records: Iterable[Mapping[str, Any]], *, clamp: bool = False
) -> list[MatchEvent]:
    return [event_from_record(record, clamp=clamp) for record in records]


def events_from_frame(df: pd.DataFrame, *, clamp: bool = False) -> list[MatchEvent]:
    """Convert an event table (one row per event) into typed events."""
    if "type" not in df.columns:
        raise ValueError("Event table is missing required column: 'type'")
    return events_from_records(df.to_dict(orient="records"), clamp=clamp)


def events_to_frame(events: Sequence[MatchEvent]) -> pd.DataFrame:
    """Flatten typed events into a table with a ``type`` column."""
    rows = [{"type": event.event_type, **asdict(event)} for event in events]
    if not rows:
        return pd.DataFrame(
            columns=["type", "minute", "x", "y", "target_x", "target_y", "success", "player_id"]
        )
    return pd.DataFrame(rows)


def load_match_events(path: str | Path, *, clamp: bool = False) -> list[MatchEvent]:
    """Load events from a CSV or JSON (list of records) file."""
    source = Path(path)
    if not source.exists():
        raise FileNotFoundError(f"Match event file not found: {source}")

    suffix = source.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(source, dtype=str)
    elif suffix == ".json":
        df = pd.read_json(source, orient="records", dtype=False, convert_dates=False)
    else:
        raise ValueError(f"Unsupported event file type {suffix!r}; expected .csv or .json")

    defaulted = _count_defaulted_rows(df)
    if defaulted:
        logger.info("%d of %d rows in %s had missing numeric fields set to 0", defaulted, len(df), source)
    events = events_from_frame(df, clamp=clamp)
    logger.debug("Loaded %d events from %s", len(events), source)
    return events


def with_player(events: Iterable[MatchEvent], player_id: str) -> list[MatchEvent]:
    """Stamp a player id onto events fetched per player."""
    return [replace(event, player_id=player_id) for event in events]


def pass_row_to_event(row: Mapping[str, Any]) -> PassEvent:
    """Convert a stored pass row (start/end columns) into a pass event."""
    return PassEvent(
        minute=int(_as_float(row.get("minute"))),
        x=_as_float(row.get("start_x")),
        y=_as_float(row.get("start_y")),
        target_x=_as_float(row.get("end_x")),
        target_y=_as_float(row.get("end_y")),
        success=_as_bool(row.get("is_successful")),
        player_id=_as_str(row.get("player_id")),
        pass_target=_as_str(row.get("receiver_id")),
        pass_target_name=_as_str(row.get("receiver_name")),
    )


def shot_row_to_event(row: Mapping[str, Any]) -> ShotEvent:
    """Convert a stored shot row; the destination is the goal centre."""
    is_goal = _as_bool(row.get("is_goal"))
    return ShotEvent(
        minute=int(_as_float(row.get("minute"))),
        x=_as_float(row.get("shot_x")),
        y=_as_float(row.get("shot_y")),
        target_x=100.0,
        target_y=50.0,
        success=is_goal,
        player_id=_as_str(row.get("player_id")),
        is_goal=is_goal,
    )


def duel_row_to_event(row: Mapping[str, Any]) -> DribbleEvent | TackleEvent:
    """Convert a stored duel row; dribble duels map to dribbles, the rest to tackles."""
    x = _as_float(row.get("duel_x"))
    y = _as_float(row.get("duel_y"))
    cls = DribbleEvent if row.get("duel_type") == "dribble" else TackleEvent
    return cls(
        minute=int(_as_float(row.get("minute"))),
        x=x,
        y=y,
        target_x=x,
        target_y=y,
        success=_as_bool(row.get("is_successful")),
        player_id=_as_str(row.get("player_id")),
    )


def passes(events: Iterable[MatchEvent]) -> list[PassEvent]:
    return [event for event in events if isinstance(event, PassEvent)]


def shots(events: Iterable[MatchEvent]) -> list[ShotEvent]:
    return [event for event in events if isinstance(event, ShotEvent)]


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _as_float(value: Any, default: float = 0.0) -> float:
    if _is_missing(value):
        return default
    return float(value)


def _as_bool(value: Any) -> bool:
    if _is_missing(value):
        return False
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "t"}
    return bool(value)


def _as_str(value: Any) -> str | None:
    if _is_missing(value):
        return None
    return str(value).strip()


def _count_defaulted_rows(df: pd.DataFrame) -> int:
    numeric_cols = [col for col in ("minute", "x", "y") if col in df.columns]
    if not numeric_cols:
        return int(len(df))
    return int(df[numeric_cols].isna().any(axis=1).sum())
