"""Pass, chance, and shot classification from position and outcome."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Literal, Sequence

from .constants import (
    GOAL_CENTER_X,
    GOAL_CENTER_Y,
    KEY_PASS_TARGET_X,
    LONG_PASS_MIN_M,
    PROGRESSIVE_PASS_MIN_GAIN,
    SHORT_PASS_MAX_M,
    SHOT_FOLLOW_UP_MINUTES,
    XG_BOX_MULTIPLIER,
    XG_BOX_X,
    XG_CENTRAL_MULTIPLIER,
    XG_CENTRAL_Y_MAX,
    XG_CENTRAL_Y_MIN,
    XG_MAX,
    XG_MIN,
)
from .events import MatchEvent, PassEvent, ShotEvent, passes, shots
from .geometry import distance_meters
from .intervals import TimeInterval
from .zones import (
    DepthZone,
    HorizontalZone,
    depth_zone,
    horizontal_zone,
    is_in_box,
    is_in_corner_zone,
    is_in_final_third,
    zone_key,
)

PassLength = Literal["short", "medium", "long"]
ChanceType = Literal["box_entry", "final_third_chance", "corner_zone"]
ChanceFilter = Literal["all", "box_entry", "final_third", "corner"]
ShotResult = Literal["goal", "on_target", "off_target"]

CHANCE_TYPES: tuple[ChanceType, ...] = ("box_entry", "final_third_chance", "corner_zone")
PASS_LENGTHS: tuple[PassLength, ...] = ("short", "medium", "long")

_CHANCE_FILTERS: dict[str, ChanceType | None] = {
    "all": None,
    "box_entry": "box_entry",
    "final_third": "final_third_chance",
    "corner": "corner_zone",
}


@dataclass(frozen=True)
class ProcessedChance:
    """A successful pass tagged as a chance, with zone and follow-up flags."""

    chance_type: ChanceType
    event: PassEvent
    index: int
    horizontal_zone: HorizontalZone
    depth_zone: DepthZone
    zone_key: str
    is_corner_zone: bool
    is_in_box: bool
    led_to_shot: bool
    led_to_goal: bool


def classify_pass_length(distance_m: float) -> PassLength:
    """Bucket a pass length: [0, 10) short, [10, 25) medium, [25, inf) long."""
    if distance_m < SHORT_PASS_MAX_M:
        return "short"
    if distance_m < LONG_PASS_MIN_M:
        return "medium"
    return "long"


def pass_length(event: PassEvent) -> PassLength:
    return classify_pass_length(distance_meters(event.x, event.y, event.target_x, event.target_y))


def is_progressive(event: PassEvent) -> bool:
    return event.target_x - event.x > PROGRESSIVE_PASS_MIN_GAIN


def is_key_pass(event: PassEvent) -> bool:
    return event.success and event.target_x > KEY_PASS_TARGET_X


def _follow_up_shots(minute: int, shot_events: Sequence[ShotEvent]) -> list[ShotEvent]:
    return [
        shot
        for shot in shot_events
        if minute <= shot.minute <= minute + SHOT_FOLLOW_UP_MINUTES
    ]


def led_to_shot(event: PassEvent, shot_events: Sequence[ShotEvent]) -> bool:
    """True when any shot occurs in the pass minute or the minute after.

    This is minute-level proximity, not possession tracking, so several passes
    in the same minute can all be credited with one shot.
    """
    return bool(_follow_up_shots(event.minute, shot_events))


def led_to_goal(event: PassEvent, shot_events: Sequence[ShotEvent]) -> bool:
    return any(shot.scored for shot in _follow_up_shots(event.minute, shot_events))


def classify_chance(
    event: PassEvent, shot_events: Sequence[ShotEvent] = ()
) -> ChanceType | None:
    """Chance type of a pass, or None when it does not count as a chance."""
    if not event.success:
        return None
    if is_in_corner_zone(event.target_x, event.target_y):
        return "corner_zone"
    ends_in_box = is_in_box(event.target_x, event.target_y)
    if ends_in_box and not is_in_box(event.x, event.y):
        return "box_entry"
    if is_in_final_third(event.target_x) and not ends_in_box:
        if is_progressive(event) or led_to_shot(event, shot_events):
            return "final_third_chance"
    return None


def classify_chances(
    events: Sequence[MatchEvent], interval: TimeInterval | None = None
) -> list[ProcessedChance]:
    """Tag every chance-creating pass, optionally only those inside ``interval``.

    Only passes are tested against the interval. Follow-up shots are looked up
    over the whole event list, so a pass at 19' in ``10-20'`` still counts a
    shot at 20'. ``index`` is the position among all passes in ``events``.
    """
    shot_events = shots(events)

    chances: list[ProcessedChance] = []
    for index, event in enumerate(passes(events)):
        if interval is not None and not interval.contains(event.minute):
            continue
        chance_type = classify_chance(event, shot_events)
        if chance_type is None:
            continue
        horizontal = horizontal_zone(event.target_y)
        depth = depth_zone(event.target_x, event.target_y)
        chances.append(
            ProcessedChance(
                chance_type=chance_type,
                event=event,
                index=index,
                horizontal_zone=horizontal,
                depth_zone=depth,
                zone_key=zone_key(horizontal, depth),
                is_corner_zone=chance_type == "corner_zone",
                is_in_box=is_in_box(event.target_x, event.target_y),
                led_to_shot=led_to_shot(event, shot_events),
                led_to_goal=led_to_goal(event, shot_events),
            )
        )
    return chances


def filter_chances(chances: Sequence[ProcessedChance], kind: ChanceFilter = "all") -> list[ProcessedChance]:
    if kind not in _CHANCE_FILTERS:
        raise ValueError(f"Unknown chance filter {kind!r}; expected one of {list(_CHANCE_FILTERS)}")
    wanted = _CHANCE_FILTERS[kind]
    if wanted is None:
        return list(chances)
    return [chance for chance in chances if chance.chance_type == wanted]


def estimate_xg(x: float, y: float) -> float:
    """Positional shot-quality proxy in [0.02, 0.95].

    A display heuristic (distance to goal centre with box and central-corridor
    boosts), not a fitted expected-goals model.
    """
    distance = math.hypot(GOAL_CENTER_X - x, GOAL_CENTER_Y - y)
    xg = max(0.0, 1.0 - distance / 100.0)
    if x > XG_BOX_X:
        xg *= XG_BOX_MULTIPLIER
    if XG_CENTRAL_Y_MIN < y < XG_CENTRAL_Y_MAX:
        xg *= XG_CENTRAL_MULTIPLIER
    return min(XG_MAX, max(XG_MIN, xg))


def shot_xg(shot: ShotEvent) -> float:
    if shot.xg is not None:
        return shot.xg
    return estimate_xg(shot.x, shot.y)


def shot_result(shot: ShotEvent) -> ShotResult:
    if shot.scored:
        return "goal"
    if shot.success or shot.shot_outcome == "saved":
        return "on_target"
    return "off_target"
