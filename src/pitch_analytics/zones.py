"""Fixed-threshold spatial zone classification."""

from __future__ import annotations

from typing import Literal

from .constants import (
    BOX_START_X,
    BOX_Y_MAX,
    BOX_Y_MIN,
    CORNER_ZONE_LEFT_Y,
    CORNER_ZONE_RIGHT_Y,
    CORNER_ZONE_X,
    FINAL_THIRD_START_X,
    LEFT_WING_END_Y,
    RIGHT_WING_START_Y,
    SIX_YARD_START_X,
    SIX_YARD_Y_MAX,
    SIX_YARD_Y_MIN,
)

HorizontalZone = Literal["left_wing", "center", "right_wing"]
DepthZone = Literal["deep", "edge_of_box", "inside_box", "six_yard", "corner_left", "corner_right"]

HORIZONTAL_ZONES: tuple[HorizontalZone, ...] = ("left_wing", "center", "right_wing")
FIELD_DEPTH_ZONES: tuple[DepthZone, ...] = ("deep", "edge_of_box", "inside_box", "six_yard")
CORNER_ZONES: tuple[DepthZone, ...] = ("corner_left", "corner_right")

ZONE_KEYS: tuple[str, ...] = (
    "left_wing-deep",
    "left_wing-edge_of_box",
    "left_wing-inside_box",
    "left_wing-six_yard",
    "center-deep",
    "center-edge_of_box",
    "center-inside_box",
    "center-six_yard",
    "right_wing-deep",
    "right_wing-edge_of_box",
    "right_wing-inside_box",
    "right_wing-six_yard",
    "corner_left",
    "corner_right",
)

HORIZONTAL_LABELS = {
    "left_wing": "Left Wing",
    "center": "Center",
    "right_wing": "Right Wing",
}
DEPTH_LABELS = {
    "deep": "Deep",
    "edge_of_box": "Edge of Box",
    "inside_box": "Inside Box",
    "six_yard": "6-Yard Box",
    "corner_left": "Left Corner",
    "corner_right": "Right Corner",
}


def is_in_final_third(x: float) -> bool:
    return x >= FINAL_THIRD_START_X


def is_in_box(x: float, y: float) -> bool:
    return x >= BOX_START_X and BOX_Y_MIN <= y <= BOX_Y_MAX


def is_in_six_yard_box(x: float, y: float) -> bool:
    return x >= SIX_YARD_START_X and SIX_YARD_Y_MIN <= y <= SIX_YARD_Y_MAX


def corner_zone(x: float, y: float) -> DepthZone | None:
    """Return the corner zone containing the point, if any."""
    if x < CORNER_ZONE_X:
        return None
    if y <= CORNER_ZONE_LEFT_Y:
        return "corner_left"
    if y >= CORNER_ZONE_RIGHT_Y:
        return "corner_right"
    return None


def is_in_corner_zone(x: float, y: float) -> bool:
    return corner_zone(x, y) is not None


def horizontal_zone(y: float) -> HorizontalZone:
    """Width category; boundaries at exactly 30 and 70 belong to the centre."""
    if y < LEFT_WING_END_Y:
        return "left_wing"
    if y > RIGHT_WING_START_Y:
        return "right_wing"
    return "center"


def depth_zone(x: float, y: float) -> DepthZone:
    """Depth category, first match wins: corner, six-yard, box, final third, deep."""
    corner = corner_zone(x, y)
    if corner is not None:
        return corner
    if is_in_six_yard_box(x, y):
        return "six_yard"
    if is_in_box(x, y):
        return "inside_box"
    if is_in_final_third(x):
        return "edge_of_box"
    return "deep"


def zone_key(horizontal: HorizontalZone, depth: DepthZone) -> str:
    if depth in CORNER_ZONES:
        return depth
    return f"{horizontal}-{depth}"


def classify_zone(x: float, y: float) -> str:
    """Composite zone key for an event-space point."""
    return zone_key(horizontal_zone(y), depth_zone(x, y))


def zone_label(key: str) -> str:
    """Human-readable label for a zone key."""
    if key in CORNER_ZONES:
        return DEPTH_LABELS[key]
    if key not in ZONE_KEYS:
        raise ValueError(f"Unknown zone key: {key!r}")
    horizontal, depth = key.split("-", maxsplit=1)
    return f"{HORIZONTAL_LABELS[horizontal]} / {DEPTH_LABELS[depth]}"
