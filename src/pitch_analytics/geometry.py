"""Coordinate conversions between event, pitch-unit, and viewport spaces."""

from __future__ import annotations

from dataclasses import dataclass
import math

from .constants import NORMALIZED_MAX, PITCH_LENGTH_M, PITCH_WIDTH_M


@dataclass(frozen=True)
class ViewBox:
    """SVG-style view box in pitch units (origin offset plus extent)."""

    min_x: float
    min_y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("view box width and height must be > 0")


# Padded view boxes used by the tactical field layouts.
VIEW_BOXES: dict[str, ViewBox] = {
    "full": ViewBox(-8.0, -6.0, 126.0, 80.0),
    "left_half": ViewBox(-8.0, -6.0, 72.0, 80.0),
    "right_half": ViewBox(41.0, -6.0, 72.0, 80.0),
    "top_half": ViewBox(-8.0, -6.0, 72.0, 80.0),
    "bottom_half": ViewBox(41.0, -6.0, 72.0, 80.0),
}
VERTICAL_VIEW_MODES = frozenset({"top_half", "bottom_half"})


def to_pitch_units(x: float, y: float) -> tuple[float, float]:
    """Map 0-100 event coordinates to metres on a 105 x 68 pitch."""
    return x / NORMALIZED_MAX * PITCH_LENGTH_M, y / NORMALIZED_MAX * PITCH_WIDTH_M


def distance_meters(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance in metres between two event-space points."""
    px1, py1 = to_pitch_units(x1, y1)
    px2, py2 = to_pitch_units(x2, y2)
    return math.hypot(px2 - px1, py2 - py1)


def to_viewport_percent(
    x: float,
    y: float,
    view_box: ViewBox = VIEW_BOXES["full"],
    *,
    vertical: bool = False,
) -> tuple[float, float]:
    """Position of an event-space point as a percentage of a padded view box.

    With ``vertical`` the result is rotated a quarter turn clockwise, which is
    how the half-pitch layouts are displayed upright.
    """
    px, py = to_pitch_units(x, y)
    vx = (px - view_box.min_x) / view_box.width * 100.0
    vy = (py - view_box.min_y) / view_box.height * 100.0
    if vertical:
        return 100.0 - vy, vx
    return vx, vy


def viewport_for_mode(x: float, y: float, view_mode: str = "full") -> tuple[float, float]:
    """Viewport percentages for one of the named tactical-field layouts."""
    if view_mode not in VIEW_BOXES:
        raise ValueError(f"Unknown view mode {view_mode!r}; expected one of {sorted(VIEW_BOXES)}")
    return to_viewport_percent(
        x,
        y,
        VIEW_BOXES[view_mode],
        vertical=view_mode in VERTICAL_VIEW_MODES,
    )


def clamp_point(x: float, y: float) -> tuple[float, float]:
    """Clamp an event-space point into [0, 100] on both axes."""
    return (
        min(max(x, 0.0), NORMALIZED_MAX),
        min(max(y, 0.0), NORMALIZED_MAX),
    )
