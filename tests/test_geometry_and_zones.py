from __future__ import annotations

import pytest

from pitch_analytics.geometry import (
    VIEW_BOXES,
    ViewBox,
    clamp_point,
    distance_meters,
    to_pitch_units,
    to_viewport_percent,
    viewport_for_mode,
)
from pitch_analytics.zones import (
    ZONE_KEYS,
    classify_zone,
    corner_zone,
    depth_zone,
    horizontal_zone,
    is_in_box,
    is_in_final_third,
    zone_label,
)


def test_pitch_unit_conversion_scales_to_105_by_68() -> None:
    assert to_pitch_units(100, 100) == pytest.approx((105.0, 68.0))
    assert to_pitch_units(50, 50) == pytest.approx((52.5, 34.0))


def test_distance_uses_metres_not_event_units() -> None:
    assert distance_meters(0, 0, 100, 0) == pytest.approx(105.0)
    assert distance_meters(0, 0, 0, 100) == pytest.approx(68.0)
    assert distance_meters(20, 20, 20, 20) == 0.0


def test_viewport_percent_for_full_view_box() -> None:
    vx, vy = to_viewport_percent(0, 0)
    assert vx == pytest.approx(8 / 126 * 100)
    assert vy == pytest.approx(6 / 80 * 100)


def test_vertical_view_mode_rotates_quarter_turn() -> None:
    horizontal = to_viewport_percent(30, 40, VIEW_BOXES["top_half"])
    vertical = viewport_for_mode(30, 40, "top_half")
    assert vertical == pytest.approx((100 - horizontal[1], horizontal[0]))


def test_unknown_view_mode_raises() -> None:
    with pytest.raises(ValueError, match="Unknown view mode"):
        viewport_for_mode(10, 10, "diagonal")


def test_view_box_rejects_empty_extent() -> None:
    with pytest.raises(ValueError):
        ViewBox(0, 0, 0, 10)


def test_clamp_point_bounds_both_axes() -> None:
    assert clamp_point(-5, 120) == (0.0, 100.0)
    assert clamp_point(40, 60) == (40, 60)


def test_horizontal_zone_boundaries_belong_to_center() -> None:
    assert horizontal_zone(29.9) == "left_wing"
    assert horizontal_zone(30) == "center"
    assert horizontal_zone(70) == "center"
    assert horizontal_zone(70.1) == "right_wing"


def test_box_and_final_third_thresholds() -> None:
    assert is_in_final_third(66.67)
    assert not is_in_final_third(66.6)
    assert is_in_box(83, 21)
    assert is_in_box(83, 79)
    assert not is_in_box(82.9, 50)
    assert not is_in_box(90, 80)


def test_depth_zone_precedence() -> None:
    assert depth_zone(95, 10) == "corner_left"
    assert depth_zone(95, 90) == "corner_right"
    assert depth_zone(96, 50) == "six_yard"
    assert depth_zone(88, 50) == "inside_box"
    assert depth_zone(75, 50) == "edge_of_box"
    assert depth_zone(40, 50) == "deep"


def test_corner_zone_requires_x_from_90() -> None:
    assert corner_zone(89.9, 5) is None
    assert corner_zone(90, 15) == "corner_left"
    assert corner_zone(90, 85) == "corner_right"
    assert corner_zone(90, 50) is None


def test_classify_zone_composes_keys() -> None:
    assert classify_zone(95, 10) == "corner_left"
    assert classify_zone(90, 50) == "center-inside_box"
    assert classify_zone(75, 20) == "left_wing-edge_of_box"
    assert classify_zone(20, 80) == "right_wing-deep"


def test_zone_keys_are_complete_and_labelled() -> None:
    assert len(ZONE_KEYS) == 14
    assert len(set(ZONE_KEYS)) == 14
    assert zone_label("center-six_yard") == "Center / 6-Yard Box"
    assert zone_label("corner_right") == "Right Corner"
    with pytest.raises(ValueError):
        zone_label("center-midfield")


def test_every_point_maps_to_a_known_zone() -> None:
    for x in range(0, 101, 2):
        for y in range(0, 101, 2):
            key = classify_zone(x, y)
            assert key in ZONE_KEYS
            assert classify_zone(x, y) == key
