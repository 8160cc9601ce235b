from __future__ import annotations

import numpy as np
import pytest

from pitch_analytics.events import DribbleEvent, PassEvent
from pitch_analytics.heatmap import (
    FINAL_THIRD,
    PitchRegion,
    accumulate_heatmap,
    cell_index,
    normalized_intensity,
    peak_position,
)


def _touch(x: float, y: float) -> DribbleEvent:
    return DribbleEvent(minute=1, x=x, y=y, target_x=x, target_y=y, success=True)


def test_single_event_spreads_to_orthogonal_neighbours() -> None:
    grid = accumulate_heatmap([_touch(50, 50)], grid_cols=12, grid_rows=8)
    assert grid.cells[4, 6] == pytest.approx(1.0)
    for row, col in ((3, 6), (5, 6), (4, 5), (4, 7)):
        assert grid.cells[row, col] == pytest.approx(0.3)
    assert grid.cells[3, 5] == 0.0
    assert grid.cells.sum() == pytest.approx(2.2)
    assert grid.direct_hits.sum() == 1


def test_corner_event_only_spreads_in_bounds() -> None:
    grid = accumulate_heatmap([_touch(0, 0)], grid_cols=4, grid_rows=4)
    assert grid.cells.sum() == pytest.approx(1.6)


def test_edge_coordinates_clamp_into_last_cell() -> None:
    assert cell_index(100, 100, 12, 8) == (7, 11)
    assert cell_index(-3, 0, 12, 8) == (0, 0)


def test_unsmoothed_grid_counts_hits() -> None:
    grid = accumulate_heatmap([_touch(10, 10), _touch(11, 11)], grid_cols=10, grid_rows=6, smoothing_weight=0)
    assert grid.cells.sum() == 2.0
    assert grid.max_intensity == 2.0


def test_region_filter_and_target_coordinates() -> None:
    deep = PassEvent(minute=1, x=20, y=50, target_x=40, target_y=50, success=True)
    into_box = PassEvent(minute=2, x=60, y=50, target_x=95, target_y=50, success=True)
    grid = accumulate_heatmap(
        [deep, into_box], grid_cols=6, grid_rows=6, smoothing_weight=0, region=FINAL_THIRD, use_target=True
    )
    assert grid.event_count == 1
    assert grid.direct_hits[3, 5] == 1


def test_empty_grid_reports_no_data() -> None:
    grid = accumulate_heatmap([])
    assert not grid.has_data
    assert grid.max_intensity == 0.0
    assert np.isnan(normalized_intensity(grid)).all()
    assert peak_position(grid) is None


def test_normalized_intensity_peaks_at_one() -> None:
    grid = accumulate_heatmap([_touch(50, 50), _touch(50, 50), _touch(10, 10)])
    levels = normalized_intensity(grid)
    assert np.nanmax(levels) == pytest.approx(1.0)


def test_peak_position_centres_hottest_cell() -> None:
    grid = accumulate_heatmap([_touch(50, 50)], grid_cols=12, grid_rows=8)
    x, y = peak_position(grid)
    assert x == pytest.approx(6.5 / 12 * 105)
    assert y == pytest.approx(4.5 / 8 * 68)


def test_peak_position_keeps_team_half_and_padding() -> None:
    grid = accumulate_heatmap([_touch(99, 1)], grid_cols=12, grid_rows=8)
    home_x, home_y = peak_position(grid, is_home_team=True)
    assert home_x == 52.0
    assert home_y == 6.0
    away_x, _ = peak_position(grid, is_home_team=False)
    assert away_x == pytest.approx(100.0)


def test_invalid_arguments_raise() -> None:
    with pytest.raises(ValueError):
        accumulate_heatmap([], grid_cols=0)
    with pytest.raises(ValueError):
        accumulate_heatmap([], smoothing_weight=-0.1)
    with pytest.raises(ValueError):
        PitchRegion(x_min=50, x_max=50)


def test_direct_hits_match_event_count() -> None:
    events = [_touch(x, y) for x in range(0, 101, 10) for y in range(0, 101, 25)]
    grid = accumulate_heatmap(events, grid_cols=10, grid_rows=6)
    assert grid.direct_hits.sum() == len(events) == grid.event_count
    assert grid.cells.sum() >= len(events)
