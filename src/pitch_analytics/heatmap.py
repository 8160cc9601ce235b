"""Grid heatmap accumulation with neighbour smoothing."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable

import numpy as np

from .constants import (
    FINAL_THIRD_START_X,
    HEATMAP_NEIGHBOR_WEIGHT,
    NORMALIZED_MAX,
    PITCH_LENGTH_M,
    PITCH_WIDTH_M,
)

_NEIGHBOR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True)
class PitchRegion:
    """Rectangular area of the pitch in 0-100 event coordinates."""

    x_min: float = 0.0
    x_max: float = NORMALIZED_MAX
    y_min: float = 0.0
    y_max: float = NORMALIZED_MAX

    def __post_init__(self) -> None:
        if self.x_max <= self.x_min or self.y_max <= self.y_min:
            raise ValueError("region max bounds must be greater than min bounds")

    def contains(self, x: float, y: float) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max


FULL_PITCH = PitchRegion()
FINAL_THIRD = PitchRegion(x_min=FINAL_THIRD_START_X)


@dataclass(frozen=True)
class HeatmapGrid:
    """Accumulated intensities (rows follow y, columns follow x)."""

    cells: np.ndarray
    direct_hits: np.ndarray
    region: PitchRegion
    event_count: int

    @property
    def grid_rows(self) -> int:
        return int(self.cells.shape[0])

    @property
    def grid_cols(self) -> int:
        return int(self.cells.shape[1])

    @property
    def max_intensity(self) -> float:
        return float(self.cells.max()) if self.cells.size else 0.0

    @property
    def has_data(self) -> bool:
        return self.event_count > 0


def cell_index(
    x: float,
    y: float,
    grid_cols: int,
    grid_rows: int,
    region: PitchRegion = FULL_PITCH,
) -> tuple[int, int]:
    """(row, col) for a point, clamped into the grid."""
    norm_x = (x - region.x_min) / (region.x_max - region.x_min)
    norm_y = (y - region.y_min) / (region.y_max - region.y_min)
    col = min(max(math.floor(norm_x * grid_cols), 0), grid_cols - 1)
    row = min(max(math.floor(norm_y * grid_rows), 0), grid_rows - 1)
    return row, col


def accumulate_heatmap(
    events: Iterable[object],
    grid_cols: int = 12,
    grid_rows: int = 8,
    *,
    smoothing_weight: float = HEATMAP_NEIGHBOR_WEIGHT,
    region: PitchRegion = FULL_PITCH,
    use_target: bool = False,
) -> HeatmapGrid:
    """Bucket events into a grid, spreading partial weight to orthogonal neighbours.

    Each event adds 1.0 to its own cell and ``smoothing_weight`` to each
    in-bounds neighbour. Events outside ``region`` are skipped.
    """
    if grid_cols < 1 or grid_rows < 1:
        raise ValueError("grid_cols and grid_rows must be >= 1")
    if smoothing_weight < 0:
        raise ValueError("smoothing_weight must be >= 0")

    cells = np.zeros((grid_rows, grid_cols), dtype=float)
    hits = np.zeros((grid_rows, grid_cols), dtype=int)
    count = 0

    for event in events:
        if use_target:
            x, y = event.target_x, event.target_y
        else:
            x, y = event.x, event.y
        if region != FULL_PITCH and not region.contains(x, y):
            continue

        row, col = cell_index(x, y, grid_cols, grid_rows, region)
        cells[row, col] += 1.0
        hits[row, col] += 1
        count += 1

        if smoothing_weight == 0:
            continue
        for d_row, d_col in _NEIGHBOR_OFFSETS:
            n_row, n_col = row + d_row, col + d_col
            if 0 <= n_row < grid_rows and 0 <= n_col < grid_cols:
                cells[n_row, n_col] += smoothing_weight

    return HeatmapGrid(cells=cells, direct_hits=hits, region=region, event_count=count)


def normalized_intensity(grid: HeatmapGrid) -> np.ndarray:
    """Cells scaled to [0, 1]; all-NaN when the grid holds no data."""
    max_value = grid.max_intensity
    if max_value <= 0:
        return np.full(grid.cells.shape, np.nan)
    return grid.cells / max_value


def peak_position(
    grid: HeatmapGrid,
    *,
    is_home_team: bool | None = None,
    edge_padding_x: float = 5.0,
    edge_padding_y: float = 6.0,
) -> tuple[float, float] | None:
    """Pitch-unit centre of the hottest cell, for placing a player marker.

    Home players are kept in the left half and away players in the right;
    the result stays inside a padded pitch. Ties resolve to the first cell in
    row-major order.
    """
    if not grid.has_data:
        return None

    flat_index = int(np.argmax(grid.cells))
    row, col = divmod(flat_index, grid.grid_cols)
    region = grid.region
    x_norm = region.x_min + (col + 0.5) / grid.grid_cols * (region.x_max - region.x_min)
    y_norm = region.y_min + (row + 0.5) / grid.grid_rows * (region.y_max - region.y_min)
    x = x_norm / NORMALIZED_MAX * PITCH_LENGTH_M
    y = y_norm / NORMALIZED_MAX * PITCH_WIDTH_M

    if is_home_team is True:
        x = min(x, 52.0)
    elif is_home_team is False:
        x = max(x, 53.0)

    x = max(edge_padding_x, min(PITCH_LENGTH_M - edge_padding_x, x))
    y = max(edge_padding_y, min(PITCH_WIDTH_M - edge_padding_y, y))
    return x, y
