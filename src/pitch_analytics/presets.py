"""Analysis presets for repeatable heatmap and threshold choices."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import HEATMAP_NEIGHBOR_WEIGHT
from .heatmap import FINAL_THIRD, FULL_PITCH, PitchRegion


@dataclass(frozen=True)
class HeatmapConfig:
    """Grid resolution and smoothing for one heatmap view."""

    grid_cols: int
    grid_rows: int
    smoothing_weight: float = HEATMAP_NEIGHBOR_WEIGHT
    region: PitchRegion = FULL_PITCH
    use_target: bool = False


@dataclass(frozen=True)
class AnalysisPreset:
    """Single source of truth for per-view heatmap settings."""

    name: str
    rationale: str
    position_heatmap: HeatmapConfig
    passing_heatmap: HeatmapConfig
    chance_heatmap: HeatmapConfig


def preferred_analysis_preset() -> AnalysisPreset:
    """Default views used by the match dashboard."""
    return AnalysisPreset(
        name="Match Dashboard Zones v1",
        rationale=(
            "Smoothed 12x8 grid for where a player was active, raw 10x6 grid of pass "
            "origins, and a 6x6 final-third grid of chance destinations."
        ),
        position_heatmap=HeatmapConfig(grid_cols=12, grid_rows=8),
        passing_heatmap=HeatmapConfig(grid_cols=10, grid_rows=6, smoothing_weight=0.0),
        chance_heatmap=HeatmapConfig(
            grid_cols=6,
            grid_rows=6,
            smoothing_weight=0.0,
            region=FINAL_THIRD,
            use_target=True,
        ),
    )
