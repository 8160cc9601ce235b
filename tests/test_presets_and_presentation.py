from __future__ import annotations

import pandas as pd

from pitch_analytics.aggregation import ChanceSummary, aggregate_zone_stats, zone_stats_table
from pitch_analytics.heatmap import FINAL_THIRD, FULL_PITCH
from pitch_analytics.presentation import (
    build_chance_snapshot_text,
    coach_connection_table,
    coach_zone_table,
)
from pitch_analytics.presets import preferred_analysis_preset


def _summary(**overrides: int) -> ChanceSummary:
    values = {
        "total": 6,
        "box_entries": 3,
        "final_third_chances": 2,
        "corner_zone_chances": 1,
        "led_to_shot": 4,
        "led_to_goal": 1,
        "conversion_rate": 67,
        "left_wing": 2,
        "center": 3,
        "right_wing": 1,
        "deep": 0,
        "edge_of_box": 2,
        "inside_box": 3,
        "six_yard": 0,
        "max_count": 3,
    }
    values.update(overrides)
    return ChanceSummary(**values)


def test_preferred_preset_grids() -> None:
    preset = preferred_analysis_preset()
    assert (preset.position_heatmap.grid_cols, preset.position_heatmap.grid_rows) == (12, 8)
    assert preset.position_heatmap.smoothing_weight == 0.3
    assert preset.position_heatmap.region == FULL_PITCH
    assert preset.passing_heatmap.smoothing_weight == 0.0
    assert preset.chance_heatmap.region == FINAL_THIRD
    assert preset.chance_heatmap.use_target
    assert hash(preset) == hash(preferred_analysis_preset())


def test_chance_snapshot_text_contains_core_fields() -> None:
    text = build_chance_snapshot_text(_summary(), interval_label="1st Half")
    assert text.startswith("Chances Created (1st Half)")
    assert "Total chances: 6" in text
    assert "Led to shot: 4 (67%)" in text
    assert "Shots" not in text


def test_chance_snapshot_text_with_shots() -> None:
    shots = {"total": 5, "goals": 2, "on_target": 3, "accuracy": 60, "total_xg": 1.234}
    text = build_chance_snapshot_text(_summary(), interval_label="Full Match", shot_summary=shots)
    assert "Shots / on target / goals: 5 / 3 / 2" in text
    assert "Total xG: 1.23" in text


def test_coach_zone_table_hides_empty_zones() -> None:
    table = zone_stats_table(aggregate_zone_stats([]))
    assert coach_zone_table(table).empty
    full = coach_zone_table(table, include_empty=True)
    assert list(full.columns) == ["Zone", "Chances", "Led to shot", "Led to goal", "Box entries"]
    assert len(full) == 14


def test_coach_connection_table_columns() -> None:
    connections = pd.DataFrame(
        {
            "from_id": ["7", "8"],
            "to_id": ["9", "9"],
            "from_name": ["Silva", "Ortega"],
            "to_name": ["Moreau", "Moreau"],
            "total": [5, 2],
            "successful": [4, 2],
            "accuracy": [80, 100],
        }
    )
    out = coach_connection_table(connections, top_n=1)
    assert list(out.columns) == ["Player A", "Player B", "Passes", "Completed", "Accuracy (%)"]
    assert len(out) == 1
    assert out.iloc[0]["Player A"] == "Silva"
