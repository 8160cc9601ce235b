"""Coach-facing text/table formatting helpers."""

from __future__ import annotations

import pandas as pd

from .aggregation import ChanceSummary


def build_chance_snapshot_text(
    chance_summary: ChanceSummary,
    *,
    interval_label: str,
    shot_summary: dict[str, float | int] | None = None,
) -> str:
    """Create a short text block summarizing chance creation for one interval."""
    shot_lines = ""
    if shot_summary is not None:
        shot_lines = (
            f"\n- Shots / on target / goals: {int(shot_summary['total'])} / "
            f"{int(shot_summary['on_target'])} / {int(shot_summary['goals'])}"
            f"\n- Total xG: {float(shot_summary['total_xg']):.2f}"
        )
    return (
        f"Chances Created ({interval_label})\n"
        f"- Total chances: {chance_summary.total}\n"
        f"- Box entries / final-third / corner zone: {chance_summary.box_entries} / "
        f"{chance_summary.final_third_chances} / {chance_summary.corner_zone_chances}\n"
        f"- Led to shot: {chance_summary.led_to_shot} ({chance_summary.conversion_rate}%)\n"
        f"- Led to goal: {chance_summary.led_to_goal}\n"
        f"- Left / center / right: {chance_summary.left_wing} / {chance_summary.center} / "
        f"{chance_summary.right_wing}"
        f"{shot_lines}"
    )


def coach_zone_table(zone_table: pd.DataFrame, *, include_empty: bool = False) -> pd.DataFrame:
    """Rename zone-stat columns for slide tables, busiest zones first."""
    table = zone_table.copy()
    if not include_empty:
        table = table[table["count"] > 0]
    table = table.sort_values("count", ascending=False, kind="stable")
    table = table.rename(
        columns={
            "zone_label": "Zone",
            "count": "Chances",
            "led_to_shot": "Led to shot",
            "led_to_goal": "Led to goal",
            "box_entries": "Box entries",
        }
    )
    return table[["Zone", "Chances", "Led to shot", "Led to goal", "Box entries"]].reset_index(drop=True)


def coach_connection_table(connections: pd.DataFrame, *, top_n: int = 10) -> pd.DataFrame:
    """Top passing links with readable column names."""
    table = connections.head(top_n).rename(
        columns={
            "from_name": "Player A",
            "to_name": "Player B",
            "total": "Passes",
            "successful": "Completed",
            "accuracy": "Accuracy (%)",
        }
    )
    return table[["Player A", "Player B", "Passes", "Completed", "Accuracy (%)"]].reset_index(drop=True)
