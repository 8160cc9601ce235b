"""Export chance maps and zone tables for every interval of a match."""

from __future__ import annotations

import argparse

import pandas as pd

from pitch_analytics.config import (
    configure_logging,
    default_project_config,
    resolve_events_file,
    resolve_output_dir,
)
from pitch_analytics.events import load_match_events
from pitch_analytics.intervals import FULL_MATCH, available_intervals
from pitch_analytics.pipeline import cached_analyze_match
from pitch_analytics.presentation import coach_zone_table
from pitch_analytics.visuals import close_figures, plot_chance_map, plot_heatmap_grid, save_figure


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export per-interval chance maps, chance heatmaps, and zone tables."
    )
    parser.add_argument(
        "--input",
        default=None,
        help="Path to a match event CSV/JSON (default: auto-resolve from project config).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for figure and table exports (default: auto-resolve from project config).",
    )
    parser.add_argument(
        "--mode",
        choices=("10min", "half"),
        default="half",
        help="Interval granularity (default: half).",
    )
    parser.add_argument("--player", default=None, help="Only analyze events by this player id.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = default_project_config()
    configure_logging(config)

    input_path = resolve_events_file(args.input)
    output_dir = resolve_output_dir(args.output_dir)
    fig_dir = output_dir / "figures" / "intervals"
    table_dir = output_dir / "tables" / "intervals"
    fig_dir.mkdir(parents=True, exist_ok=True)
    table_dir.mkdir(parents=True, exist_ok=True)

    events = load_match_events(input_path, clamp=config.runtime.clamp_coordinates)
    intervals = (FULL_MATCH, *available_intervals(events, args.mode))

    overview_rows = []
    for interval in intervals:
        results = cached_analyze_match(events, interval, player_id=args.player)
        slug = interval.label.lower().replace(" ", "_").replace("'", "")

        fig1, _ = plot_chance_map(
            results.chances,
            zone_stats=results.zone_stats,
            title=f"Chances Created ({interval.label})",
        )
        save_figure(fig1, fig_dir / f"chance_map_{slug}.png", dpi=config.analysis.figure_dpi)
        fig2, _ = plot_heatmap_grid(
            results.chance_heatmap,
            title=f"Chance Destinations ({interval.label})",
        )
        save_figure(fig2, fig_dir / f"chance_heatmap_{slug}.png", dpi=config.analysis.figure_dpi)
        close_figures([fig1, fig2])

        coach_zone_table(results.zone_table).to_csv(table_dir / f"zones_{slug}.csv", index=False)
        overview_rows.append({"interval": interval.label, **results.chance_summary.as_dict()})

    pd.DataFrame(overview_rows).to_csv(table_dir / "interval_overview.csv", index=False)

    print("Export complete")
    print(f"Events: {len(events)}")
    print(f"Input data: {input_path}")
    print(f"Intervals: {len(intervals)}")
    print(f"Figures: {fig_dir}")
    print(f"Tables: {table_dir}")


if __name__ == "__main__":
    main()
