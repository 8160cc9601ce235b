"""CLI entrypoints for the match analytics project."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .config import configure_logging, default_project_config, resolve_events_file, resolve_output_dir
from .events import load_match_events, shots
from .intervals import find_interval
from .pipeline import MatchAnalysisResults, analyze_match
from .presentation import build_chance_snapshot_text
from .results_contract import write_results_contract, write_results_tables
from .visuals import close_figures, plot_chance_map, plot_heatmap_grid, plot_shot_map, save_figure

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarize chances, passes, and shots from a match event file.")
    parser.add_argument(
        "--input",
        default=None,
        help="Path to a match event CSV/JSON (default: auto-resolve from project config).",
    )
    parser.add_argument(
        "--interval",
        default=None,
        help="Interval label, e.g. \"Full Match\", \"1st Half\", \"10-20'\" (default: from project config).",
    )
    parser.add_argument("--player", default=None, help="Only analyze events by this player id.")
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for table/figure exports (default: auto-resolve from project config).",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Write tables, figures, and results.json to the output directory.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = default_project_config()
    configure_logging(config)

    try:
        interval = find_interval(args.interval or config.analysis.default_interval)
    except ValueError as exc:
        parser.error(str(exc))

    input_path = resolve_events_file(args.input)
    events = load_match_events(input_path, clamp=config.runtime.clamp_coordinates)
    results = analyze_match(events, interval, player_id=args.player)

    summary = {
        "input_path": str(input_path),
        "interval": interval.label,
        "player_id": args.player,
        "event_count": len(results.events),
        "chances": results.chance_summary.as_dict(),
        "passes": results.pass_summary,
        "shots": results.shot_summary,
    }

    if args.export:
        output_dir = resolve_output_dir(args.output_dir)
        contract = export_results(results, input_path, output_dir, dpi=config.analysis.figure_dpi)
        summary["results_contract"] = str(contract)

    snapshot = build_chance_snapshot_text(
        results.chance_summary,
        interval_label=interval.label,
        shot_summary=results.shot_summary,
    )
    print(snapshot)
    print(json.dumps(summary, indent=2))


def export_results(
    results: MatchAnalysisResults,
    input_path: Path,
    output_dir: Path,
    *,
    dpi: int = 200,
) -> Path:
    """Write tables, the standard figures, and `results.json`."""
    fig_dir = output_dir / "figures"
    fig_dir.mkdir(parents=True, exist_ok=True)

    table_paths = write_results_tables(results, output_dir)

    label = results.interval.label
    figures = {
        "chance_map": plot_chance_map(
            results.chances, zone_stats=results.zone_stats, title=f"Chances Created ({label})"
        )[0],
        "shot_map": plot_shot_map(shots(results.events), title=f"Shot Map ({label})")[0],
        "position_heatmap": plot_heatmap_grid(results.position_heatmap, title=f"Position Heatmap ({label})")[0],
        "passing_heatmap": plot_heatmap_grid(results.passing_heatmap, title=f"Pass Origins ({label})")[0],
    }
    figure_paths: dict[str, Path] = {}
    for name, fig in figures.items():
        path = fig_dir / f"{name}.png"
        save_figure(fig, path, dpi=dpi)
        figure_paths[name] = path
    close_figures(list(figures.values()))
    logger.info("Saved %d figures to %s", len(figure_paths), fig_dir)

    return write_results_contract(
        results,
        input_path=input_path,
        output_dir=output_dir,
        table_paths=table_paths,
        figure_paths=figure_paths,
    )


if __name__ == "__main__":
    main()
