"""Export tables and the `results.json` contract consumed by the dashboard."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from .constants import (
    BOX_START_X,
    BOX_Y_MAX,
    BOX_Y_MIN,
    CORNER_ZONE_LEFT_Y,
    CORNER_ZONE_RIGHT_Y,
    CORNER_ZONE_X,
    FINAL_THIRD_START_X,
    LEFT_WING_END_Y,
    LONG_PASS_MIN_M,
    PITCH_LENGTH_M,
    PITCH_WIDTH_M,
    RIGHT_WING_START_Y,
    SHORT_PASS_MAX_M,
    SHOT_FOLLOW_UP_MINUTES,
    SIX_YARD_START_X,
    SIX_YARD_Y_MAX,
    SIX_YARD_Y_MIN,
    XG_MAX,
    XG_MIN,
)
from .heatmap import HeatmapGrid
from .pipeline import MatchAnalysisResults
from .zones import ZONE_KEYS

logger = logging.getLogger(__name__)


def heatmap_frame(grid: HeatmapGrid) -> pd.DataFrame:
    """Long-form heatmap table: one row per cell."""
    rows = [
        {
            "row": row,
            "col": col,
            "intensity": float(grid.cells[row, col]),
            "direct_hits": int(grid.direct_hits[row, col]),
        }
        for row in range(grid.grid_rows)
        for col in range(grid.grid_cols)
    ]
    return pd.DataFrame(rows)


def write_results_tables(
    results: MatchAnalysisResults,
    output_dir: str | Path,
) -> dict[str, Path]:
    """Write every analysis table as CSV under ``<output_dir>/tables``."""
    table_dir = Path(output_dir) / "tables"
    table_dir.mkdir(parents=True, exist_ok=True)

    table_map: dict[str, tuple[pd.DataFrame, Path]] = {
        "events": (results.event_table, table_dir / "events.csv"),
        "chances": (results.chance_table, table_dir / "chances.csv"),
        "zone_stats": (results.zone_table, table_dir / "zone_stats.csv"),
        "pass_connections": (results.pass_connections, table_dir / "pass_connections.csv"),
        "receivers": (results.receivers, table_dir / "receivers.csv"),
        "chance_summary": (
            pd.DataFrame([results.chance_summary.as_dict()]),
            table_dir / "chance_summary.csv",
        ),
        "pass_summary": (pd.DataFrame([results.pass_summary]), table_dir / "pass_summary.csv"),
        "shot_summary": (pd.DataFrame([results.shot_summary]), table_dir / "shot_summary.csv"),
        "position_heatmap": (
            heatmap_frame(results.position_heatmap),
            table_dir / "position_heatmap.csv",
        ),
        "passing_heatmap": (
            heatmap_frame(results.passing_heatmap),
            table_dir / "passing_heatmap.csv",
        ),
        "chance_heatmap": (
            heatmap_frame(results.chance_heatmap),
            table_dir / "chance_heatmap.csv",
        ),
    }

    paths: dict[str, Path] = {}
    for key, (frame, path) in table_map.items():
        frame.to_csv(path, index=False)
        paths[key] = path
    logger.info("Wrote %d tables to %s", len(paths), table_dir)
    return paths


def write_results_contract(
    results: MatchAnalysisResults,
    *,
    input_path: str | Path,
    output_dir: str | Path,
    table_paths: dict[str, Path] | None = None,
    figure_paths: dict[str, Path] | None = None,
) -> Path:
    """Write `results.json` with thresholds, summaries, and artifact manifest."""
    root = Path(output_dir)
    root.mkdir(parents=True, exist_ok=True)
    contract_path = root / "results.json"

    contract: dict[str, Any] = {
        "generated_at_utc": pd.Timestamp.now(tz="UTC").isoformat(),
        "input_path": str(Path(input_path)),
        "output_dir": str(root),
        "preset": {
            "name": results.preset.name,
            "rationale": results.preset.rationale,
        },
        "filters": {
            "interval": {
                "label": results.interval.label,
                "start": results.interval.start,
                "end": results.interval.end,
                "category": results.interval.category,
            },
            "player_id": results.player_id,
            "event_count": len(results.events),
        },
        "pitch": {"length_m": PITCH_LENGTH_M, "width_m": PITCH_WIDTH_M},
        "thresholds": {
            "final_third_start_x": FINAL_THIRD_START_X,
            "box_start_x": BOX_START_X,
            "box_y": [BOX_Y_MIN, BOX_Y_MAX],
            "six_yard_start_x": SIX_YARD_START_X,
            "six_yard_y": [SIX_YARD_Y_MIN, SIX_YARD_Y_MAX],
            "corner_zone_x": CORNER_ZONE_X,
            "corner_zone_y": [CORNER_ZONE_LEFT_Y, CORNER_ZONE_RIGHT_Y],
            "wing_y": [LEFT_WING_END_Y, RIGHT_WING_START_Y],
            "pass_length_m": {"short_below": SHORT_PASS_MAX_M, "long_from": LONG_PASS_MIN_M},
            "shot_follow_up_minutes": SHOT_FOLLOW_UP_MINUTES,
            "xg_proxy_range": [XG_MIN, XG_MAX],
        },
        "heuristics": {
            "led_to_shot": "Any shot in the pass minute or the next minute; not a possession chain.",
            "xg_proxy": "Distance-to-goal heuristic with box/central boosts; display only.",
        },
        "zone_keys": list(ZONE_KEYS),
        "chance_summary": results.chance_summary.as_dict(),
        "zone_stats": _jsonify_records(results.zone_table),
        "pass_summary": results.pass_summary,
        "shot_summary": results.shot_summary,
        "heatmaps": {
            name: {
                "grid_rows": grid.grid_rows,
                "grid_cols": grid.grid_cols,
                "max_intensity": grid.max_intensity,
                "event_count": grid.event_count,
                "cells": grid.cells.tolist(),
            }
            for name, grid in (
                ("position", results.position_heatmap),
                ("passing", results.passing_heatmap),
                ("chances", results.chance_heatmap),
            )
        },
        "peak_position": list(results.peak_position) if results.peak_position else None,
        "artifacts": {
            "tables": {key: str(path) for key, path in (table_paths or {}).items()},
            "figures": {key: str(path) for key, path in (figure_paths or {}).items()},
        },
    }

    contract_path.write_text(json.dumps(_jsonify_obj(contract), indent=2) + "\n", encoding="utf-8")
    logger.info("Wrote results contract to %s", contract_path)
    return contract_path


def load_results_contract(output_dir: str | Path) -> dict[str, Any]:
    """Load `results.json` from an output directory."""
    contract_path = Path(output_dir) / "results.json"
    if not contract_path.exists():
        raise FileNotFoundError(
            f"Missing results contract at {contract_path}. Run `pitch-analytics --export` first."
        )
    return json.loads(contract_path.read_text(encoding="utf-8"))


def _jsonify_records(frame: pd.DataFrame) -> list[dict[str, Any]]:
    return [_jsonify_obj(row) for row in frame.to_dict(orient="records")]


def _jsonify_obj(value: Any) -> Any:
    if isinstance(value, dict):
        return {str(k): _jsonify_obj(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonify_obj(item) for item in value]
    if isinstance(value, tuple):
        return [_jsonify_obj(item) for item in value]
    if isinstance(value, pd.Timestamp):
        return value.isoformat()
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, float) and np.isnan(value):
        return None
    return value
