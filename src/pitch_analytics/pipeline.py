"""One-pass match analysis over a filtered event list."""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import lru_cache
import logging
from typing import Sequence

import pandas as pd

from .aggregation import (
    ChanceSummary,
    ZoneStat,
    aggregate_zone_stats,
    build_pass_connections,
    build_receiver_table,
    summarize_chances,
    summarize_passes,
    summarize_shots,
    zone_stats_table,
)
from .classification import ProcessedChance, classify_chances, pass_length, shot_result, shot_xg
from .events import MatchEvent, PassEvent, ShotEvent, events_to_frame, passes
from .heatmap import HeatmapGrid, accumulate_heatmap, peak_position
from .intervals import FULL_MATCH, TimeInterval, filter_by_interval
from .presets import AnalysisPreset, HeatmapConfig, preferred_analysis_preset
from .zones import classify_zone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchAnalysisResults:
    """Container for one-pass match analysis outputs."""

    preset: AnalysisPreset
    interval: TimeInterval
    player_id: str | None
    events: tuple[MatchEvent, ...]
    chances: tuple[ProcessedChance, ...]
    zone_stats: dict[str, ZoneStat]
    chance_summary: ChanceSummary
    pass_summary: dict[str, int]
    shot_summary: dict[str, float | int]
    position_heatmap: HeatmapGrid
    passing_heatmap: HeatmapGrid
    chance_heatmap: HeatmapGrid
    peak_position: tuple[float, float] | None
    zone_table: pd.DataFrame
    event_table: pd.DataFrame
    chance_table: pd.DataFrame
    pass_connections: pd.DataFrame
    receivers: pd.DataFrame


def select_events(
    events: Sequence[MatchEvent],
    interval: TimeInterval = FULL_MATCH,
    *,
    player_id: str | None = None,
) -> list[MatchEvent]:
    """Apply the time-interval and player filters."""
    return filter_by_interval(_for_player(events, player_id), interval)


def _for_player(events: Sequence[MatchEvent], player_id: str | None) -> list[MatchEvent]:
    if player_id is None:
        return list(events)
    return [event for event in events if event.player_id == player_id]


def analyze_match(
    events: Sequence[MatchEvent],
    interval: TimeInterval = FULL_MATCH,
    *,
    player_id: str | None = None,
    preset: AnalysisPreset | None = None,
) -> MatchAnalysisResults:
    """Filter events, classify them, and build every summary and grid."""
    model = preset or preferred_analysis_preset()
    player_events = _for_player(events, player_id)
    selected = filter_by_interval(player_events, interval)
    logger.debug(
        "Analyzing %d of %d events (interval=%s, player=%s)",
        len(selected),
        len(events),
        interval.label,
        player_id,
    )

    # Passes are filtered by the interval; follow-up shots are not.
    chances = classify_chances(player_events, interval)
    zone_stats = aggregate_zone_stats(chances)
    chance_summary = summarize_chances(chances, zone_stats)

    position_grid = _heatmap(selected, model.position_heatmap)
    passing_grid = _heatmap(passes(selected), model.passing_heatmap)
    chance_grid = _heatmap([chance.event for chance in chances], model.chance_heatmap)

    # The squad for the network is everyone who acted in the unfiltered-by-player list.
    squad = {event.player_id for event in filter_by_interval(events, interval) if event.player_id}

    return MatchAnalysisResults(
        preset=model,
        interval=interval,
        player_id=player_id,
        events=tuple(selected),
        chances=tuple(chances),
        zone_stats=zone_stats,
        chance_summary=chance_summary,
        pass_summary=summarize_passes(selected),
        shot_summary=summarize_shots(selected),
        position_heatmap=position_grid,
        passing_heatmap=passing_grid,
        chance_heatmap=chance_grid,
        peak_position=peak_position(position_grid),
        zone_table=zone_stats_table(zone_stats),
        event_table=build_event_table(selected),
        chance_table=build_chance_table(chances),
        pass_connections=build_pass_connections(
            filter_by_interval(events, interval), known_player_ids=squad or None
        ),
        receivers=build_receiver_table(selected),
    )


@lru_cache(maxsize=32)
def _cached_analysis(
    events: tuple[MatchEvent, ...],
    interval: TimeInterval,
    player_id: str | None,
    preset: AnalysisPreset | None,
) -> MatchAnalysisResults:
    return analyze_match(events, interval, player_id=player_id, preset=preset)


def cached_analyze_match(
    events: Sequence[MatchEvent],
    interval: TimeInterval = FULL_MATCH,
    *,
    player_id: str | None = None,
    preset: AnalysisPreset | None = None,
) -> MatchAnalysisResults:
    """Memoized ``analyze_match`` keyed by the event tuple and filter parameters.

    Every call gets fresh copies of the tables, grids and dicts, so mutating a
    returned result never changes the cached entry.
    """
    return _detached(_cached_analysis(tuple(events), interval, player_id, preset))


def clear_analysis_cache() -> None:
    _cached_analysis.cache_clear()


def _detached(results: MatchAnalysisResults) -> MatchAnalysisResults:
    return replace(
        results,
        zone_stats=dict(results.zone_stats),
        pass_summary=dict(results.pass_summary),
        shot_summary=dict(results.shot_summary),
        position_heatmap=_copy_grid(results.position_heatmap),
        passing_heatmap=_copy_grid(results.passing_heatmap),
        chance_heatmap=_copy_grid(results.chance_heatmap),
        zone_table=results.zone_table.copy(),
        event_table=results.event_table.copy(),
        chance_table=results.chance_table.copy(),
        pass_connections=results.pass_connections.copy(),
        receivers=results.receivers.copy(),
    )


def _copy_grid(grid: HeatmapGrid) -> HeatmapGrid:
    return replace(grid, cells=grid.cells.copy(), direct_hits=grid.direct_hits.copy())


def build_event_table(events: Sequence[MatchEvent]) -> pd.DataFrame:
    """Event rows tagged with origin zone, pass length, and shot xG/result."""
    table = events_to_frame(events)
    if table.empty:
        for col in ("zone_key", "pass_length", "xg_value", "shot_result"):
            table[col] = pd.Series(dtype=object)
        return table

    table["zone_key"] = [classify_zone(event.x, event.y) for event in events]
    table["pass_length"] = [
        pass_length(event) if isinstance(event, PassEvent) else None for event in events
    ]
    table["xg_value"] = [shot_xg(event) if isinstance(event, ShotEvent) else None for event in events]
    table["shot_result"] = [
        shot_result(event) if isinstance(event, ShotEvent) else None for event in events
    ]
    return table


def build_chance_table(chances: Sequence[ProcessedChance]) -> pd.DataFrame:
    """One row per chance with destination zone and follow-up flags."""
    columns = [
        "index",
        "minute",
        "chance_type",
        "x",
        "y",
        "target_x",
        "target_y",
        "zone_key",
        "horizontal_zone",
        "depth_zone",
        "is_corner_zone",
        "is_in_box",
        "led_to_shot",
        "led_to_goal",
        "player_id",
    ]
    rows = [
        {
            "index": chance.index,
            "minute": chance.event.minute,
            "chance_type": chance.chance_type,
            "x": chance.event.x,
            "y": chance.event.y,
            "target_x": chance.event.target_x,
            "target_y": chance.event.target_y,
            "zone_key": chance.zone_key,
            "horizontal_zone": chance.horizontal_zone,
            "depth_zone": chance.depth_zone,
            "is_corner_zone": chance.is_corner_zone,
            "is_in_box": chance.is_in_box,
            "led_to_shot": chance.led_to_shot,
            "led_to_goal": chance.led_to_goal,
            "player_id": chance.event.player_id,
        }
        for chance in chances
    ]
    return pd.DataFrame(rows, columns=columns)


def _heatmap(events: Sequence[MatchEvent], config: HeatmapConfig) -> HeatmapGrid:
    return accumulate_heatmap(
        events,
        config.grid_cols,
        config.grid_rows,
        smoothing_weight=config.smoothing_weight,
        region=config.region,
        use_target=config.use_target,
    )
