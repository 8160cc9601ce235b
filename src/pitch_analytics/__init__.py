"""Football match event analytics package."""

from .aggregation import (
    ChanceSummary,
    ZoneStat,
    aggregate_zone_stats,
    build_pass_connections,
    build_receiver_table,
    percentage,
    summarize_chances,
    summarize_passes,
    summarize_shots,
    zone_stats_table,
)
from .classification import (
    ProcessedChance,
    classify_chance,
    classify_chances,
    classify_pass_length,
    estimate_xg,
    filter_chances,
    is_key_pass,
    shot_result,
    shot_xg,
)
from .config import (
    AnalysisSettings,
    PathSettings,
    PitchAnalyticsConfig,
    ProjectPaths,
    RuntimeSettings,
    clear_project_path_cache,
    configure_logging,
    default_project_config,
    default_project_paths,
    find_project_root,
    resolve_events_file,
    resolve_output_dir,
)
from .events import (
    DribbleEvent,
    InterceptionEvent,
    MatchEvent,
    PassEvent,
    ShotEvent,
    TackleEvent,
    event_from_record,
    events_from_frame,
    events_to_frame,
    load_match_events,
)
from .geometry import ViewBox, distance_meters, to_pitch_units, to_viewport_percent, viewport_for_mode
from .heatmap import HeatmapGrid, PitchRegion, accumulate_heatmap, peak_position
from .intervals import (
    FULL_MATCH,
    HALF_INTERVALS,
    TEN_MIN_INTERVALS,
    TimeInterval,
    available_intervals,
    filter_by_interval,
    find_interval,
    has_overtime,
)
from .pipeline import MatchAnalysisResults, analyze_match, cached_analyze_match, clear_analysis_cache
from .presets import AnalysisPreset, HeatmapConfig, preferred_analysis_preset
from .zones import ZONE_KEYS, classify_zone, depth_zone, horizontal_zone, is_in_box, is_in_corner_zone

__all__ = [
    "AnalysisSettings",
    "AnalysisPreset",
    "ChanceSummary",
    "DribbleEvent",
    "FULL_MATCH",
    "HALF_INTERVALS",
    "HeatmapConfig",
    "HeatmapGrid",
    "InterceptionEvent",
    "MatchAnalysisResults",
    "MatchEvent",
    "PassEvent",
    "PathSettings",
    "PitchAnalyticsConfig",
    "PitchRegion",
    "ProcessedChance",
    "ProjectPaths",
    "RuntimeSettings",
    "ShotEvent",
    "TEN_MIN_INTERVALS",
    "TackleEvent",
    "TimeInterval",
    "ViewBox",
    "ZONE_KEYS",
    "ZoneStat",
    "accumulate_heatmap",
    "aggregate_zone_stats",
    "analyze_match",
    "available_intervals",
    "build_pass_connections",
    "build_receiver_table",
    "cached_analyze_match",
    "classify_chance",
    "classify_chances",
    "classify_pass_length",
    "classify_zone",
    "clear_analysis_cache",
    "clear_project_path_cache",
    "configure_logging",
    "default_project_config",
    "default_project_paths",
    "depth_zone",
    "distance_meters",
    "estimate_xg",
    "event_from_record",
    "events_from_frame",
    "events_to_frame",
    "filter_by_interval",
    "filter_chances",
    "find_interval",
    "find_project_root",
    "has_overtime",
    "horizontal_zone",
    "is_in_box",
    "is_in_corner_zone",
    "is_key_pass",
    "load_match_events",
    "peak_position",
    "percentage",
    "preferred_analysis_preset",
    "resolve_events_file",
    "resolve_output_dir",
    "shot_result",
    "shot_xg",
    "summarize_chances",
    "summarize_passes",
    "summarize_shots",
    "to_pitch_units",
    "to_viewport_percent",
    "viewport_for_mode",
    "zone_stats_table",
]
