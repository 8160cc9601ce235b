"""Project configuration: defaults, pyproject, YAML, and env overrides.

Sources are merged with OmegaConf in increasing precedence and validated by
Pydantic:

1. built-in defaults
2. ``[tool.pitch_analytics]`` in ``pyproject.toml``
3. ``config/pitch_analytics.yaml`` (or ``PITCH_ANALYTICS_CONFIG_FILE``)
4. ``PITCH_ANALYTICS_*`` environment variables
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
import os
from pathlib import Path
import tomllib
from typing import Any, Callable

from omegaconf import OmegaConf
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .intervals import FULL_MATCH, find_interval

ENV_PREFIX = "PITCH_ANALYTICS_"
DEFAULT_CONFIG_FILE = "config/pitch_analytics.yaml"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


class PathSettings(BaseModel):
    """Where match events are read from and exports are written to."""

    events_file: str = "data/match_events.csv"
    events_fallbacks: tuple[str, ...] = ("data/match_events.json", "sample_data/match_events.csv")
    output_dir: str = "outputs"

    @field_validator("events_file", "output_dir")
    @classmethod
    def _require_path(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("path values must not be empty")
        return value.strip()

    @field_validator("events_fallbacks", mode="before")
    @classmethod
    def _fallback_list(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.split(",")
        return tuple(str(item).strip() for item in value if str(item).strip())


class RuntimeSettings(BaseModel):
    create_output_dirs: bool = False
    clamp_coordinates: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


class AnalysisSettings(BaseModel):
    """Defaults for the CLI and report scripts."""

    default_interval: str = FULL_MATCH.label
    figure_dpi: int = Field(default=200, ge=50, le=600)

    @field_validator("default_interval")
    @classmethod
    def _standard_interval(cls, value: str) -> str:
        return find_interval(value).label


class PitchAnalyticsConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    paths: PathSettings = Field(default_factory=PathSettings)
    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)


@dataclass(frozen=True)
class ProjectPaths:
    """Absolute paths after resolving config against the project root."""

    project_root: Path
    events_file: Path
    output_dir: Path
    events_fallbacks: tuple[Path, ...]


def _as_env_bool(name: str) -> Callable[[str], bool]:
    def parse(value: str) -> bool:
        return _parse_env_bool(value, name)

    return parse


# env suffix -> (section, key, parser)
_ENV_FIELDS: dict[str, tuple[str, str, Callable[[str], Any]]] = {
    "EVENTS_FILE": ("paths", "events_file", str),
    "EVENTS_FALLBACKS": ("paths", "events_fallbacks", lambda raw: raw.split(",")),
    "OUTPUT_DIR": ("paths", "output_dir", str),
    "CREATE_OUTPUT_DIRS": ("runtime", "create_output_dirs", _as_env_bool(f"{ENV_PREFIX}CREATE_OUTPUT_DIRS")),
    "CLAMP_COORDINATES": ("runtime", "clamp_coordinates", _as_env_bool(f"{ENV_PREFIX}CLAMP_COORDINATES")),
    "LOG_LEVEL": ("runtime", "log_level", str),
    "DEFAULT_INTERVAL": ("analysis", "default_interval", str),
    "FIGURE_DPI": ("analysis", "figure_dpi", int),
}


def find_project_root(start: Path | None = None) -> Path:
    """Directory holding ``pyproject.toml``, searched upward from cwd then this module."""
    if env_root := os.getenv(f"{ENV_PREFIX}PROJECT_ROOT"):
        return _resolve_path(Path(env_root), Path.cwd())

    for origin in ((start or Path.cwd()).resolve(), Path(__file__).resolve()):
        for candidate in (origin, *origin.parents):
            if (candidate / "pyproject.toml").is_file():
                return candidate
    raise FileNotFoundError("Could not find project root containing pyproject.toml")


@lru_cache(maxsize=1)
def default_project_config() -> PitchAnalyticsConfig:
    project_root = find_project_root()
    layers = [
        PitchAnalyticsConfig().model_dump(mode="json"),
        _load_pyproject_config(project_root),
        _load_file_config(project_root),
        _load_env_overrides(),
    ]
    merged = OmegaConf.to_container(OmegaConf.merge(*layers), resolve=True)
    try:
        return PitchAnalyticsConfig.model_validate(merged)
    except ValidationError as exc:
        raise ValueError(f"Invalid pitch_analytics config: {exc}") from exc


@lru_cache(maxsize=1)
def default_project_paths() -> ProjectPaths:
    """Resolve configured paths; the events file is the first candidate that exists."""
    project_root = find_project_root()
    config = default_project_config()

    primary = _resolve_path(Path(config.paths.events_file), project_root)
    fallbacks = tuple(_resolve_path(Path(item), project_root) for item in config.paths.events_fallbacks)
    events_file = next((path for path in (primary, *fallbacks) if path.exists()), primary)

    output_dir = _resolve_path(Path(config.paths.output_dir), project_root)
    if config.runtime.create_output_dirs:
        output_dir.mkdir(parents=True, exist_ok=True)

    return ProjectPaths(
        project_root=project_root,
        events_file=events_file,
        output_dir=output_dir,
        events_fallbacks=fallbacks,
    )


def resolve_events_file(input_path: str | Path | None = None) -> Path:
    paths = default_project_paths()
    if input_path is None:
        return paths.events_file
    return _resolve_path(Path(input_path), paths.project_root)


def resolve_output_dir(output_dir: str | Path | None = None) -> Path:
    paths = default_project_paths()
    if output_dir is None:
        return paths.output_dir
    return _resolve_path(Path(output_dir), paths.project_root)


def clear_project_path_cache() -> None:
    """Forget cached config and paths (after env or file changes)."""
    default_project_config.cache_clear()
    default_project_paths.cache_clear()


def configure_logging(config: PitchAnalyticsConfig | None = None) -> None:
    """Apply the configured log level to the root logger."""
    level = (config or default_project_config()).runtime.log_level
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_pyproject_config(project_root: Path) -> dict[str, Any]:
    pyproject_path = project_root / "pyproject.toml"
    if not pyproject_path.exists():
        return {}
    with pyproject_path.open("rb") as handle:
        section = tomllib.load(handle).get("tool", {}).get("pitch_analytics", {})
    return section if isinstance(section, dict) else {}


def _load_file_config(project_root: Path) -> dict[str, Any]:
    if env_path := os.getenv(f"{ENV_PREFIX}CONFIG_FILE"):
        cfg_path = _resolve_path(Path(env_path), project_root)
        if not cfg_path.exists():
            raise FileNotFoundError(f"{ENV_PREFIX}CONFIG_FILE points to missing file: {cfg_path}")
    else:
        cfg_path = project_root / DEFAULT_CONFIG_FILE
        if not cfg_path.exists():
            return {}

    raw = OmegaConf.to_container(OmegaConf.load(cfg_path), resolve=True)
    return raw if isinstance(raw, dict) else {}


def _load_env_overrides() -> dict[str, Any]:
    overrides: dict[str, dict[str, Any]] = {}
    for suffix, (section, key, parse) in _ENV_FIELDS.items():
        raw = os.getenv(f"{ENV_PREFIX}{suffix}")
        if raw:
            overrides.setdefault(section, {})[key] = parse(raw)
    return overrides


def _parse_env_bool(value: str, name: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise ValueError(f"{name} must be one of: 1,true,yes,on,0,false,no,off")


def _resolve_path(path: Path, project_root: Path) -> Path:
    if path.is_absolute():
        return path.expanduser().resolve()
    return (project_root / path).resolve()
