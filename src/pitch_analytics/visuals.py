"""Pitch visualization templates for chance, shot, and heatmap views."""

from __future__ import annotations

import colorsys
from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Arc, Circle, Rectangle
import numpy as np
import seaborn as sns

from .aggregation import ZoneStat
from .classification import ProcessedChance, shot_result, shot_xg
from .constants import PITCH_LENGTH_M, PITCH_WIDTH_M
from .events import ShotEvent
from .geometry import to_pitch_units
from .heatmap import HeatmapGrid, normalized_intensity
from .zones import ZONE_KEYS

CHANCE_COLORS = {
    "box_entry": "#e63946",
    "final_third_chance": "#f4a261",
    "corner_zone": "#457b9d",
}
SHOT_COLOR = "#d62828"


def heatmap_color(intensity: float, max_intensity: float) -> tuple[float, float, float, float] | None:
    """RGBA for a cell; None (transparent) for empty cells or a grid with no data."""
    if max_intensity <= 0 or intensity <= 0:
        return None
    level = intensity / max_intensity
    if level < 0.3:
        hue, sat, alpha = 45.0, 1.0, level * 1.2
    elif level < 0.6:
        hue, sat, alpha = 30.0, 1.0, 0.2 + level * 0.4
    else:
        hue, sat, alpha = 0.0, 0.8, 0.3 + level * 0.4
    red, green, blue = colorsys.hls_to_rgb(hue / 360.0, 0.5, sat)
    return red, green, blue, min(alpha, 1.0)


def draw_pitch(ax: plt.Axes, *, line_color: str = "#9ca3af") -> plt.Axes:
    """Draw a 105 x 68 m pitch outline (attacking left to right)."""
    length, width = PITCH_LENGTH_M, PITCH_WIDTH_M
    box_depth, box_width = 16.5, 40.32
    six_depth, six_width = 5.5, 18.32
    line = {"color": line_color, "linewidth": 1.2, "zorder": 1}

    ax.add_patch(Rectangle((0, 0), length, width, fill=False, **line))
    ax.plot([length / 2, length / 2], [0, width], **line)
    ax.add_patch(Circle((length / 2, width / 2), 9.15, fill=False, **line))
    for goal_x, sign in ((0.0, 1.0), (length, -1.0)):
        box_x = goal_x if sign > 0 else goal_x - box_depth
        six_x = goal_x if sign > 0 else goal_x - six_depth
        ax.add_patch(Rectangle((box_x, (width - box_width) / 2), box_depth, box_width, fill=False, **line))
        ax.add_patch(Rectangle((six_x, (width - six_width) / 2), six_depth, six_width, fill=False, **line))
        spot_x = goal_x + sign * 11.0
        ax.add_patch(Circle((spot_x, width / 2), 0.25, color=line_color, zorder=1))
        theta = (308.0, 52.0) if sign > 0 else (128.0, 232.0)
        ax.add_patch(Arc((spot_x, width / 2), 18.3, 18.3, theta1=theta[0], theta2=theta[1], **line))

    ax.set_xlim(-4, length + 4)
    ax.set_ylim(width + 4, -4)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    return ax


def plot_heatmap_grid(
    grid: HeatmapGrid,
    *,
    title: str = "Activity Heatmap",
) -> tuple[plt.Figure, plt.Axes]:
    """Colour each grid cell by intensity over the pitch outline."""
    sns.set_theme(style="white")
    fig, ax = plt.subplots(figsize=(10.5, 6.8), constrained_layout=True)
    draw_pitch(ax)

    levels = normalized_intensity(grid)
    region = grid.region
    x0, y0 = to_pitch_units(region.x_min, region.y_min)
    x1, y1 = to_pitch_units(region.x_max, region.y_max)
    cell_w = (x1 - x0) / grid.grid_cols
    cell_h = (y1 - y0) / grid.grid_rows

    for row in range(grid.grid_rows):
        for col in range(grid.grid_cols):
            if np.isnan(levels[row, col]):
                continue
            color = heatmap_color(float(grid.cells[row, col]), grid.max_intensity)
            if color is None:
                continue
            ax.add_patch(
                Rectangle(
                    (x0 + col * cell_w, y0 + row * cell_h),
                    cell_w,
                    cell_h,
                    facecolor=color,
                    edgecolor="none",
                    zorder=0,
                )
            )

    if not grid.has_data:
        ax.text(
            PITCH_LENGTH_M / 2,
            PITCH_WIDTH_M / 2,
            "No data for this selection",
            ha="center",
            va="center",
            fontsize=11,
            color="#6b7280",
        )
    ax.set_title(title, fontsize=13, weight="bold")
    return fig, ax


def plot_chance_map(
    chances: Sequence[ProcessedChance],
    *,
    zone_stats: dict[str, ZoneStat] | None = None,
    title: str = "Chances Created",
) -> tuple[plt.Figure, plt.Axes]:
    """Arrows from pass origin to destination, coloured by chance type."""
    sns.set_theme(style="white")
    fig, ax = plt.subplots(figsize=(10.5, 6.8), constrained_layout=True)
    draw_pitch(ax)

    for chance in chances:
        x, y = to_pitch_units(chance.event.x, chance.event.y)
        tx, ty = to_pitch_units(chance.event.target_x, chance.event.target_y)
        color = CHANCE_COLORS[chance.chance_type]
        ax.annotate(
            "",
            xy=(tx, ty),
            xytext=(x, y),
            arrowprops={"arrowstyle": "->", "color": color, "linewidth": 1.6, "alpha": 0.85},
            zorder=3,
        )
        marker = "*" if chance.led_to_goal else "o"
        ax.scatter(tx, ty, s=60 if chance.led_to_goal else 24, color=color, marker=marker, zorder=4)

    handles = [
        Line2D([0], [0], color=color, linewidth=2, label=name.replace("_", " ").title())
        for name, color in CHANCE_COLORS.items()
    ]
    ax.legend(handles=handles, loc="lower left", fontsize=8, frameon=True)

    if zone_stats is not None:
        # sorted() is stable, so equal counts keep the canonical zone order.
        busiest = sorted(
            (key for key in ZONE_KEYS if zone_stats[key].count > 0),
            key=lambda key: zone_stats[key].count,
            reverse=True,
        )
        lines = [f"{key}: {zone_stats[key].count}" for key in busiest[:6]]
        if lines:
            ax.text(
                0.99,
                0.02,
                "Top zones\n" + "\n".join(lines),
                transform=ax.transAxes,
                va="bottom",
                ha="right",
                fontsize=8,
                bbox={"boxstyle": "round,pad=0.3", "facecolor": "white", "alpha": 0.92, "edgecolor": "#d1d5db"},
            )

    ax.set_title(title, fontsize=13, weight="bold")
    return fig, ax


def plot_shot_map(
    shots: Sequence[ShotEvent],
    *,
    title: str = "Shot Map",
    show_xg: bool = True,
) -> tuple[plt.Figure, plt.Axes]:
    """Goals filled, on-target shots double-ringed, other shots hollow."""
    sns.set_theme(style="white")
    fig, ax = plt.subplots(figsize=(10.5, 6.8), constrained_layout=True)
    draw_pitch(ax)

    for shot in shots:
        x, y = to_pitch_units(shot.x, shot.y)
        xg = shot_xg(shot)
        size = 40 + 400 * xg if show_xg else 60
        result = shot_result(shot)
        if result == "goal":
            ax.scatter(x, y, s=size, color=SHOT_COLOR, alpha=0.9, zorder=4)
        elif result == "on_target":
            ax.scatter(x, y, s=size, facecolors="none", edgecolors=SHOT_COLOR, linewidths=1.4, zorder=4)
            ax.scatter(x, y, s=size * 0.35, facecolors="none", edgecolors=SHOT_COLOR, linewidths=1.0, zorder=4)
        else:
            ax.scatter(x, y, s=size, facecolors="none", edgecolors=SHOT_COLOR, linewidths=1.0, zorder=4)
        if show_xg:
            ax.annotate(f"{xg:.2f}", xy=(x, y), xytext=(4, 4), textcoords="offset points", fontsize=7)

    total_xg = sum(shot_xg(shot) for shot in shots)
    ax.set_title(f"{title} ({len(shots)} shots, xG {total_xg:.2f})", fontsize=13, weight="bold")
    return fig, ax


def save_figure(fig: plt.Figure, output_path: str | Path, dpi: int = 200) -> None:
    """Save a figure with a white background."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=dpi, bbox_inches="tight", facecolor="white")


def close_figures(figures: Sequence[plt.Figure]) -> None:
    """Close a batch of figures to keep notebook/script memory stable."""
    for fig in figures:
        plt.close(fig)
