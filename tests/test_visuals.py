from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

from pitch_analytics.events import PassEvent, ShotEvent
from pitch_analytics.pipeline import analyze_match
from pitch_analytics.visuals import (
    close_figures,
    heatmap_color,
    plot_chance_map,
    plot_heatmap_grid,
    plot_shot_map,
    save_figure,
)


def _events() -> list:
    return [
        PassEvent(minute=10, x=70, y=50, target_x=90, target_y=50, success=True),
        PassEvent(minute=12, x=80, y=50, target_x=95, target_y=10, success=True),
        ShotEvent(minute=10, x=90, y=50, target_x=100, target_y=50, success=True, is_goal=True),
        ShotEvent(minute=30, x=75, y=30, target_x=100, target_y=50, success=False, shot_outcome="missed"),
    ]


def test_heatmap_color_is_transparent_without_data() -> None:
    assert heatmap_color(0.0, 5.0) is None
    assert heatmap_color(3.0, 0.0) is None


def test_heatmap_color_alpha_grows_with_intensity() -> None:
    low = heatmap_color(1.0, 10.0)
    mid = heatmap_color(4.0, 10.0)
    high = heatmap_color(10.0, 10.0)
    assert low is not None and mid is not None and high is not None
    assert low[3] < mid[3] < high[3]
    assert high[3] == pytest.approx(0.7)
    assert all(0.0 <= channel <= 1.0 for channel in high)


def test_visual_templates_render_and_save(tmp_path: Path) -> None:
    results = analyze_match(_events())
    figures = [
        plot_chance_map(results.chances, zone_stats=results.zone_stats)[0],
        plot_shot_map([e for e in results.events if isinstance(e, ShotEvent)])[0],
        plot_heatmap_grid(results.position_heatmap)[0],
        plot_heatmap_grid(results.chance_heatmap, title="Chance Destinations")[0],
    ]
    for index, fig in enumerate(figures):
        path = tmp_path / "figures" / f"figure_{index}.png"
        save_figure(fig, path, dpi=50)
        assert path.exists()
    close_figures(figures)


def test_empty_heatmap_renders_placeholder() -> None:
    results = analyze_match([])
    fig, ax = plot_heatmap_grid(results.position_heatmap)
    assert any("No data" in text.get_text() for text in ax.texts)
    close_figures([fig])


def test_chance_map_lists_busiest_zones_first() -> None:
    events = [
        PassEvent(minute=1, x=70, y=50, target_x=90, target_y=50, success=True),
        PassEvent(minute=2, x=60, y=90, target_x=80, target_y=90, success=True),
        PassEvent(minute=3, x=60, y=90, target_x=80, target_y=90, success=True),
        PassEvent(minute=4, x=60, y=90, target_x=80, target_y=90, success=True),
    ]
    results = analyze_match(events)
    fig, ax = plot_chance_map(results.chances, zone_stats=results.zone_stats)
    box = next(text.get_text() for text in ax.texts if text.get_text().startswith("Top zones"))
    lines = box.splitlines()[1:]
    counts = [int(line.rsplit(": ", 1)[1]) for line in lines]
    assert counts == sorted(counts, reverse=True)
    assert lines[0] == "right_wing-edge_of_box: 3"
    assert lines[1] == "center-inside_box: 1"
    close_figures([fig])
