"""Zone and match-level summary statistics."""

from __future__ import annotations

from dataclasses import asdict, dataclass
import math
from typing import Iterable, Sequence

import pandas as pd

from .classification import (
    PASS_LENGTHS,
    ProcessedChance,
    is_key_pass,
    pass_length,
    shot_result,
    shot_xg,
)
from .events import MatchEvent, passes, shots
from .zones import ZONE_KEYS, zone_label


@dataclass(frozen=True)
class ZoneStat:
    """Counters for one zone over a filtered set of chances."""

    count: int = 0
    led_to_shot: int = 0
    led_to_goal: int = 0
    box_entries: int = 0


@dataclass(frozen=True)
class ChanceSummary:
    """Match-level chance-creation totals."""

    total: int
    box_entries: int
    final_third_chances: int
    corner_zone_chances: int
    led_to_shot: int
    led_to_goal: int
    conversion_rate: int
    left_wing: int
    center: int
    right_wing: int
    deep: int
    edge_of_box: int
    inside_box: int
    six_yard: int
    max_count: int

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


def percentage(part: int | float, whole: int | float) -> int:
    """Percentage rounded half-up; 0 when the denominator is 0."""
    if whole <= 0:
        return 0
    return int(math.floor(part / whole * 100 + 0.5))


def aggregate_zone_stats(chances: Iterable[ProcessedChance]) -> dict[str, ZoneStat]:
    """Fold chances into one record per known zone key, all keys always present."""
    counters = {key: [0, 0, 0, 0] for key in ZONE_KEYS}
    for chance in chances:
        counter = counters[chance.zone_key]
        counter[0] += 1
        if chance.led_to_shot:
            counter[1] += 1
        if chance.led_to_goal:
            counter[2] += 1
        if chance.chance_type == "box_entry":
            counter[3] += 1
    return {
        key: ZoneStat(count=c[0], led_to_shot=c[1], led_to_goal=c[2], box_entries=c[3])
        for key, c in counters.items()
    }


def max_zone_count(zone_stats: dict[str, ZoneStat]) -> int:
    """Largest zone count, floored at 1 so colour scaling never divides by zero."""
    return max([1, *(stat.count for stat in zone_stats.values())])


def summarize_chances(
    chances: Sequence[ProcessedChance],
    zone_stats: dict[str, ZoneStat] | None = None,
) -> ChanceSummary:
    """Totals by chance type, follow-up outcome, width, and depth."""
    if zone_stats is None:
        zone_stats = aggregate_zone_stats(chances)

    total = len(chances)
    shots_after = sum(1 for chance in chances if chance.led_to_shot)
    return ChanceSummary(
        total=total,
        box_entries=_count(chances, chance_type="box_entry"),
        final_third_chances=_count(chances, chance_type="final_third_chance"),
        corner_zone_chances=_count(chances, chance_type="corner_zone"),
        led_to_shot=shots_after,
        led_to_goal=sum(1 for chance in chances if chance.led_to_goal),
        conversion_rate=percentage(shots_after, total),
        left_wing=_count(chances, horizontal_zone="left_wing"),
        center=_count(chances, horizontal_zone="center"),
        right_wing=_count(chances, horizontal_zone="right_wing"),
        deep=_count(chances, depth_zone="deep"),
        edge_of_box=_count(chances, depth_zone="edge_of_box"),
        inside_box=_count(chances, depth_zone="inside_box"),
        six_yard=_count(chances, depth_zone="six_yard"),
        max_count=max_zone_count(zone_stats),
    )


def zone_stats_table(zone_stats: dict[str, ZoneStat]) -> pd.DataFrame:
    """Zone records as a table in canonical zone-key order."""
    rows = [
        {"zone_key": key, "zone_label": zone_label(key), **asdict(zone_stats[key])}
        for key in ZONE_KEYS
        if key in zone_stats
    ]
    return pd.DataFrame(rows)


def summarize_passes(
    events: Sequence[MatchEvent],
) -> dict[str, int]:
    """Pass volume, accuracy, key passes, length mix, and ball touches."""
    pass_events = passes(events)
    total = len(pass_events)
    successful = sum(1 for event in pass_events if event.success)
    lengths = {length: 0 for length in PASS_LENGTHS}
    for event in pass_events:
        lengths[pass_length(event)] += 1

    return {
        "total": total,
        "successful": successful,
        "unsuccessful": total - successful,
        "accuracy": percentage(successful, total),
        "key_passes": sum(1 for event in pass_events if is_key_pass(event)),
        "ball_touches": len(events),
        "short_passes": lengths["short"],
        "medium_passes": lengths["medium"],
        "long_passes": lengths["long"],
    }


def summarize_shots(events: Sequence[MatchEvent]) -> dict[str, float | int]:
    """Shot totals, outcome split, accuracy, and summed xG."""
    shot_events = shots(events)
    results = [shot_result(shot) for shot in shot_events]
    total = len(shot_events)
    goals = results.count("goal")
    on_target = goals + results.count("on_target")
    return {
        "total": total,
        "goals": goals,
        "on_target": on_target,
        "accuracy": percentage(on_target, total),
        "total_xg": float(sum(shot_xg(shot) for shot in shot_events)),
    }


def build_pass_connections(
    events: Iterable[MatchEvent],
    *,
    known_player_ids: Iterable[str] | None = None,
    player_names: dict[str, str] | None = None,
) -> pd.DataFrame:
    """Undirected passer-receiver links; A->B and B->A share one row.

    Passes without a passer or receiver id are ignored, as are links to
    players outside ``known_player_ids`` when a squad is given.
    """
    squad = set(known_player_ids) if known_player_ids is not None else None
    names = dict(player_names or {})
    links: dict[tuple[str, str], list[int]] = {}

    for event in passes(events):
        if not event.player_id or not event.pass_target:
            continue
        if squad is not None and (event.player_id not in squad or event.pass_target not in squad):
            continue
        key = tuple(sorted((event.player_id, event.pass_target)))
        link = links.setdefault(key, [0, 0])
        link[0] += 1
        if event.success:
            link[1] += 1
        if event.pass_target_name:
            names.setdefault(event.pass_target, event.pass_target_name)

    columns = ["from_id", "to_id", "from_name", "to_name", "total", "successful", "accuracy"]
    rows = [
        {
            "from_id": from_id,
            "to_id": to_id,
            "from_name": names.get(from_id, from_id),
            "to_name": names.get(to_id, to_id),
            "total": total,
            "successful": successful,
            "accuracy": percentage(successful, total),
        }
        for (from_id, to_id), (total, successful) in links.items()
    ]
    if not rows:
        return pd.DataFrame(columns=columns)
    table = pd.DataFrame(rows, columns=columns)
    return table.sort_values(["total", "from_id", "to_id"], ascending=[False, True, True]).reset_index(drop=True)


def build_receiver_table(events: Iterable[MatchEvent]) -> pd.DataFrame:
    """Per-receiver pass totals for one passer's events."""
    receivers: dict[str, dict[str, object]] = {}
    for event in passes(events):
        if not event.pass_target or not event.pass_target_name:
            continue
        record = receivers.setdefault(
            event.pass_target,
            {
                "receiver_id": event.pass_target,
                "receiver_name": event.pass_target_name,
                "total": 0,
                "successful": 0,
                "key_passes": 0,
            },
        )
        record["total"] += 1
        if event.success:
            record["successful"] += 1
        if is_key_pass(event):
            record["key_passes"] += 1

    columns = ["receiver_id", "receiver_name", "total", "successful", "accuracy", "key_passes"]
    if not receivers:
        return pd.DataFrame(columns=columns)
    table = pd.DataFrame(list(receivers.values()))
    table["accuracy"] = [
        percentage(successful, total) for successful, total in zip(table["successful"], table["total"])
    ]
    return (
        table[columns]
        .sort_values(["total", "receiver_id"], ascending=[False, True])
        .reset_index(drop=True)
    )


def _count(chances: Sequence[ProcessedChance], **match: str) -> int:
    return sum(
        1 for chance in chances if all(getattr(chance, attr) == value for attr, value in match.items())
    )
