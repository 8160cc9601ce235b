from __future__ import annotations

import json
from pathlib import Path

import pytest

from pitch_analytics.events import (
    DribbleEvent,
    PassEvent,
    ShotEvent,
    TackleEvent,
    duel_row_to_event,
    event_from_record,
    events_from_frame,
    events_to_frame,
    load_match_events,
    pass_row_to_event,
    passes,
    shot_row_to_event,
    shots,
    with_player,
)
from pitch_analytics.intervals import (
    FULL_MATCH,
    HALF_INTERVALS,
    TEN_MIN_INTERVALS,
    TimeInterval,
    available_intervals,
    filter_by_interval,
    find_interval,
    has_overtime,
)


def _pass(minute: int) -> PassEvent:
    return PassEvent(minute=minute, x=50, y=50, target_x=60, target_y=50, success=True)


def test_event_from_record_accepts_camel_case_keys() -> None:
    event = event_from_record(
        {
            "type": "shot",
            "minute": 33,
            "x": 88,
            "y": 47,
            "targetX": 100,
            "targetY": 50,
            "success": True,
            "isGoal": True,
            "shotOutcome": "goal",
            "xG": 0.37,
            "playerId": 9,
        }
    )
    assert isinstance(event, ShotEvent)
    assert event.is_goal
    assert event.xg == pytest.approx(0.37)
    assert event.player_id == "9"
    assert event.scored


def test_missing_fields_default_to_zero_and_false() -> None:
    event = event_from_record({"type": "pass"})
    assert isinstance(event, PassEvent)
    assert (event.minute, event.x, event.y, event.target_x, event.target_y) == (0, 0, 0, 0, 0)
    assert not event.success


def test_non_directional_events_target_their_origin() -> None:
    event = event_from_record({"type": "interception", "minute": 4, "x": 30, "y": 40})
    assert (event.target_x, event.target_y) == (30, 40)


def test_unknown_event_type_raises() -> None:
    with pytest.raises(ValueError, match="Unknown event type"):
        event_from_record({"type": "foul", "minute": 1})


def test_negative_minute_rejected() -> None:
    with pytest.raises(ValueError):
        _pass(-1)


def test_unknown_shot_outcome_rejected() -> None:
    with pytest.raises(ValueError):
        ShotEvent(minute=1, x=90, y=50, target_x=100, target_y=50, success=False, shot_outcome="post")


def test_clamp_option_bounds_coordinates() -> None:
    record = {"type": "pass", "minute": 1, "x": -4, "y": 50, "target_x": 104, "target_y": 50}
    assert event_from_record(record).x == -4
    clamped = event_from_record(record, clamp=True)
    assert (clamped.x, clamped.target_x) == (0.0, 100.0)


def test_load_csv_and_json_files(tmp_path: Path) -> None:
    csv_path = tmp_path / "events.csv"
    csv_path.write_text(
        "type,minute,x,y,target_x,target_y,success,player_id,is_goal,xg\n"
        "pass,3,40,50,60,55,true,7,,\n"
        "shot,5,90,50,100,50,false,9,false,\n",
        encoding="utf-8",
    )
    events = load_match_events(csv_path)
    assert [event.event_type for event in events] == ["pass", "shot"]
    assert events[0].player_id == "7"
    assert events[1].xg is None

    json_path = tmp_path / "events.json"
    json_path.write_text(
        json.dumps([{"type": "dribble", "minute": 12, "x": 55, "y": 20, "success": True}]),
        encoding="utf-8",
    )
    loaded = load_match_events(json_path)
    assert isinstance(loaded[0], DribbleEvent)
    assert loaded[0].minute == 12


def test_load_rejects_missing_file_and_unknown_suffix(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_match_events(tmp_path / "missing.csv")
    bad = tmp_path / "events.txt"
    bad.write_text("type\npass\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported event file type"):
        load_match_events(bad)


def test_frame_round_trip_keeps_types() -> None:
    events = [_pass(1), TackleEvent(minute=2, x=10, y=10, target_x=10, target_y=10, success=True)]
    table = events_to_frame(events)
    assert list(table["type"]) == ["pass", "tackle"]
    assert events_from_frame(table) == events


def test_events_from_frame_requires_type_column() -> None:
    with pytest.raises(ValueError, match="'type'"):
        events_from_frame(events_to_frame([_pass(1)]).drop(columns=["type"]))


def test_stored_row_converters() -> None:
    pass_event = pass_row_to_event(
        {
            "minute": 20,
            "start_x": 40,
            "start_y": 30,
            "end_x": 70,
            "end_y": 35,
            "is_successful": True,
            "player_id": "8",
            "receiver_id": "9",
            "receiver_name": "Moreau",
        }
    )
    assert (pass_event.x, pass_event.target_x, pass_event.pass_target) == (40, 70, "9")

    shot = shot_row_to_event({"minute": 21, "shot_x": 88, "shot_y": 44, "is_goal": True})
    assert (shot.target_x, shot.target_y) == (100.0, 50.0)
    assert shot.success and shot.is_goal

    duel = duel_row_to_event({"minute": 22, "duel_x": 50, "duel_y": 50, "duel_type": "dribble"})
    assert isinstance(duel, DribbleEvent)
    assert isinstance(duel_row_to_event({"minute": 22, "duel_type": "aerial"}), TackleEvent)


def test_with_player_stamps_id() -> None:
    assert {event.player_id for event in with_player([_pass(1), _pass(2)], "11")} == {"11"}


def test_passes_and_shots_split_by_event_type() -> None:
    shot = ShotEvent(minute=3, x=90, y=50, target_x=100, target_y=50, success=False)
    tackle = TackleEvent(minute=4, x=30, y=40, target_x=30, target_y=40, success=True)
    events = [_pass(1), shot, tackle, _pass(5)]
    assert passes(events) == [_pass(1), _pass(5)]
    assert shots(events) == [shot]
    assert passes(iter([tackle])) == []


def test_ten_minute_intervals_are_half_open() -> None:
    assert len(TEN_MIN_INTERVALS) == 9
    first = TEN_MIN_INTERVALS[0]
    assert first.label == "0-10'"
    assert first.contains(0)
    assert first.contains(9)
    assert not first.contains(10)
    assert TEN_MIN_INTERVALS[1].contains(10)


def test_full_match_is_half_open_like_every_interval() -> None:
    events = [_pass(0), _pass(89), _pass(119), _pass(120), _pass(125)]
    assert filter_by_interval(events, FULL_MATCH) == events[:3]
    assert not FULL_MATCH.contains(120)


def test_half_filters() -> None:
    events = [_pass(44), _pass(45), _pass(91)]
    first, second, extra = HALF_INTERVALS
    assert [e.minute for e in filter_by_interval(events, first)] == [44]
    assert [e.minute for e in filter_by_interval(events, second)] == [45]
    assert [e.minute for e in filter_by_interval(events, extra)] == [91]


def test_overtime_interval_only_offered_when_played() -> None:
    assert not has_overtime([_pass(90)])
    assert has_overtime([_pass(91)])
    assert len(available_intervals([_pass(90)], "half")) == 2
    assert len(available_intervals([_pass(95)], "half")) == 3
    assert available_intervals([], "10min") == TEN_MIN_INTERVALS
    with pytest.raises(ValueError):
        available_intervals([], "quarter")  # type: ignore[arg-type]


def test_find_interval_is_case_insensitive() -> None:
    assert find_interval("full match") is FULL_MATCH
    assert find_interval("2ND HALF").start == 45
    with pytest.raises(ValueError):
        find_interval("third half")


def test_interval_rejects_reversed_bounds() -> None:
    with pytest.raises(ValueError):
        TimeInterval("bad", 20, 10)
