from __future__ import annotations

import json
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest

from pitch_analytics.cli import build_parser, main
from pitch_analytics.config import clear_project_path_cache

EVENTS_CSV = (
    "type,minute,x,y,target_x,target_y,success,player_id,pass_target,is_goal\n"
    "pass,10,70,50,90,50,true,7,9,\n"
    "shot,10,90,50,100,50,true,9,,true\n"
    "pass,50,60,20,75,20,true,8,7,\n"
)


def _json_payload(output: str) -> dict:
    return json.loads(output[output.index("{"):])


def test_parser_defaults() -> None:
    args = build_parser().parse_args([])
    assert args.input is None
    assert args.interval is None
    assert args.player is None
    assert not args.export


def test_main_prints_summary(tmp_path: Path, capsys) -> None:
    events = tmp_path / "events.csv"
    events.write_text(EVENTS_CSV, encoding="utf-8")
    clear_project_path_cache()

    main(["--input", str(events), "--interval", "1st Half"])
    out = capsys.readouterr().out

    assert out.startswith("Chances Created (1st Half)")
    payload = _json_payload(out)
    assert payload["interval"] == "1st Half"
    assert payload["event_count"] == 2
    assert payload["chances"]["box_entries"] == 1
    assert payload["shots"]["goals"] == 1


def test_main_export_writes_contract(tmp_path: Path, capsys) -> None:
    events = tmp_path / "events.csv"
    events.write_text(EVENTS_CSV, encoding="utf-8")
    output_dir = tmp_path / "out"
    clear_project_path_cache()

    main(["--input", str(events), "--player", "7", "--output-dir", str(output_dir), "--export"])
    payload = _json_payload(capsys.readouterr().out)

    assert payload["player_id"] == "7"
    assert (output_dir / "results.json").exists()
    assert (output_dir / "figures" / "chance_map.png").exists()
    assert (output_dir / "tables" / "zone_stats.csv").exists()


def test_unknown_interval_exits(tmp_path: Path) -> None:
    clear_project_path_cache()
    with pytest.raises(SystemExit):
        main(["--input", str(tmp_path / "events.csv"), "--interval", "3rd Half"])
