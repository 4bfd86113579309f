import csv
import json
from pathlib import Path

from wordscramble.datasets import FixedWordSource
from wordscramble.dictionaries import WordSetDictionary
from wordscramble.game import GameState
from wordscramble.harness import replay_session, summarize, write_csv, write_manifest
from wordscramble.harness.io import timestamp_id


def _state():
    words = WordSetDictionary(["ball", "allb", "call", "bc", "ballc"])
    return GameState(FixedWordSource("ballc"), words)


def test_replay_session_smoke():
    rows = replay_session(_state(), ["ball", "ball", "allb", "bc", "  ", "zzz"])
    assert [r["status"] for r in rows] == [
        "accepted", "rejected", "accepted", "rejected", "ignored", "rejected"]
    assert [r["code"] for r in rows] == ["", "duplicate", "", "too_short", "", "infeasible"]
    assert rows[-1]["score"] == 8

    s = summarize(rows)
    assert s["final_score"] == 8
    assert s["by_status"] == {"accepted": 2, "rejected": 3, "ignored": 1}


def test_replay_reset_line_restarts():
    rows = replay_session(_state(), ["ball", ":reset", "ball"])
    assert [r["status"] for r in rows] == ["accepted", "reset", "accepted"]
    assert [r["score"] for r in rows] == [4, 0, 4]


def test_write_outputs(tmp_path: Path):
    rows = replay_session(_state(), ["ball", "bc"])
    csv_path = write_csv(rows, str(tmp_path / "out" / "replay.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        read = list(csv.DictReader(f))
    assert read[0]["word"] == "ball" and read[0]["points"] == "4"
    assert read[1]["code"] == "too_short"

    m = write_manifest({"run_id": timestamp_id(), "summary": summarize(rows)},
                       str(tmp_path / "m.json"))
    data = json.loads(Path(m).read_text(encoding="utf-8"))
    assert data["summary"]["final_score"] == 4
    assert data["run_id"].endswith("Z")
