import csv
import json
from pathlib import Path

import pytest
from wordle_resolver.engine.scoring import solved_pattern
from wordle_resolver.harness import run_batch, run_case, summarize, write_csv, write_manifest


def test_run_case_smoke():
    allow = ["crane", "raise", "stare"]
    dictionary = ["crane", "raise", "stare", "trace", "cared"]
    r = run_case("crane", allow_list=allow, dictionary=dictionary, N=5, max_turns=6)
    assert r["success"] is True
    # raise (yybbg) leaves only crane
    assert r["history"] == [("raise", "yybbg"), ("crane", "ggggg")]
    assert r["guesses"] == 2 and r["exhausted"] is False


def test_run_case_answer_outside_allow_list_exhausts():
    r = run_case("zesty", allow_list=["crane", "slate"], dictionary=["crane", "slate"], N=5)
    assert r["success"] is False
    assert r["exhausted"] is True


def test_run_case_enforces_turn_budget():
    with pytest.raises(ValueError):
        run_case("crane", allow_list=["crane"], dictionary=["crane"], N=5, max_turns=7)


def test_run_batch_and_outputs(tmp_path: Path):
    answers = ["crane", "raise", "stare", "trace", "cared"]
    dictionary = answers + ["adieu", "arise"]
    results = run_batch(answers, allow_list=answers, dictionary=dictionary, N=5, sample=3)
    assert [r["answer"] for r in results] == answers[:3]
    assert all(r["success"] for r in results)

    summary = summarize(results)
    assert summary["cases"] == 3 and summary["solved"] == 3 and summary["success_rate"] == 1.0

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=6, N=5)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 3
    assert rows[0]["answer"] == "crane" and rows[0]["guess_1"]
    assert rows[0]["guess_6"] == ""

    man_path = write_manifest({"summary": summary}, str(tmp_path / "m.json"))
    assert json.loads(Path(man_path).read_text(encoding="utf-8"))["summary"]["solved"] == 3


def test_run_case_stops_on_all_green():
    r = run_case("level", allow_list=["level"], dictionary=["level"], N=5)
    assert r["history"] == [("level", solved_pattern(5))]
    assert r["success"] is True and r["guesses"] == 1
