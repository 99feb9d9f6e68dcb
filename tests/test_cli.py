from pathlib import Path

from apps.cli.play import main, play
from script.make_wordlist import extract_words
from wordle_resolver.solvers import SolverSession

WORDS = ["angle", "ankle", "apple"]


def _scripted(lines):
    it = iter(lines)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _input


def test_play_solves_and_reprompts_on_bad_feedback():
    out = []
    code = play(SolverSession(WORDS, WORDS), _scripted(["xx", "ggxgg", "GGBGG"]), out.append)
    assert code == 0
    assert out[0] == "< angle"
    assert out[1].startswith("! ") and out[2].startswith("! ")
    assert out[-1] == "< ankle"


def test_play_empty_input_quits():
    out = []
    assert play(SolverSession(WORDS, WORDS), _scripted([""]), out.append) == 0
    assert out == ["< angle"]


def test_play_eof_quits():
    assert play(SolverSession(WORDS, WORDS), _scripted([]), lambda s: None) == 0


def test_play_contradiction_exits_nonzero():
    out = []
    assert play(SolverSession(WORDS, WORDS), _scripted(["bbbbb"]), out.append) == 1
    assert out[-1].startswith("! no candidate")


def test_main_with_single_candidate(tmp_path: Path, capsys):
    allow = tmp_path / "allow.txt"
    allow.write_text("crane\n", encoding="utf-8")
    dictionary = tmp_path / "all.txt"
    dictionary.write_text("crane\nslate\n", encoding="utf-8")
    assert main(["--allow", str(allow), "--dictionary", str(dictionary)]) == 0
    assert capsys.readouterr().out.strip() == "< crane"


def test_extract_words():
    lines = ["Paris", "crane", "CRANE", "cranes", "o'er", "slate", ""]
    assert extract_words(lines, 5) == ["paris", "crane", "slate"]
    assert extract_words(lines, 5, skip_capitalized=True) == ["crane", "slate"]
