import pytest
from wordle_resolver.engine import (ConstraintModel, FeedbackCode, InvalidFeedbackCode, deduce_positions,
                                    InvalidWord, WordLengthMismatch, apply_feedback,
                                    filter_allow_list, parse_feedback, score)

# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle","level","bgyyy"),
    ("level","level","ggggg"),
    ("lemon","level","ggbbb"),
    ("cools","scoop","yygby"),
    ("scoop","scoop","ggggg"),
    ("crane","crane","ggggg"),
    ("raise","crane","yybbg"),
    ("stare","crane","bbgyg"),
    ("geese","those","bbbgg"),
    ("eerie","cater","ybybb"),
])
def test_score_n5_golden(guess, answer, expected):
    assert score(guess, answer) == expected

# --- N=6 sample tests ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("settle","letter","bgggyy"),
    ("little","letter","gbggby"),
    ("planet","palate","gyybyy"),
    ("kitten","tinket","ygyygy"),
])
def test_score_n6_samples(guess, answer, expected):
    assert score(guess, answer) == expected


def test_parse_feedback_accepts_strings_and_members():
    assert parse_feedback("byg") == [FeedbackCode.ABSENT, FeedbackCode.MISPLACED, FeedbackCode.CONFIRMED]
    members = [FeedbackCode.CONFIRMED, FeedbackCode.ABSENT]
    assert parse_feedback(members) == members


def test_parse_feedback_rejects_unknown_code():
    with pytest.raises(InvalidFeedbackCode) as ei:
        parse_feedback("bgx")
    assert ei.value.position == 2 and ei.value.code == "x"


def test_apply_feedback_absent_removes_everywhere():
    m = ConstraintModel(5)
    apply_feedback(m, "crane", "bbbbb")
    for s in m.possible_at:
        assert not any(s.contains(c) for c in "crane")
        assert s.contains("z")


def test_apply_feedback_misplaced_and_confirmed():
    m = ConstraintModel(5)
    present = apply_feedback(m, "crane", "bybgg")
    assert present == {"r"}
    assert not m.possible_at[1].contains("r")
    assert m.possible_at[0].contains("r")
    assert m.required_elsewhere[1].to_list() == ["r"]
    assert m.possible_at[2].pinned_char == "a"
    assert m.required_elsewhere[2].pinned_char == "a"
    assert m.pattern() == "..a.e"


def test_confirmed_duplicate_survives_absent_copies():
    # two extra e's are grey because "those" has exactly one e
    m = ConstraintModel(5)
    apply_feedback(m, "geese", score("geese", "those"))
    assert m.possible_at[4].pinned_char == "e"
    assert m.possible_at[4].to_list() == ["e"]
    assert not m.possible_at[1].contains("e")
    assert not m.possible_at[2].contains("e")
    # the only e is the green one, so e is gone from every other slot
    assert not m.possible_at[0].contains("e")
    assert not m.possible_at[3].contains("e")
    words = ["those", "ehose", "geese", "thorn", "these"]
    filter_allow_list(words, m)
    assert words == ["those"]


def test_misplaced_duplicate_keeps_letter_possible_elsewhere():
    m = ConstraintModel(5)
    present = apply_feedback(m, "eerie", score("eerie", "cater"))
    assert present == {"e", "r"}
    assert m.possible_at[3].contains("e")
    words = ["cater", "rebut", "crane", "tamer"]
    filter_allow_list(words, m, present)
    assert words == ["cater", "tamer"]


def test_yellow_promoted_when_one_slot_left():
    m = ConstraintModel(5)
    apply_feedback(m, "abcde", "ggbyb")
    assert m.pattern() == "ab..."       # d could still be at 2 or 4
    apply_feedback(m, "abdzz", "ggybb")
    assert m.pattern() == "ab..d"
    assert m.required_elsewhere[4].pinned_char == "d"


def test_deduction_chains_within_fixed_point():
    m = ConstraintModel(5)
    apply_feedback(m, "adexx", "gyybb")
    apply_feedback(m, "aedxx", "gyybb")
    assert m.pattern() == "a...."
    apply_feedback(m, "axxdx", "gbbyb")
    # d can only go to 4; once it's there, e can only go to 3
    assert m.pattern() == "a..ed"
    # already at the fixed point: one idle pass
    assert deduce_positions(m) == 1


def test_grey_copy_of_confirmed_letter_clears_every_unpinned_slot():
    m = ConstraintModel(5)
    apply_feedback(m, "sassy", "gbbbb")
    assert m.pattern() == "s...."
    assert not m.possible_at[2].contains("s")
    assert not m.possible_at[3].contains("s")
    assert not any(m.possible_at[j].contains("s") for j in range(1, 5))
    assert not any(s.contains("a") or s.contains("y") for s in m.possible_at)


@pytest.mark.parametrize("guess,codes", [
    ("appl", "gbbg"),
    ("apple", "gbbg"),
    ("apples", "gbbggb"),
])
def test_length_mismatch_leaves_model_untouched(guess, codes):
    m = ConstraintModel(5)
    with pytest.raises(WordLengthMismatch):
        apply_feedback(m, guess, codes)
    assert m.pattern() == "....."
    assert all(len(s) == 26 for s in m.possible_at)


def test_invalid_code_leaves_model_untouched():
    m = ConstraintModel(5)
    with pytest.raises(InvalidFeedbackCode):
        apply_feedback(m, "apple", "gbxgg")
    assert not m.possible_at[0].is_pinned()
    assert m.possible_at[1].contains("p")


def test_invalid_guess_characters():
    m = ConstraintModel(5)
    with pytest.raises(InvalidWord):
        apply_feedback(m, "ap-le", "gbbgg")


def test_filter_positional_example():
    m = ConstraintModel(5)
    apply_feedback(m, "apple", "gbbgg")
    words = ["apple", "angle", "ankle"]
    removed = filter_allow_list(words, m)
    assert words == ["angle", "ankle"]
    assert removed == 1


def test_filter_crane_example():
    m = ConstraintModel(5)
    present = apply_feedback(m, "crane", "bybgg")
    words = ["brake", "crate", "grate", "roate", "aware"]
    filter_allow_list(words, m, present)
    # no c, r present but not second, a third, no n, e last
    assert words == ["roate", "aware"]


def test_filter_presence_is_a_separate_conjunct():
    m = ConstraintModel(5)
    words = ["fuzzy", "jazzy", "crane"]
    filter_allow_list(words, m, present={"z", "y"})
    assert words == ["fuzzy", "jazzy"]
    filter_allow_list(words, m, present={"u"})
    assert words == ["fuzzy"]


def test_filter_empty_list_is_noop():
    words = []
    assert filter_allow_list(words, ConstraintModel(5), {"a"}) == 0
    assert words == []


@pytest.mark.parametrize("guess,answer,words,expected", [
    ("sassy", "sloth", ["slots", "sloth", "shout"], ["sloth", "shout"]),
    ("geese", "those", ["those", "ehose", "hoses"], ["those"]),
])
def test_green_plus_grey_copies_filter_other_slots(guess, answer, words, expected):
    m = ConstraintModel(5)
    present = apply_feedback(m, guess, score(guess, answer))
    filter_allow_list(words, m, present)
    assert words == expected
