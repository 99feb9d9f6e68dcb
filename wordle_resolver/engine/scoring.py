"""
Reference feedback for a single (guess, answer) pair.

Conventions (the same alphabet the solver ingests):
  - 'g' : confirmed = correct letter in the correct position
  - 'y' : misplaced = correct letter in the wrong position
  - 'b' : absent    = letter not present (or present fewer times than guessed)

Used by the benchmark harness to play hidden answers, and by tests to
generate feedback that is consistent with a known secret.

Two passes, so duplicates respect the answer's true letter counts:
  1) mark confirmed slots and count the answer's unmatched letters
  2) mark misplaced only while that letter still has an unmatched copy
"""

from collections import Counter


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback string for `guess` against `answer`.

    Examples:
      score("belle", "level") -> "bgyyy"
      score("lemon", "level") -> "ggbbb"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    assert len(guess) == len(answer), "Guess and answer must be the same length"

    pattern = ["b"] * len(guess)

    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "g"
        else:
            remaining[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == "g":
            continue
        if remaining[g] > 0:
            pattern[i] = "y"
            remaining[g] -= 1

    return "".join(pattern)


def solved_pattern(n: int) -> str:
    return "g" * n
