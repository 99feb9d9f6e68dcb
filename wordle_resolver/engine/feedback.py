"""
Feedback ingestion: fold one round of (guess, codes) into a ConstraintModel.

Codes (one per position, aligned with the guess):
  - 'b' : absent    = the letter is not in the answer (beyond other copies
                      confirmed/misplaced in the same round)
  - 'y' : misplaced = the letter is in the answer, but not here
  - 'g' : confirmed = the letter is exactly here

A round is applied in stages so it is all-or-nothing:
  1) validate lengths, letters and codes (no mutation on failure)
  2) confirmations and misplacements
  3) absences (after 2: a grey copy of a letter that is also yellow this
     round is only ruled out at its own slot; a grey copy of a letter that
     is only green this round is ruled out everywhere it is not pinned)
  4) yellow-to-green deduction, iterated to a fixed point
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Sequence, Set, Union

from .errors import InvalidFeedbackCode, InvalidWord, WordLengthMismatch
from .letters import is_word
from .model import ConstraintModel

log = logging.getLogger(__name__)


class FeedbackCode(Enum):
    ABSENT = "b"
    MISPLACED = "y"
    CONFIRMED = "g"


Codes = Union[str, Sequence[FeedbackCode]]


def parse_feedback(codes: Codes) -> List[FeedbackCode]:
    """Turn 'bygbb' (or a sequence of FeedbackCode) into a list of codes."""
    out: List[FeedbackCode] = []
    for i, c in enumerate(codes):
        if isinstance(c, FeedbackCode):
            out.append(c)
            continue
        try:
            out.append(FeedbackCode(c))
        except ValueError as e:
            raise InvalidFeedbackCode(c, i) from e
    return out


def validate_round(model: ConstraintModel, guess: str, codes: Codes) -> List[FeedbackCode]:
    """
    Check a round against the model's word length without mutating anything.
    Returns the parsed codes.
    """
    if len(guess) != model.n:
        raise WordLengthMismatch("guess", model.n, len(guess))
    if len(codes) != model.n:
        raise WordLengthMismatch("feedback", model.n, len(codes))
    if not is_word(guess):
        raise InvalidWord(f"guess must be lowercase a-z only; got {guess!r}")
    return parse_feedback(codes)


def apply_feedback(model: ConstraintModel, guess: str, codes: Codes) -> Set[str]:
    """
    Apply one feedback round to `model`.

    Returns:
      the set of letters flagged misplaced in this round (the presence
      constraints CandidateFilter enforces on top of the positional ones).

    Raises:
      WordLengthMismatch, InvalidWord, InvalidFeedbackCode, all before any mutation.
    """
    parsed = validate_round(model, guess, codes)

    present: Set[str] = set()

    # Pass 1: confirmations and misplacements.
    for i, (c, code) in enumerate(zip(guess, parsed)):
        if code is FeedbackCode.MISPLACED:
            if not model.possible_at[i].is_pinned():
                model.possible_at[i].remove(c)
                model.required_elsewhere[i].add(c)
            present.add(c)
        elif code is FeedbackCode.CONFIRMED:
            model.pin(i, c)

    # Pass 2: absences.
    for k, (c, code) in enumerate(zip(guess, parsed)):
        if code is not FeedbackCode.ABSENT:
            continue
        if c in present:
            # An unplaced copy of c exists: only this slot is ruled out.
            if model.possible_at[k].pinned_char != c:
                model.possible_at[k].remove(c)
            continue
        # Absent outright, or every copy of c is one of the pinned slots.
        for s in model.possible_at:
            if s.pinned_char != c:
                s.remove(c)

    passes = deduce_positions(model)
    log.debug("after %r/%s: pattern=%s (%d deduction pass(es))",
              guess, "".join(p.value for p in parsed), model.pattern(), passes)
    return present


def _promote_once(model: ConstraintModel) -> bool:
    """
    One yellow-to-green pass. For every letter known to be misplaced at an
    unpinned slot, find the slots that could still hold it; if only one is
    left, pin it there. Returns True if anything was pinned.
    """
    changed = False
    n = model.n
    for i in range(n):
        if model.possible_at[i].is_pinned():
            continue
        for c in model.required_elsewhere[i].to_list():
            if any(model.possible_at[j].pinned_char == c for j in range(n)):
                continue  # already located
            slots = [
                j for j in range(n)
                if not model.possible_at[j].is_pinned()
                and model.possible_at[j].contains(c)
                and not model.required_elsewhere[j].contains(c)
            ]
            if len(slots) == 1:
                model.pin(slots[0], c)
                log.debug("deduced %r at position %d", c, slots[0])
                changed = True
    return changed


def deduce_positions(model: ConstraintModel) -> int:
    """
    Run yellow-to-green promotion until a pass changes nothing.
    Returns the number of passes (every changing pass pins at least one
    more slot, so this is at most n + 1).
    """
    passes = 1
    while _promote_once(model):
        passes += 1
    return passes
