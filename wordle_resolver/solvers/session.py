"""
One game of the resolver.

A SolverSession owns:
  - the allow-list  : words still considered possible answers (shrinks)
  - the dictionary  : every legal guess (never filtered; only scored)
  - a ConstraintModel accumulating all feedback so far

Each round: next_guess() -> caller plays it and collects feedback ->
apply_feedback(guess, codes). The session's state follows the allow-list size:
ACTIVE (> 1), SOLVED (== 1), EXHAUSTED (== 0, the feedback was contradictory).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Set, Tuple

from wordle_resolver.config import CONFIG
from wordle_resolver.engine.errors import NoCandidatesRemain, WordLengthMismatch
from wordle_resolver.engine.feedback import Codes, apply_feedback
from wordle_resolver.engine.filtering import filter_allow_list
from wordle_resolver.engine.model import ConstraintModel
from .letter_freq import (best_guess_index, compute_letter_frequency,
                          format_histogram, letter_presence)

log = logging.getLogger(__name__)


class SessionState(Enum):
    ACTIVE = "active"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class Guess(NamedTuple):
    word: str
    solved: bool


def _normalize(words: Iterable[str], n: int, what: str) -> List[str]:
    out: List[str] = []
    for w in words:
        w = w.strip().lower()
        if len(w) != n:
            raise WordLengthMismatch(f"{what} word {w!r}", n, len(w))
        out.append(w)
    return out


class SolverSession:
    def __init__(self, allow_list: Iterable[str], dictionary: Iterable[str],
                 n: Optional[int] = None):
        self.n: int = int(n if n is not None else CONFIG["word_length"])
        self._allow: List[str] = _normalize(allow_list, self.n, "allow-list")
        self._dictionary: List[str] = _normalize(dictionary, self.n, "dictionary")
        self._presence = letter_presence(self._dictionary)
        self.model = ConstraintModel(self.n)
        self.history: List[Tuple[str, str]] = []
        log.info("allow-list size: %d, dictionary size: %d", len(self._allow), len(self._dictionary))

    # ---- read-only views ----

    @property
    def allow_list(self) -> List[str]:
        return list(self._allow)

    @property
    def dictionary(self) -> List[str]:
        return list(self._dictionary)

    @property
    def state(self) -> SessionState:
        size = len(self._allow)
        if size == 0:
            return SessionState.EXHAUSTED
        if size == 1:
            return SessionState.SOLVED
        return SessionState.ACTIVE

    # ---- rounds ----

    def next_guess(self) -> Guess:
        """
        Propose the next word to play.

        Raises NoCandidatesRemain once contradictory feedback has emptied the
        allow-list.
        """
        state = self.state
        if state is SessionState.EXHAUSTED:
            raise NoCandidatesRemain("no candidate words remain; the feedback so far is contradictory")
        if state is SessionState.SOLVED:
            return Guess(self._allow[0], True)

        if len(self._allow) < CONFIG["candidate_preview_limit"]:
            log.debug("maybe: %s", ", ".join(self._allow))

        histo = compute_letter_frequency(self._allow, self.model)
        log.debug("letter histogram: %s", format_histogram(histo))
        if not histo.any():
            # Every remaining letter is already placed; nothing left to probe.
            return Guess(self._allow[0], False)

        if not self._dictionary:
            raise ValueError("dictionary is empty; nothing to guess")
        i, best = best_guess_index(self._presence, histo)
        log.debug("best score: %d (%s)", best, self._dictionary[i])
        return Guess(self._dictionary[i], False)

    def apply_feedback(self, guess: str, codes: Codes) -> Set[str]:
        """
        Fold one round of feedback into the model and trim the allow-list.
        Returns the letters flagged misplaced in this round.
        """
        if self.state is SessionState.EXHAUSTED:
            raise NoCandidatesRemain("session is exhausted; start a new one")
        guess = guess.strip().lower()
        present = apply_feedback(self.model, guess, codes)
        self.history.append((guess, codes if isinstance(codes, str) else "".join(c.value for c in codes)))
        self.narrow_candidates(present)
        return present

    def narrow_candidates(self, present: Iterable[str] = ()) -> int:
        """Drop allow-list words inconsistent with the model. Returns how many went."""
        removed = filter_allow_list(self._allow, self.model, present)
        log.info("allow-list size: %d (-%d)", len(self._allow), removed)
        if not self._allow:
            log.warning("allow-list is empty; feedback is contradictory")
        return removed

    def __repr__(self) -> str:
        return (f"SolverSession(n={self.n}, candidates={len(self._allow)}, "
                f"state={self.state.value}, pattern={self.model.pattern()!r})")
