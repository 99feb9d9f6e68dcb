"""
Offline benchmark harness.

- run_case:  play one hidden answer with a fresh SolverSession.
- run_batch: play many answers in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

Feedback comes from engine.scoring, so every round handed to the session is
consistent with the hidden answer. A case that empties the allow-list is
recorded as a failure with `exhausted=True` instead of raising.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, List, Iterable, Tuple

from wordle_resolver.engine import NoCandidatesRemain, score
from wordle_resolver.engine.scoring import solved_pattern
from wordle_resolver.solvers import SolverSession

log = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a non-Wordle turn budget."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        answer: str,
        *,
        allow_list: Iterable[str],
        dictionary: Iterable[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Play until the session guesses `answer` or the turn budget runs out.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, feedback)]), exhausted (bool)
    """
    _assert_wordle_turns(max_turns)

    session = SolverSession(allow_list, dictionary, n=N)
    history: List[Tuple[str, str]] = []
    exhausted = False
    success = False

    t0 = time.perf_counter()
    for _turn in range(1, max_turns + 1):
        try:
            guess, _solved = session.next_guess()
        except NoCandidatesRemain:
            log.warning("no candidates left for %r after %d guess(es)", answer, len(history))
            exhausted = True
            break

        feedback = score(guess, answer)
        history.append((guess, feedback))
        if feedback == solved_pattern(N):
            success = True
            break

        session.apply_feedback(guess, feedback)

    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
        "exhausted": exhausted,
    }


def run_batch(
        answers: List[str],
        *,
        allow_list: List[str],
        dictionary: List[str],
        N: int,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is given, only the first K answers
    (after filtering to length N) are played.
    """
    _assert_wordle_turns(max_turns)

    pool = [w for w in answers if len(w) == N]
    if sample is not None:
        pool = pool[:sample]

    return [
        run_case(ans, allow_list=allow_list, dictionary=dictionary, N=N, max_turns=max_turns)
        for ans in pool
    ]
