"""
Constraint model: everything learned about the hidden word so far.

Two parallel arrays of LetterSet, one entry per board position:
  - possible_at[i]        : letters that may still sit at position i
  - required_elsewhere[i] : letters seen misplaced at i (present in the answer,
                            but not here). Pinned together with possible_at
                            when position i is confirmed.

The model starts open (every letter possible, nothing required) and only
ever tightens. Mutation happens in engine.feedback; everything else reads.
"""

from __future__ import annotations

from typing import List

import numpy as np

from .letters import LetterSet


class ConstraintModel:
    def __init__(self, n: int):
        if n <= 0:
            raise ValueError(f"word length must be positive; got {n}")
        self.n = int(n)
        self.possible_at: List[LetterSet] = [LetterSet(True) for _ in range(self.n)]
        self.required_elsewhere: List[LetterSet] = [LetterSet(False) for _ in range(self.n)]

    def pin(self, i: int, c: str) -> None:
        """Confirm letter `c` at position `i` in both arrays."""
        self.possible_at[i].pin(c)
        self.required_elsewhere[i].pin(c)

    def pinned_positions(self) -> List[int]:
        return [i for i, s in enumerate(self.possible_at) if s.is_pinned()]

    def pattern(self, blank: str = ".") -> str:
        """Pinned letters as a string, e.g. 'a..le'."""
        return "".join(s.pinned_char or blank for s in self.possible_at)

    def possible_matrix(self) -> np.ndarray:
        """(n, 26) bool: row i is possible_at[i]."""
        return np.stack([s.mask for s in self.possible_at])

    def required_matrix(self) -> np.ndarray:
        """(n, 26) bool: row i is required_elsewhere[i]."""
        return np.stack([s.mask for s in self.required_elsewhere])

    def __repr__(self) -> str:
        return f"ConstraintModel(n={self.n}, pattern={self.pattern()!r})"
