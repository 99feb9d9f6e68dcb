"""
Candidate filtering against the constraint model.

Given:
  - the allow-list (plausible answers, shrunk in place)
  - the current ConstraintModel
  - the letters flagged misplaced in the latest round

Keep a word only if it passes BOTH filters:
  - positional: every letter w[i] is still possible at position i
  - presence  : w contains every misplaced letter somewhere

Order of the surviving words is preserved.
"""

from __future__ import annotations

from typing import Iterable, List

import numpy as np

from .letters import encode_words, letter_index
from .model import ConstraintModel


def positional_mask(words: List[str], model: ConstraintModel) -> np.ndarray:
    """(W,) bool: True where every letter is still allowed at its slot."""
    if not words:
        return np.zeros(0, dtype=bool)
    codes = encode_words(words)                      # (W, N)
    allowed = model.possible_matrix()                # (N, 26)
    return allowed[np.arange(model.n), codes].all(axis=1)


def presence_mask(words: List[str], present: Iterable[str]) -> np.ndarray:
    """(W,) bool: True where the word contains every letter in `present`."""
    keep = np.ones(len(words), dtype=bool)
    letters = sorted(set(present))
    if not words or not letters:
        return keep
    codes = encode_words(words)
    for c in letters:
        keep &= (codes == letter_index(c)).any(axis=1)
    return keep


def filter_allow_list(allow_list: List[str], model: ConstraintModel,
                      present: Iterable[str] = ()) -> int:
    """
    Drop words inconsistent with `model` (and with `present`) from
    `allow_list` in place. Returns how many were removed.
    """
    if not allow_list:
        return 0
    keep = positional_mask(allow_list, model) & presence_mask(allow_list, present)
    before = len(allow_list)
    allow_list[:] = [w for w, k in zip(allow_list, keep) if k]
    return before - len(allow_list)
