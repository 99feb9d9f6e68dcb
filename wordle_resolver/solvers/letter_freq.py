"""
Letter-Frequency guess selection (distinct-letter coverage).

Idea:
  - Build a letter histogram over the CURRENT allow-list. Each word adds 1 to
    each of its distinct letters, except letters that sit at a slot where the
    model already places them (required_elsewhere[i] holds them): guessing
    those again tells us nothing new.
  - Score every DICTIONARY word as the sum of its DISTINCT letters' counts and
    pick the strictly highest. Ties go to the earliest word, so the choice is
    deterministic.

Why it works:
  - Early turns: favors words that cover common, still-unknown letters.
  - Later turns: the histogram only reflects letters that split the survivors.

Counts are int64: with a 26-letter histogram and words of length <= 26 this
stays exact far beyond 10^6-word lists.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from wordle_resolver.engine.letters import ALPHABET, ALPHABET_SIZE, encode_words
from wordle_resolver.engine.model import ConstraintModel


def letter_presence(words: List[str]) -> np.ndarray:
    """(W, 26) bool: [w, c] is True when letter c occurs in word w."""
    out = np.zeros((len(words), ALPHABET_SIZE), dtype=bool)
    if not words:
        return out
    codes = encode_words(words)
    rows = np.repeat(np.arange(len(words)), codes.shape[1])
    out[rows, codes.ravel()] = True
    return out


def compute_letter_frequency(allow_list: List[str], model: ConstraintModel) -> np.ndarray:
    """
    Histogram (26,) int64 of how many allow-list words contain each letter
    at least once at a slot where it is not already known to be.
    """
    hist = np.zeros(ALPHABET_SIZE, dtype=np.int64)
    if not allow_list:
        return hist
    codes = encode_words(allow_list)                              # (W, N)
    required = model.required_matrix()                            # (N, 26)
    known = required[np.arange(model.n), codes]                   # (W, N)

    seen = np.zeros((len(allow_list), ALPHABET_SIZE), dtype=bool)
    rows, cols = np.nonzero(~known)
    seen[rows, codes[rows, cols]] = True
    hist += seen.sum(axis=0, dtype=np.int64)
    return hist


def score_words(presence: np.ndarray, histogram: np.ndarray) -> np.ndarray:
    """(W,) int64: sum of histogram over each word's distinct letters."""
    return presence.astype(np.int64) @ np.asarray(histogram, dtype=np.int64)


def best_guess_index(presence: np.ndarray, histogram: np.ndarray) -> Tuple[int, int]:
    """(index, score) of the best row of `presence`; the first maximum wins ties."""
    scores = score_words(presence, histogram)
    i = int(np.argmax(scores))
    return i, int(scores[i])


def select_best_guess(dictionary: List[str], histogram: np.ndarray,
                      presence: Optional[np.ndarray] = None) -> str:
    """
    Return the dictionary word with the highest distinct-letter score.

    `presence` may be a precomputed letter_presence(dictionary) to avoid
    re-encoding an immutable dictionary every turn.
    """
    if not dictionary:
        raise ValueError("dictionary is empty; nothing to guess")
    if presence is None:
        presence = letter_presence(dictionary)
    i, _score = best_guess_index(presence, histogram)
    return dictionary[i]


def format_histogram(histogram: np.ndarray) -> str:
    """Descending 'e: 12; a: 9; ...' dump for debug logs."""
    order = sorted(range(ALPHABET_SIZE), key=lambda i: (-int(histogram[i]), ALPHABET[i]))
    return "; ".join(f"{ALPHABET[i]}: {int(histogram[i])}" for i in order)
