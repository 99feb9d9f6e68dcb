"""
Per-position letter sets over the fixed a–z alphabet.

A LetterSet is a 26-slot boolean mask, optionally pinned to one confirmed
letter. When pinned, exactly that letter's slot is set.

Inputs are single lowercase ASCII letters only; anything else is a caller
bug and trips an assert rather than raising a recoverable error.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)


def letter_index(c: str) -> int:
    assert len(c) == 1 and "a" <= c <= "z", f"not a lowercase letter: {c!r}"
    return ord(c) - ord("a")


def is_word(w: str) -> bool:
    """True if `w` is non-empty and made only of a–z."""
    return bool(w) and all("a" <= ch <= "z" for ch in w)


def encode_words(words: Iterable[str]) -> np.ndarray:
    """
    Encode equal-length words as a (W, N) uint8 matrix of letter indices.

    Raises ValueError on non a–z characters or ragged lengths.
    """
    words = list(words)
    if not words:
        return np.zeros((0, 0), dtype=np.uint8)
    n = len(words[0])
    for w in words:
        if len(w) != n:
            raise ValueError(f"ragged word list: {w!r} is not {n} letters")
        if not is_word(w):
            raise ValueError(f"not a lowercase a-z word: {w!r}")
    buf = np.frombuffer("".join(words).encode("ascii"), dtype=np.uint8)
    return (buf - ord("a")).reshape(len(words), n)


class LetterSet:
    """Possibility set for one board position."""

    __slots__ = ("_mask", "_pinned")

    def __init__(self, default: bool = True):
        self._mask = np.full(ALPHABET_SIZE, default, dtype=bool)
        self._pinned: Optional[str] = None

    def contains(self, c: str) -> bool:
        return bool(self._mask[letter_index(c)])

    def remove(self, c: str) -> None:
        self._mask[letter_index(c)] = False

    def add(self, c: str) -> None:
        self._mask[letter_index(c)] = True

    def pin(self, c: str) -> None:
        """Collapse the set to exactly `c`."""
        i = letter_index(c)
        self._mask[:] = False
        self._mask[i] = True
        self._pinned = c

    def is_pinned(self) -> bool:
        return self._pinned is not None

    @property
    def pinned_char(self) -> Optional[str]:
        return self._pinned

    def to_list(self) -> List[str]:
        """Letters currently in the set, ascending."""
        return [ALPHABET[i] for i in np.flatnonzero(self._mask)]

    @property
    def mask(self) -> np.ndarray:
        m = self._mask.copy()
        m.flags.writeable = False
        return m

    def copy(self) -> "LetterSet":
        other = LetterSet()
        other._mask = self._mask.copy()
        other._pinned = self._pinned
        return other

    def __len__(self) -> int:
        return int(self._mask.sum())

    def __repr__(self) -> str:
        if self._pinned is not None:
            return f"LetterSet(pinned={self._pinned!r})"
        return f"LetterSet({''.join(self.to_list())!r})"
