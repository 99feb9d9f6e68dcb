"""
Errors raised by the resolver core.

All of them subclass ValueError so callers that only care about "bad input"
can catch a single type. None of them is raised after partial mutation:
rounds are validated in full before any constraint is touched.
"""

from __future__ import annotations


class ResolverError(ValueError):
    """Base class for every error raised by the resolver."""


class InvalidFeedbackCode(ResolverError):
    """A feedback character outside {b, y, g}."""

    def __init__(self, code, position: int):
        self.code = code
        self.position = position
        super().__init__(
            f"invalid feedback code {code!r} at position {position} (expected one of 'b', 'y', 'g')")


class WordLengthMismatch(ResolverError):
    """A guess, feedback string or word-list entry of the wrong length."""

    def __init__(self, what: str, expected: int, actual: int):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what} has length {actual}, expected {expected}")


class InvalidWord(ResolverError):
    """A guess containing characters outside a-z."""


class NoCandidatesRemain(ResolverError):
    """The allow-list is empty: the feedback supplied so far is contradictory."""
