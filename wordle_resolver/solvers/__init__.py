from .letter_freq import (best_guess_index, compute_letter_frequency, format_histogram,
                          letter_presence, select_best_guess)
from .session import Guess, SessionState, SolverSession

__all__ = [
    "best_guess_index", "compute_letter_frequency", "format_histogram", "letter_presence",
    "select_best_guess", "Guess", "SessionState", "SolverSession",
]
