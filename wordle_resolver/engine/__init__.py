from .errors import (ResolverError, InvalidFeedbackCode, InvalidWord,
                     NoCandidatesRemain, WordLengthMismatch)
from .letters import LetterSet, encode_words
from .model import ConstraintModel
from .feedback import FeedbackCode, apply_feedback, deduce_positions, parse_feedback
from .filtering import filter_allow_list
from .scoring import score

__all__ = [
    "ResolverError", "InvalidFeedbackCode", "InvalidWord", "NoCandidatesRemain",
    "WordLengthMismatch", "LetterSet", "encode_words", "ConstraintModel",
    "FeedbackCode", "apply_feedback", "deduce_positions", "parse_feedback",
    "filter_allow_list", "score",
]
