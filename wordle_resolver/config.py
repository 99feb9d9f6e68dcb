"""
Project-wide defaults.

CLIs read these as argparse defaults; library code only reads `word_length`
so that a session built without an explicit N matches the reference game.
"""

CONFIG = {
    # Board shape
    "word_length": 5,

    # Word lists (one lowercase word per line)
    "allow_list_path": "data/allow_word.txt",   # plausible answers
    "dictionary_path": "data/all_word.txt",     # every legal guess

    # Game rules
    "max_turns": 6,

    # Diagnostics
    "candidate_preview_limit": 10,  # log remaining candidates below this size
    "log_format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
}
