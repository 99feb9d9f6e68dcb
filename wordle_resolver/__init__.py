"""Interactive constraint-propagation solver for Wordle-style games."""

__version__ = "1.0.0"
