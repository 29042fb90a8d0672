"""
suggestion_builder

Generates short word-phrase suggestions from a pre-split token stream,
skipping stop-words and short tokens, with optional keyword filtering.
"""

from .core import (
    InvalidArgumentError,
    SuggestionBuilder,
    SuggestionGenerator,
    build,
)

__all__ = [
    "InvalidArgumentError",
    "SuggestionBuilder",
    "SuggestionGenerator",
    "build",
]

__version__ = "0.1.0"
