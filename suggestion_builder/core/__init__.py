"""
suggestion_builder.core

The suggestion engine:
 - SuggestionGenerator: immutable window-based phrase generator
 - SuggestionBuilder: fluent setup for the generator
 - build(): keyword-argument shortcut
"""

from .suggestion import (
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
