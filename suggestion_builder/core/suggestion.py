# suggestion.py
# Builds word-phrase suggestions out of a pre-split token stream.
# Each start index grows a window of up to max_combined_words tokens and every
# valid prefix of that window is emitted. The first stop-word or too-short
# token ends the window for that start index.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Tuple

logger = logging.getLogger(__name__)

SEPARATOR = " "
DEFAULT_MAX_COMBINED_WORDS = 3
DEFAULT_MAX_WORD_TO_IGNORE_LENGTH = 1


class InvalidArgumentError(ValueError):
    """Raised when a keyword or stop-word is not a string, or tokens is a bare string."""


def _normalize_stop_words(stop_words: Optional[Iterable[str]]) -> List[str]:
    if not stop_words:
        return []
    out = []
    for word in stop_words:
        if not isinstance(word, str):
            raise InvalidArgumentError(f"stop-word must be a string, got {word!r}")
        out.append(word.upper())
    return out


def _as_token_tuple(tokens) -> Tuple[Optional[str], ...]:
    if isinstance(tokens, str):
        raise InvalidArgumentError("tokens must be a sequence of strings, not a single string")
    return tuple(tokens) if tokens else ()


@dataclass(frozen=True)
class SuggestionGenerator:
    """
    Immutable suggestion generator.
    tokens: token stream in original order
    stop_words: upper-cased stop-words
    max_combined_words: window size
    max_word_to_ignore_length: tokens with len <= this are rejected

    Use SuggestionBuilder (or build()) rather than the constructor.
    Stop-words passed directly are upper-cased here as well.
    """

    tokens: Tuple[Optional[str], ...] = ()
    stop_words: FrozenSet[str] = frozenset()
    max_combined_words: int = DEFAULT_MAX_COMBINED_WORDS
    max_word_to_ignore_length: int = DEFAULT_MAX_WORD_TO_IGNORE_LENGTH

    def __post_init__(self):
        # frozen: bypass __setattr__ to store the normalized forms
        object.__setattr__(self, "tokens", _as_token_tuple(self.tokens))
        object.__setattr__(self, "stop_words", frozenset(_normalize_stop_words(self.stop_words)))

    @staticmethod
    def builder(tokens: Optional[Iterable[Optional[str]]] = None) -> "SuggestionBuilder":
        return SuggestionBuilder(tokens)

    # generation --------------------------------------------------------
    def suggest(self) -> List[str]:
        """
        Return every valid window prefix, ordered by start index and then
        window length. Duplicates are kept.
        """
        out: List[str] = []
        n = len(self.tokens)
        for start in range(n):
            acc = ""
            for idx in range(start, min(start + self.max_combined_words, n)):
                part = self.tokens[idx]
                if self.is_invalid(part):
                    break
                acc += part + SEPARATOR
                out.append(acc.rstrip())
        logger.debug("suggest: %d tokens -> %d suggestions", n, len(out))
        return out

    def suggest_by_keyword(self, keyword: str) -> List[str]:
        """
        suggest() filtered to entries containing keyword (case-insensitive
        substring match). An empty keyword keeps everything.
        """
        if not isinstance(keyword, str):
            raise InvalidArgumentError(f"keyword must be a string, got {keyword!r}")
        needle = keyword.upper()
        return [s for s in self.suggest() if needle in s.upper()]

    def is_invalid(self, token: Optional[str]) -> bool:
        """True if token is None, too short, or a stop-word."""
        return (
            token is None
            or len(token) <= self.max_word_to_ignore_length
            or token.upper() in self.stop_words
        )


class SuggestionBuilder:
    """
    Step by step setup for SuggestionGenerator.
    Every setter returns the builder so calls can be chained:

        gen = (SuggestionBuilder(tokens)
               .set_stop_words(["is", "a", "the"])
               .set_max_combined_words(5)
               .build())

    Stop-words accumulate over repeated set_stop_words() calls.
    """

    def __init__(self, tokens: Optional[Iterable[Optional[str]]] = None):
        self._tokens = _as_token_tuple(tokens)
        self._stop_words: set = set()
        self._max_combined_words = DEFAULT_MAX_COMBINED_WORDS
        self._max_word_to_ignore_length = DEFAULT_MAX_WORD_TO_IGNORE_LENGTH

    def set_stop_words(self, stop_words: Optional[Iterable[str]]) -> "SuggestionBuilder":
        self._stop_words.update(_normalize_stop_words(stop_words))
        return self

    def set_max_combined_words(self, max_combined_words: int) -> "SuggestionBuilder":
        self._max_combined_words = max_combined_words
        return self

    def set_max_word_to_ignore_length(self, max_word_to_ignore_length: int) -> "SuggestionBuilder":
        self._max_word_to_ignore_length = max_word_to_ignore_length
        return self

    def build(self) -> SuggestionGenerator:
        """Snapshot current settings into an immutable generator."""
        logger.debug(
            "build: tokens=%d stop_words=%d max_combined_words=%d max_word_to_ignore_length=%d",
            len(self._tokens),
            len(self._stop_words),
            self._max_combined_words,
            self._max_word_to_ignore_length,
        )
        return SuggestionGenerator(
            tokens=self._tokens,
            stop_words=frozenset(self._stop_words),
            max_combined_words=self._max_combined_words,
            max_word_to_ignore_length=self._max_word_to_ignore_length,
        )


def build(
    tokens: Optional[Iterable[Optional[str]]],
    stop_words: Optional[Iterable[str]] = None,
    max_combined_words: int = DEFAULT_MAX_COMBINED_WORDS,
    max_word_to_ignore_length: int = DEFAULT_MAX_WORD_TO_IGNORE_LENGTH,
) -> SuggestionGenerator:
    """Keyword-argument shortcut for SuggestionBuilder(...).set_*().build()."""
    return (
        SuggestionBuilder(tokens)
        .set_stop_words(stop_words)
        .set_max_combined_words(max_combined_words)
        .set_max_word_to_ignore_length(max_word_to_ignore_length)
        .build()
    )
