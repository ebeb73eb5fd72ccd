"""Stopword dictionary used to exclude terms from keyword extraction."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from idf_keywords.errors import DictionaryError

logger = logging.getLogger(__name__)


class StopwordSet:
    """
    Immutable set of stopwords matched exactly against token text.

    Members are stored verbatim: no case folding, no trimming. An empty set is
    accepted in memory, but a dictionary loaded from lines or a file must not be
    empty: that almost always means the wrong file was configured.

    Args:
        words (Iterable[str]): Stopwords, one member per item.
    """

    def __init__(self, words: Iterable[str]):
        self._words = frozenset(words)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "StopwordSet":
        """One stopword per line; only the line terminator is removed."""
        stopwords = cls(line.rstrip("\n") for line in lines)
        if not stopwords:
            raise DictionaryError("Stopword dictionary is empty.")
        return stopwords

    @classmethod
    def from_file(cls, path: str | Path) -> "StopwordSet":
        with open(path, encoding="utf-8", newline="\n") as f:
            stopwords = cls.from_lines(f)
        logger.info("Loaded %d stopwords from %s", len(stopwords), path)
        return stopwords

    def contains(self, term: str) -> bool:
        return term in self._words

    def __contains__(self, term: object) -> bool:
        return term in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)
