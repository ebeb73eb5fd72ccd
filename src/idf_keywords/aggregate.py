"""
Per-document term statistics built from tagged tokens.

Offsets are UTF-8 byte offsets into the source text. The aggregation is only
trusted when the tokens cover the text exactly: if the summed token byte
lengths differ from the text's byte length, every record is discarded.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import NamedTuple

from idf_keywords.stopwords import StopwordSet
from idf_keywords.tagging import normalize_tag

logger = logging.getLogger(__name__)


def byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


class TaggedToken(NamedTuple):
    """One token of tagger output; unpacks as ``(text, pos)``."""

    text: str
    pos: str


@dataclass
class TermRecord:
    """
    Statistics for one distinct term within a single extraction.

    ``weight`` holds the raw occurrence count until ranking multiplies it by
    the term's IDF.
    """

    text: str
    pos: str = ""
    offsets: list[int] = field(default_factory=list)
    weight: float = 0.0

    @property
    def count(self) -> int:
        return len(self.offsets)


@dataclass
class Aggregation:
    """Result of one aggregation pass."""

    records: dict[str, TermRecord]
    covered: bool
    consumed_bytes: int
    expected_bytes: int


class TermAggregator:
    """
    Filters tagged tokens and accumulates frequency, offsets and tag per term.

    A token is skipped when it has fewer than ``min_token_chars`` code points,
    is a stopword, or carries a tag outside ``allowed_pos``. For kept tokens the
    stored tag is overwritten on every occurrence, so the last tag wins.

    Args:
        allowed_pos (frozenset[str]): POS whitelist.
        stopwords (StopwordSet): Terms never aggregated.
        min_token_chars (int): Shortest token, in code points, that may be kept.
        strip_pos (bool): Trim whitespace from tags before matching.
    """

    def __init__(
        self,
        allowed_pos: frozenset[str],
        stopwords: StopwordSet,
        min_token_chars: int = 2,
        strip_pos: bool = True,
    ):
        self.allowed_pos = frozenset(allowed_pos)
        self.stopwords = stopwords
        self.min_token_chars = min_token_chars
        self.strip_pos = strip_pos

    def is_candidate(self, token: str, pos: str) -> bool:
        if len(token) < self.min_token_chars:
            return False
        if self.stopwords.contains(token):
            return False
        return pos in self.allowed_pos

    def aggregate(self, tokens: Iterable[tuple[str, str]], text: str) -> Aggregation:
        records: dict[str, TermRecord] = {}
        offset = 0
        for token, pos in tokens:
            start = offset
            offset += byte_length(token)
            if self.strip_pos:
                pos = normalize_tag(pos)
            if not self.is_candidate(token, pos):
                continue
            record = records.get(token)
            if record is None:
                record = records[token] = TermRecord(token)
            record.offsets.append(start)
            record.weight += 1.0
            record.pos = pos

        expected = byte_length(text)
        if offset != expected:
            logger.error(
                "Tagged tokens cover %d bytes but the text has %d; discarding %d terms",
                offset,
                expected,
                len(records),
            )
            return Aggregation({}, False, offset, expected)
        return Aggregation(records, True, offset, expected)
