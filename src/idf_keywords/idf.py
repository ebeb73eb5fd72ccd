"""
IDF dictionary with a fallback average for unseen terms.

File format: one entry per line, ``term idf``. Blank lines and lines that do
not split into exactly two fields are skipped with a warning. The numeric field
is parsed permissively: the longest leading decimal number is used and text
without one counts as 0.0, so ``"foo abc"`` is accepted with an IDF of zero.

The fallback average divides the IDF sum by every line read, skipped lines
included, so malformed lines dilute it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path

import numpy as np

from idf_keywords.errors import DictionaryError

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_idf_value(text: str) -> float:
    """
    Parse the leading decimal number of ``text``, 0.0 if there is none.

    Only decimal notation is recognised: unlike C ``atof``, ``inf``, ``nan`` and
    hex spellings such as ``0x1A`` give 0.0 (``0x1A`` reads as its leading ``0``).
    """
    match = _LEADING_NUMBER.match(text)
    if match is None:
        return 0.0
    return float(match.group(1))


class IdfTable:
    """
    Immutable term -> IDF mapping plus the average IDF used for unseen terms.

    Every accepted entry contributes to the average, so a term listed twice
    keeps its last value in the mapping but adds both values to the sum. The
    divisor is ``line_count`` when given (lines read, skipped ones included),
    otherwise the number of entries.

    Args:
        entries (Mapping[str, float] | Iterable[tuple[str, float]]): IDF entries
            in load order.
        line_count (int | None): Divisor for the average.

    Raises:
        DictionaryError: If there are no entries or the average is not positive.
    """

    def __init__(
        self,
        entries: Mapping[str, float] | Iterable[tuple[str, float]],
        line_count: int | None = None,
    ):
        items = entries.items() if isinstance(entries, Mapping) else entries
        idf_map: dict[str, float] = {}
        values: list[float] = []
        for term, idf in items:
            idf_map[term] = float(idf)
            values.append(float(idf))

        if not values:
            raise DictionaryError("IDF dictionary has no valid entries.")
        divisor = line_count if line_count is not None else len(values)
        average = float(np.sum(np.array(values, dtype=np.float64))) / max(divisor, 1)
        if not average > 0.0:
            raise DictionaryError(f"IDF dictionary average must be positive, got {average}.")

        self._idf = idf_map
        self._average = average
        self.entry_count = len(values)

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: str = "<lines>") -> "IdfTable":
        entries: list[tuple[str, float]] = []
        skipped = 0
        line_count = 0
        for lineno, line in enumerate(lines):
            line_count += 1
            line = line.rstrip("\n")
            if not line:
                logger.warning("%s: line %d empty, skipped", source, lineno)
                skipped += 1
                continue
            fields = line.split()
            if len(fields) != 2:
                logger.warning("%s: line %d %r malformed, skipped", source, lineno, line)
                skipped += 1
                continue
            entries.append((fields[0], parse_idf_value(fields[1])))

        table = cls(entries, line_count=line_count)
        logger.info(
            "Loaded %d IDF entries from %s (%d skipped, average %.4f)",
            table.entry_count,
            source,
            skipped,
            table.average_idf,
        )
        return table

    @classmethod
    def from_file(cls, path: str | Path) -> "IdfTable":
        with open(path, encoding="utf-8") as f:
            return cls.from_lines(f, source=str(path))

    def lookup(self, term: str) -> float | None:
        return self._idf.get(term)

    @property
    def average_idf(self) -> float:
        return self._average

    def weight(self, term: str) -> float:
        """IDF of ``term``, or the dictionary average when it is not listed."""
        return self._idf.get(term, self._average)

    def __contains__(self, term: object) -> bool:
        return term in self._idf

    def __len__(self) -> int:
        return len(self._idf)
