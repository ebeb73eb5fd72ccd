"""
IDF weighting and bounded top-N selection of term records.

Ordering is by descending weight, ties broken by ascending term text, so the
same document always yields the same keyword list.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import TYPE_CHECKING

import numpy as np

from idf_keywords.aggregate import TermRecord
from idf_keywords.idf import IdfTable

if TYPE_CHECKING:
    from numpy.typing import NDArray


def select_top_n(
    terms: Sequence[str],
    weights: NDArray[np.float64],
    top_n: int,
) -> NDArray[np.int64]:
    """
    Indices of the ``top_n`` highest weights, best first.

    Uses np.partition to find the n-th largest weight when top_n < len(weights),
    then orders only the candidates at or above it. Every candidate tied with
    the n-th weight is kept until the final sort so the term tie-break decides
    which of them make the cut.

    Args:
        terms: Term text per record, used for tie-breaking
        weights: Weight per record (N,)
        top_n: Number of results wanted (clamped to N)

    Returns:
        Record indices (min(top_n, N),) in descending weight order
    """
    n = len(weights)
    top_n = min(top_n, n)
    if top_n <= 0:
        return np.array([], dtype=np.int64)

    negated = -np.asarray(weights, dtype=np.float64)
    if top_n < n:
        # O(n) threshold, then sort only the survivors
        threshold = np.partition(negated, top_n - 1)[top_n - 1]
        candidates = np.flatnonzero(negated <= threshold)
    else:
        candidates = np.arange(n)

    term_array = np.array([terms[i] for i in candidates], dtype=str)
    by_term = np.argsort(term_array, kind="stable")
    candidates = candidates[by_term]
    by_weight = np.argsort(negated[candidates], kind="stable")
    return candidates[by_weight][:top_n].astype(np.int64)


class Ranker:
    """
    Turns raw term counts into IDF-weighted scores and keeps the best ones.
    Input records are left untouched; ranked copies are returned.

    Args:
        idf (IdfTable): IDF values; unseen terms fall back to its average.
    """

    def __init__(self, idf: IdfTable):
        self.idf = idf

    def apply_idf(self, records: Iterable[TermRecord]) -> list[TermRecord]:
        """Copies of ``records`` with the raw count replaced by count x IDF."""
        return [
            replace(record, offsets=list(record.offsets), weight=record.weight * self.idf.weight(record.text))
            for record in records
        ]

    def rank(self, records: Iterable[TermRecord], top_n: int) -> list[TermRecord]:
        if top_n < 0:
            raise ValueError(f"top_n must be non-negative, got {top_n}.")
        records = self.apply_idf(records)
        weights = np.array([record.weight for record in records], dtype=np.float64)
        selected = select_top_n([record.text for record in records], weights, top_n)
        return [records[i] for i in selected]
