import numpy as np
import pytest

from idf_keywords.aggregate import TermRecord
from idf_keywords.idf import IdfTable
from idf_keywords.ranking import Ranker, select_top_n


@pytest.mark.parametrize(
    "terms, weights, top_n, expected",
    [
        (["a", "b", "c"], [1.0, 3.0, 2.0], 2, [1, 2]),
        (["a", "b", "c"], [1.0, 3.0, 2.0], 3, [1, 2, 0]),
        (["a", "b", "c"], [1.0, 3.0, 2.0], 10, [1, 2, 0]),
        (["a", "b", "c"], [1.0, 3.0, 2.0], 0, []),
        ([], [], 5, []),
        # equal weights: ascending term text decides membership and order
        (["delta", "alpha", "charlie", "bravo"], [1.0, 1.0, 1.0, 1.0], 2, [1, 3]),
        (["b", "a", "d", "c"], [2.0, 1.0, 2.0, 1.0], 3, [0, 2, 1]),
        (["zeta", "eta", "theta"], [0.5, 4.0, 4.0], 1, [1]),
    ],
)
def test_select_top_n(terms, weights, top_n, expected):
    selected = select_top_n(terms, np.array(weights, dtype=np.float64), top_n)
    assert list(selected) == expected


def _records(counts: dict[str, int]) -> list[TermRecord]:
    return [TermRecord(term, "n", list(range(count)), float(count)) for term, count in counts.items()]


@pytest.fixture
def ranker():
    return Ranker(IdfTable({"learning": 1.5, "work": 2.0}))


def test_known_terms_use_their_idf(ranker):
    ranked = ranker.rank(_records({"learning": 2, "work": 1}), top_n=2)
    assert [r.text for r in ranked] == ["learning", "work"]
    assert [r.weight for r in ranked] == pytest.approx([3.0, 2.0])


def test_unknown_terms_use_average_idf(ranker):
    ranked = ranker.rank(_records({"unseen": 2}), top_n=1)
    assert ranked[0].weight == pytest.approx(2 * 1.75)


def test_top_n_is_clamped(ranker):
    ranked = ranker.rank(_records({"learning": 1, "work": 1, "other": 1}), top_n=50)
    assert len(ranked) == 3


def test_ranking_is_deterministic(ranker):
    counts = {f"term{i:02d}": 1 + i % 3 for i in range(30)}
    first = [(r.text, r.weight) for r in ranker.rank(_records(counts), top_n=7)]
    second = [(r.text, r.weight) for r in ranker.rank(_records(counts), top_n=7)]
    assert first == second
    assert [text for text, _ in first] == ["term02", "term05", "term08", "term11", "term14", "term17", "term20"]


def test_negative_top_n(ranker):
    with pytest.raises(ValueError):
        ranker.rank(_records({"learning": 1}), top_n=-1)


def test_rank_leaves_records_unweighted(ranker):
    records = _records({"learning": 2, "work": 1})
    first = ranker.rank(records, top_n=2)
    second = ranker.rank(records, top_n=2)

    assert [r.weight for r in first] == pytest.approx([3.0, 2.0])
    assert [r.weight for r in second] == pytest.approx([3.0, 2.0])
    assert [r.weight for r in records] == [2.0, 1.0]
