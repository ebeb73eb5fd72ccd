"""
Keyword extraction facade.

Usage:
    from idf_keywords.extractor import KeywordExtractor

    extractor = KeywordExtractor.from_files(tagger, "idf.utf8", "stop_words.utf8")
    for keyword in extractor.extract(text, top_n=5):
        print(keyword)

The tagger is supplied by the caller (see ``idf_keywords.tagging.Tagger``).
Dictionaries are loaded once and only read afterwards, so one extractor can
serve concurrent ``extract`` calls.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from idf_keywords.aggregate import TermAggregator, TermRecord
from idf_keywords.idf import IdfTable
from idf_keywords.ranking import Ranker
from idf_keywords.stopwords import StopwordSet
from idf_keywords.tagging import Tagger

# Noun, verb, adjective and person name in the ICTCLAS tag set.
DEFAULT_ALLOWED_POS = frozenset({"n", "v", "a", "nr"})

DEFAULT_TOP_N = 5


@dataclass(frozen=True)
class ExtractorConfig:
    """
    Extraction parameters.

    Attributes:
        allowed_pos: POS labels a token must carry to be a keyword candidate.
        strip_pos: Trim surrounding whitespace from tagger labels before matching.
        min_token_chars: Tokens with fewer code points are never keywords.
    """

    allowed_pos: frozenset[str] = DEFAULT_ALLOWED_POS
    strip_pos: bool = True
    min_token_chars: int = 2


@dataclass(frozen=True)
class Keyword:
    """One extracted keyword with its byte offsets in the source text."""

    word: str
    pos: str
    offsets: tuple[int, ...]
    weight: float

    @classmethod
    def from_record(cls, record: TermRecord) -> "Keyword":
        return cls(record.text, record.pos, tuple(record.offsets), record.weight)

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "offset": list(self.offsets),
            "weight": self.weight,
            "pos": self.pos,
        }

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


class KeywordExtractor:
    """
    Extracts the top-N keywords of a text by frequency x IDF.

    The IDF table and stopword set are shared by reference, so several
    extractors (for example with different POS whitelists) can reuse one
    loaded dictionary.

    Args:
        tagger (Tagger): Segmenter/POS tagger whose tokens exactly cover the text.
        idf (IdfTable): IDF dictionary.
        stopwords (StopwordSet): Terms never returned.
        config (ExtractorConfig | None): Extraction parameters, defaults if None.
    """

    def __init__(
        self,
        tagger: Tagger,
        idf: IdfTable,
        stopwords: StopwordSet,
        config: ExtractorConfig | None = None,
    ):
        self.tagger = tagger
        self.idf = idf
        self.stopwords = stopwords
        self.config = config or ExtractorConfig()
        self._aggregator = TermAggregator(
            self.config.allowed_pos,
            stopwords,
            min_token_chars=self.config.min_token_chars,
            strip_pos=self.config.strip_pos,
        )
        self._ranker = Ranker(idf)

    @classmethod
    def from_files(
        cls,
        tagger: Tagger,
        idf_path: str | Path,
        stopword_path: str | Path,
        config: ExtractorConfig | None = None,
    ) -> "KeywordExtractor":
        """
        Load both dictionaries from disk.

        Raises:
            OSError: If a dictionary file cannot be opened.
            DictionaryError: If a dictionary has no usable entries.
        """
        idf = IdfTable.from_file(idf_path)
        stopwords = StopwordSet.from_file(stopword_path)
        return cls(tagger, idf, stopwords, config)

    def extract(self, text: str, top_n: int = DEFAULT_TOP_N) -> list[Keyword]:
        """
        Top ``top_n`` keywords of ``text``, best first.

        Returns an empty list when the tagger's tokens do not cover ``text``
        exactly; the mismatch is logged rather than raised.
        """
        if top_n < 0:
            raise ValueError(f"top_n must be non-negative, got {top_n}.")
        aggregation = self._aggregator.aggregate(self.tagger(text), text)
        if not aggregation.covered:
            return []
        ranked = self._ranker.rank(aggregation.records.values(), top_n)
        return [Keyword.from_record(record) for record in ranked]

    def extract_terms(self, text: str, top_n: int = DEFAULT_TOP_N) -> list[str]:
        return [keyword.word for keyword in self.extract(text, top_n)]

    def extract_weighted(self, text: str, top_n: int = DEFAULT_TOP_N) -> list[tuple[str, float]]:
        return [(keyword.word, keyword.weight) for keyword in self.extract(text, top_n)]
