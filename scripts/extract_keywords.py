"""
Extract keywords from pre-tagged text.

Usage (example):
    uv run python scripts/extract_keywords.py \
        --idf dict/idf.utf8 --stopwords dict/stop_words.utf8 \
        --tagged doc.tsv --top-n 10

The tagged file holds one ``token<TAB>pos`` pair per line, as produced by an
external segmenter. Without ``--text`` the document is the concatenation of
the tokens; with it, the tokens are checked against that file's contents.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from idf_keywords.errors import DictionaryError
from idf_keywords.extractor import DEFAULT_ALLOWED_POS, DEFAULT_TOP_N, ExtractorConfig, KeywordExtractor
from idf_keywords.tagging import StaticTagger, read_tagged_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank keywords of a tagged document by TF x IDF.")
    parser.add_argument("--idf", required=True, type=Path, help="IDF dictionary ('term idf' per line).")
    parser.add_argument("--stopwords", required=True, type=Path, help="Stopword list (one per line).")
    parser.add_argument("--tagged", required=True, type=Path, help="Tagged tokens ('token<TAB>pos' per line).")
    parser.add_argument("--text", type=Path, default=None, help="Original text to check token coverage against.")
    parser.add_argument("--top-n", type=int, default=DEFAULT_TOP_N, help=f"Keywords to print (default: {DEFAULT_TOP_N}).")
    parser.add_argument(
        "--pos",
        default=",".join(sorted(DEFAULT_ALLOWED_POS)),
        help="Comma-separated POS whitelist (default: %(default)s).",
    )
    parser.add_argument("--json", action="store_true", help="Print one JSON object per keyword.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log dictionary loading details.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    tagger = StaticTagger(read_tagged_file(args.tagged))
    text = args.text.read_text(encoding="utf-8") if args.text else tagger.text
    config = ExtractorConfig(allowed_pos=frozenset(p for p in args.pos.split(",") if p))

    try:
        extractor = KeywordExtractor.from_files(tagger, args.idf, args.stopwords, config)
    except (OSError, DictionaryError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    for keyword in extractor.extract(text, args.top_n):
        if args.json:
            print(keyword)
        else:
            print(f"{keyword.word}\t{keyword.weight:.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
