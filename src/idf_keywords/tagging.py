"""
Interface to the external tokenizer/tagger and helpers for pre-tagged input.

A tagger is any callable mapping text to ``(token, pos)`` pairs whose tokens,
concatenated, reproduce the text exactly. Segmentation itself happens outside
this package.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Protocol

# Characters trimmed from POS labels before they are matched.
TAG_WHITESPACE = " \f\n\r\t\v"


class Tagger(Protocol):
    """Callable that segments and POS-tags text."""

    def __call__(self, text: str) -> Iterable[tuple[str, str]]: ...


def normalize_tag(pos: str) -> str:
    return pos.strip(TAG_WHITESPACE)


class StaticTagger:
    """
    Tagger that replays a fixed token sequence, whatever text it is given.

    Useful when segmentation has already happened elsewhere: the extractor
    still checks the replayed tokens against the text it is asked about.
    """

    def __init__(self, tokens: Sequence[tuple[str, str]]):
        self.tokens = [(str(token), str(pos)) for token, pos in tokens]

    @property
    def text(self) -> str:
        """The text the replayed tokens cover."""
        return "".join(token for token, _ in self.tokens)

    def __call__(self, text: str) -> list[tuple[str, str]]:
        return list(self.tokens)


def read_tagged_lines(lines: Iterable[str]) -> list[tuple[str, str]]:
    """
    Parse ``token<TAB>pos`` lines. The last tab separates the tag, so tokens
    may themselves contain tabs. Blank lines are ignored.

    Raises:
        ValueError: If a non-blank line has no tab.
    """
    tokens = []
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line:
            continue
        token, sep, pos = line.rpartition("\t")
        if not sep:
            raise ValueError(f"line {lineno}: expected 'token<TAB>pos', got {line!r}")
        tokens.append((token, pos))
    return tokens


def read_tagged_file(path: str | Path) -> list[tuple[str, str]]:
    with open(path, encoding="utf-8") as f:
        return read_tagged_lines(f)
