"""Turn raw book text into a tidy table with one row per word."""
from __future__ import annotations

from dataclasses import astuple, dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence, Union
import logging
import re

import pandas as pd

from .config import CHAPTER_PATTERN

logger = logging.getLogger(__name__)

# Letters and digits, keeping apostrophes inside words ("don't", "emma's")
_WORD_RE = re.compile(r"[^\W_]+(?:['’][^\W_]+)*")

TOKEN_COLUMNS = ["book", "linenumber", "chapter", "word"]


@dataclass(frozen=True)
class TokenRow:
    book: str
    linenumber: int
    chapter: int
    word: str


def iter_tokens(
    book: str,
    lines: Iterable[str],
    chapter_pattern: str = CHAPTER_PATTERN,
) -> Iterator[TokenRow]:
    """Yield one ``TokenRow`` per word of ``lines``, in text order.

    Line numbers start at 1. The chapter counter starts at 0 and goes up by
    one on every line that matches ``chapter_pattern``; words on the heading
    line already belong to the new chapter.
    """
    heading = re.compile(chapter_pattern, re.IGNORECASE)
    chapter = 0
    for linenumber, line in enumerate(lines, start=1):
        if heading.search(line):
            chapter += 1
        for match in _WORD_RE.finditer(line.lower()):
            yield TokenRow(book, linenumber, chapter, match.group().replace("’", "'"))


def tokenize_corpus(
    corpus: Mapping[str, Iterable[str]],
    chapter_pattern: str = CHAPTER_PATTERN,
) -> pd.DataFrame:
    rows: List[tuple] = []
    for book, lines in corpus.items():
        before = len(rows)
        rows.extend(astuple(row) for row in iter_tokens(book, lines, chapter_pattern))
        logger.debug("tokenized %r into %d words", book, len(rows) - before)
    frame = pd.DataFrame(rows, columns=TOKEN_COLUMNS)
    if frame.empty:
        frame = frame.astype({"book": str, "linenumber": int, "chapter": int, "word": str})
    logger.info("tokenized %d books into %d words", len(corpus), len(frame))
    return frame


def _title_from_path(path: Path) -> str:
    return re.sub(r"[_-]+", " ", path.stem).strip()


def read_book(path: Union[str, Path]) -> List[str]:
    with open(path, "r", encoding="utf-8") as handle:
        return handle.read().splitlines()


def read_corpus(paths: Sequence[Union[str, Path]]) -> Dict[str, List[str]]:
    """Read plain text books keyed by a title derived from the file name.

    Titles that collide (same file name in two folders, ``emma_1`` and
    ``emma-1``) get a `` (2)``, `` (3)``... suffix so no book is lost.
    """
    corpus: Dict[str, List[str]] = {}
    for raw in paths:
        path = Path(raw)
        base = _title_from_path(path)
        title = base
        suffix = 2
        while title in corpus:
            title = f"{base} ({suffix})"
            suffix += 1
        if title != base:
            logger.warning("book title %r already used; reading %s as %r", base, path, title)
        corpus[title] = read_book(path)
    return corpus


__all__ = [
    "TOKEN_COLUMNS",
    "TokenRow",
    "iter_tokens",
    "tokenize_corpus",
    "read_book",
    "read_corpus",
]
