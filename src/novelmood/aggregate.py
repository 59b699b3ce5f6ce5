"""Windowed and per-word aggregation of scored tokens."""
from __future__ import annotations

from numbers import Integral
from typing import List, Optional
import logging

import pandas as pd

logger = logging.getLogger(__name__)

POLARITY_LABELS = ("negative", "positive")


def windowed_sentiment(scored: pd.DataFrame, window_size: int) -> pd.DataFrame:
    """Count sentiment labels per (book, window of ``window_size`` lines).

    Returns one row per window holding at least one scored word, with a
    count column per label, ``net = positive - negative`` and ``score``,
    the sum of lexicon values in the window.
    """
    if isinstance(window_size, bool) or not isinstance(window_size, Integral) or window_size <= 0:
        raise ValueError(f"window_size must be a positive integer, got {window_size!r}")

    labels: List[str] = sorted(set(scored["sentiment"]) | set(POLARITY_LABELS))
    if scored.empty:
        return pd.DataFrame(columns=["book", "index", *labels, "net", "score"]).astype(
            {"index": int, **{label: int for label in labels}, "net": int, "score": float}
        )

    keyed = scored.assign(index=scored["linenumber"] // window_size)
    counts = (
        keyed.groupby(["book", "index", "sentiment"], sort=True)
        .size()
        .unstack("sentiment", fill_value=0)
        .reindex(columns=labels, fill_value=0)
    )
    counts.columns.name = None
    counts["net"] = counts["positive"] - counts["negative"]
    counts["score"] = keyed.groupby(["book", "index"], sort=True)["value"].sum()
    windowed = counts.reset_index()
    logger.info("aggregated %d scored words into %d windows of %d lines", len(scored), len(windowed), window_size)
    return windowed


def word_frequencies(scored: pd.DataFrame) -> pd.DataFrame:
    """Occurrences per (word, sentiment), most frequent first."""
    freq = (
        scored.groupby(["word", "sentiment"], sort=True)
        .size()
        .rename("n")
        .reset_index()
        .sort_values("n", ascending=False, kind="stable")
        .reset_index(drop=True)
    )
    return freq


def count_words(tokens: pd.DataFrame, book: Optional[str] = None) -> pd.DataFrame:
    """Plain word counts, optionally for a single book, most frequent first."""
    if book is not None:
        tokens = tokens[tokens["book"] == book]
    return (
        tokens.groupby("word", sort=True)
        .size()
        .rename("n")
        .reset_index()
        .sort_values("n", ascending=False, kind="stable")
        .reset_index(drop=True)
    )


def book_totals(windowed: pd.DataFrame) -> pd.DataFrame:
    """Per-book sums of every count column plus ``net`` and ``score``."""
    value_columns = [column for column in windowed.columns if column not in ("book", "index")]
    return windowed.groupby("book", sort=False)[value_columns].sum().reset_index()


__all__ = ["POLARITY_LABELS", "windowed_sentiment", "word_frequencies", "count_words", "book_totals"]
