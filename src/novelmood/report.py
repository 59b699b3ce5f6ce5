"""Charts and word cloud built from the aggregated sentiment tables.

Every function here only reads its inputs; tables are copied before any
reshaping.
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional
import logging
import math

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.figure import Figure
from wordcloud import WordCloud

from .errors import ReportError

logger = logging.getLogger(__name__)

DEFAULT_COLORS: Dict[str, str] = {"negative": "red", "positive": "darkgreen"}


def _color_for(label: str, colors: Mapping[str, str], position: int) -> str:
    if label in colors:
        return colors[label]
    palette = plt.rcParams["axes.prop_cycle"].by_key()["color"]
    return palette[position % len(palette)]


def top_words(freq: pd.DataFrame, threshold: int) -> pd.DataFrame:
    """Words seen more than ``threshold`` times, negative counts flipped below zero."""
    selected = freq[freq["n"] > threshold].copy()
    selected["n"] = np.where(selected["sentiment"] == "negative", -selected["n"], selected["n"])
    return selected.sort_values("n", kind="stable").reset_index(drop=True)


def comparison_matrix(freq: pd.DataFrame) -> pd.DataFrame:
    """Word x sentiment count matrix; absent combinations are 0."""
    if freq.empty:
        return pd.DataFrame(index=pd.Index([], name="word", dtype=object), dtype=int)
    matrix = freq.pivot_table(index="word", columns="sentiment", values="n", aggfunc="sum", fill_value=0)
    matrix.columns.name = None
    return matrix.sort_index().astype(int)


def comparison_weights(matrix: pd.DataFrame, max_words: int) -> pd.DataFrame:
    """Weight each word by how much its rate in one class exceeds its mean rate.

    Each class column becomes a rate (count / column total). The per-word
    mean rate over classes is subtracted, and the word goes to the class
    with the largest remaining deviation, which is also its weight.
    """
    columns = [column for column in matrix.columns if matrix[column].sum() > 0]
    if len(columns) < 2:
        raise ReportError("a comparison cloud needs at least two sentiment classes with words")

    rates = matrix[columns] / matrix[columns].sum(axis=0)
    deviation = rates.sub(rates.mean(axis=1), axis=0)
    weights = pd.DataFrame(
        {
            "word": deviation.index,
            "sentiment": deviation.idxmax(axis=1).values,
            "weight": deviation.max(axis=1).values,
        }
    )
    weights = weights[weights["weight"] > 0]
    return weights.sort_values("weight", ascending=False, kind="stable").head(max_words).reset_index(drop=True)


def _empty_axes(ax, message: str = "No data") -> None:
    ax.text(0.5, 0.5, message, ha="center", va="center", transform=ax.transAxes, color="#888")
    ax.set_xticks([])
    ax.set_yticks([])


def plot_trend(windowed: pd.DataFrame, *, ncols: int = 2, colors: Optional[Mapping[str, str]] = None) -> Figure:
    """One bar panel per book: net sentiment for every window of lines."""
    books = list(dict.fromkeys(windowed["book"]))
    if not books:
        fig, ax = plt.subplots(figsize=(8, 4))
        _empty_axes(ax)
        ax.set_title("Sentiment Trend")
        return fig

    ncols = max(1, min(ncols, len(books)))
    nrows = math.ceil(len(books) / ncols)
    fig, axes = plt.subplots(nrows, ncols, figsize=(6 * ncols, 3.2 * nrows), squeeze=False, sharey=True)
    for position, (ax, book) in enumerate(zip(axes.flat, books)):
        rows = windowed[windowed["book"] == book]
        ax.bar(rows["index"], rows["net"], color=_color_for(book, colors or {}, position), width=1.0)
        ax.axhline(0.0, color="#888", linestyle="--", linewidth=1)
        ax.set_title(book)
        ax.set_xlabel("index")
        ax.set_ylabel("sentiment")
    for ax in list(axes.flat)[len(books):]:
        ax.set_visible(False)
    fig.tight_layout()
    return fig


def plot_top_words(top: pd.DataFrame, *, colors: Optional[Mapping[str, str]] = None) -> Figure:
    """Horizontal diverging bars: positive words right of zero, negative left."""
    colors = {**DEFAULT_COLORS, **(colors or {})}
    fig, ax = plt.subplots(figsize=(8, max(3.0, 0.28 * len(top) + 1.0)))
    if top.empty:
        _empty_axes(ax)
    else:
        labels = list(dict.fromkeys(top["sentiment"]))
        palette = {label: _color_for(label, colors, idx) for idx, label in enumerate(labels)}
        ax.barh(top["word"], top["n"], color=[palette[label] for label in top["sentiment"]])
        ax.axvline(0.0, color="#888", linewidth=1)
        handles = [plt.Rectangle((0, 0), 1, 1, color=palette[label]) for label in labels]
        ax.legend(handles, labels, title="sentiment", loc="lower right")
    ax.set_xlabel("Sentiment Score")
    ax.set_ylabel("word")
    fig.tight_layout()
    return fig


def render_comparison_cloud(
    weights: pd.DataFrame,
    *,
    colors: Optional[Mapping[str, str]] = None,
    max_words: int = 100,
    width: int = 800,
    height: int = 800,
    seed: Optional[int] = None,
) -> WordCloud:
    """Lay out the weighted words, each colored by the class it leans to."""
    if weights.empty:
        raise ReportError("no words to place in the comparison cloud")

    colors = {**DEFAULT_COLORS, **(colors or {})}
    labels = list(dict.fromkeys(weights["sentiment"]))
    palette = {label: _color_for(label, colors, idx) for idx, label in enumerate(labels)}
    word_colors = {word: palette[label] for word, label in zip(weights["word"], weights["sentiment"])}

    def color_func(word, **kwargs):
        return word_colors.get(word, "black")

    cloud = WordCloud(
        width=width,
        height=height,
        background_color="white",
        max_words=max_words,
        random_state=seed,
        color_func=color_func,
        prefer_horizontal=0.9,
    )
    cloud.generate_from_frequencies(dict(zip(weights["word"], weights["weight"].astype(float))))
    logger.debug("placed %d words in comparison cloud", len(cloud.layout_))
    return cloud


def plot_comparison_cloud(cloud: WordCloud, *, title: str = "Positive vs. Negative Words") -> Figure:
    fig, ax = plt.subplots(figsize=(8, 8))
    ax.imshow(cloud, interpolation="bilinear")
    ax.axis("off")
    ax.set_title(title)
    fig.tight_layout()
    return fig


__all__ = [
    "DEFAULT_COLORS",
    "top_words",
    "comparison_matrix",
    "comparison_weights",
    "plot_trend",
    "plot_top_words",
    "render_comparison_cloud",
    "plot_comparison_cloud",
]
