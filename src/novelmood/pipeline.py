"""End-to-end run: tokenize, score, aggregate, then write the reports."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Union
import logging

import matplotlib.pyplot as plt
import orjson
import pandas as pd

from .aggregate import book_totals, windowed_sentiment, word_frequencies
from .errors import ReportError
from .lexicon import Lexicon
from .report import (
    comparison_matrix,
    comparison_weights,
    plot_comparison_cloud,
    plot_top_words,
    plot_trend,
    render_comparison_cloud,
    top_words,
)
from .schema import PipelineConfig
from .scoring import score_tokens
from .tokens import tokenize_corpus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentimentReport:
    """All tables produced for one corpus and lexicon."""

    config: PipelineConfig
    tokens: pd.DataFrame
    scored: pd.DataFrame
    windowed: pd.DataFrame
    frequencies: pd.DataFrame
    top_words: pd.DataFrame
    matrix: pd.DataFrame

    def totals(self) -> pd.DataFrame:
        return book_totals(self.windowed)

    def summary(self) -> Dict[str, object]:
        """JSON-friendly digest of the run."""
        totals = self.totals()
        return {
            "window_size": self.config.window_size,
            "top_words_threshold": self.config.top_words_threshold,
            "books": list(dict.fromkeys(self.tokens["book"])),
            "tokens": int(len(self.tokens)),
            "scored_tokens": int(len(self.scored)),
            "windows": int(len(self.windowed)),
            "totals": totals.to_dict(orient="records"),
            "top_words": self.top_words.to_dict(orient="records"),
        }


def analyze_corpus(
    corpus: Mapping[str, Iterable[str]],
    lexicon: Lexicon,
    config: Optional[PipelineConfig] = None,
) -> SentimentReport:
    config = config or PipelineConfig()
    tokens = tokenize_corpus(corpus, chapter_pattern=config.chapter_pattern)
    scored = score_tokens(tokens, lexicon)
    windowed = windowed_sentiment(scored, config.window_size)
    frequencies = word_frequencies(scored)
    return SentimentReport(
        config=config,
        tokens=tokens,
        scored=scored,
        windowed=windowed,
        frequencies=frequencies,
        top_words=top_words(frequencies, config.top_words_threshold),
        matrix=comparison_matrix(frequencies),
    )


def _save(fig, path: Path) -> Path:
    try:
        fig.savefig(path, dpi=150)
    finally:
        plt.close(fig)
    return path


def render_reports(report: SentimentReport, out_dir: Union[str, Path]) -> Dict[str, Path]:
    """Write the three charts and ``summary.json`` into ``out_dir``.

    The word cloud is skipped, with a warning, when the frequency table
    cannot support a two-class comparison.
    """
    config = report.config
    out = Path(out_dir)
    out.mkdir(parents=True, exist_ok=True)
    written: Dict[str, Path] = {}

    written["trend"] = _save(plot_trend(report.windowed), out / "trend.png")
    written["top_words"] = _save(plot_top_words(report.top_words, colors=config.colors), out / "top_words.png")

    try:
        weights = comparison_weights(report.matrix, config.max_words)
        cloud = render_comparison_cloud(
            weights,
            colors=config.colors,
            max_words=config.max_words,
            width=config.cloud_width,
            height=config.cloud_height,
            seed=config.seed,
        )
    except ReportError as exc:
        logger.warning("skipping word cloud: %s", exc)
    else:
        written["wordcloud"] = _save(plot_comparison_cloud(cloud), out / "wordcloud.png")

    summary_path = out / "summary.json"
    summary_path.write_bytes(
        orjson.dumps(report.summary(), option=orjson.OPT_INDENT_2 | orjson.OPT_SERIALIZE_NUMPY)
    )
    written["summary"] = summary_path
    logger.info("wrote %d report files to %s", len(written), out)
    return written


__all__ = ["SentimentReport", "analyze_corpus", "render_reports"]
