"""Interactive UI made with Gradio

Users upload one or more plain text books and a sentiment lexicon, tune the
window size and thresholds, and explore the sentiment trend, the most
frequent sentiment words and a comparison word cloud.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence

import gradio as gr
import matplotlib

matplotlib.use("Agg")

from pydantic import ValidationError

from novelmood import Lexicon, PipelineConfig, analyze_corpus, read_corpus
from novelmood.errors import LexiconError, ReportError
from novelmood.log import setup_logging
from novelmood.report import (
    comparison_weights,
    plot_top_words,
    plot_trend,
    render_comparison_cloud,
)

logger = logging.getLogger("novelmood.app")

DEFAULT_CONFIG = PipelineConfig.from_env()
FREQUENCY_HEADERS = ["word", "sentiment", "n"]
TOTALS_PREVIEW_ROWS = 200


def _file_path(item: Any) -> Optional[Path]:
    """Normalize what Gradio hands back for an uploaded file."""
    if item is None:
        return None
    if isinstance(item, (str, Path)):
        return Path(item)
    name = getattr(item, "name", None)
    if name:
        return Path(name)
    if isinstance(item, dict) and item.get("path"):
        return Path(item["path"])
    return None


def _file_paths(items: Optional[Sequence[Any]]) -> List[Path]:
    if items is None:
        return []
    if not isinstance(items, (list, tuple)):
        items = [items]
    paths = [_file_path(item) for item in items]
    return [path for path in paths if path is not None]


def _describe(report) -> str:
    lines: List[str] = [
        f"**Books:** {', '.join(dict.fromkeys(report.tokens['book']))}",
        f"**Words:** {len(report.tokens)} tokenized, {len(report.scored)} found in the lexicon",
        f"**Windows:** {len(report.windowed)} of {report.config.window_size} lines",
    ]
    for row in report.totals().to_dict(orient="records"):
        lines.append(
            f"- {row['book']}: positive {int(row.get('positive', 0))}, "
            f"negative {int(row.get('negative', 0))}, net {int(row['net'])}"
        )
    return "\n\n".join(lines)


def run_sentiment_bundle(
    book_files: Optional[Sequence[Any]],
    lexicon_file: Any,
    window_size: float,
    threshold: float,
    max_words: float,
    keep_first_duplicate: bool,
) -> tuple[Any, ...]:
    book_paths = _file_paths(book_files)
    if not book_paths:
        raise gr.Error("Please upload at least one book as a plain text file.")
    lexicon_path = _file_path(lexicon_file)
    if lexicon_path is None:
        raise gr.Error("Please upload a sentiment lexicon (.csv, .json or AFINN .txt).")

    try:
        config = PipelineConfig(
            **{
                **DEFAULT_CONFIG.model_dump(),
                "window_size": int(window_size),
                "top_words_threshold": int(threshold),
                "max_words": int(max_words),
            }
        )
    except ValidationError as exc:
        raise gr.Error(f"Invalid settings: {exc}") from exc

    try:
        lexicon = Lexicon.load(lexicon_path, on_duplicate="first" if keep_first_duplicate else "error")
    except LexiconError as exc:
        raise gr.Error(str(exc)) from exc

    report = analyze_corpus(read_corpus(book_paths), lexicon, config)

    warnings: List[str] = []
    trend_fig = plot_trend(report.windowed)
    top_fig = plot_top_words(report.top_words, colors=config.colors)
    if report.top_words.empty:
        warnings.append(f"No word occurs more than {config.top_words_threshold} times.")

    cloud_image = None
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
        cloud_image = cloud.to_image()
    except ReportError as exc:
        warnings.append(f"Word cloud unavailable: {exc}")

    windowed_table = report.windowed.head(TOTALS_PREVIEW_ROWS)
    frequency_table = report.frequencies[FREQUENCY_HEADERS].head(TOTALS_PREVIEW_ROWS)
    logger.info("rendered bundle for %d books", len(book_paths))

    return (
        _describe(report),
        trend_fig,
        top_fig,
        cloud_image,
        windowed_table,
        frequency_table,
        "\n".join(warnings),
    )


with gr.Blocks(title="Novel Mood") as demo:
    gr.Markdown(
        "## Novel Mood\nLexicon-based sentiment across the course of a novel: trend, top words and word cloud."
    )

    with gr.Row():
        with gr.Column():
            book_files = gr.File(
                label="Books (plain text)",
                file_count="multiple",
                file_types=[".txt"],
                type="filepath",
            )
            lexicon_file = gr.File(
                label="Sentiment Lexicon",
                file_types=[".csv", ".json", ".txt", ".tsv"],
                type="filepath",
            )
            keep_first = gr.Checkbox(label="Keep first entry for duplicate lexicon words", value=True)
        with gr.Column():
            window_size = gr.Slider(
                label="Window Size (lines)",
                value=DEFAULT_CONFIG.window_size,
                minimum=10,
                maximum=500,
                step=10,
            )
            threshold = gr.Slider(
                label="Top Words Threshold (occurrences)",
                value=DEFAULT_CONFIG.top_words_threshold,
                minimum=0,
                maximum=1000,
                step=10,
            )
            max_words = gr.Slider(
                label="Word Cloud Size",
                value=DEFAULT_CONFIG.max_words,
                minimum=10,
                maximum=300,
                step=10,
            )
            run_btn = gr.Button("Run Sentiment Analysis", variant="primary")

    with gr.Tabs():
        with gr.TabItem("Trend"):
            summary_out = gr.Markdown(label="Summary")
            trend_out = gr.Plot(label="Sentiment Trend")
        with gr.TabItem("Top Words"):
            top_out = gr.Plot(label="Top Sentiment Words")
        with gr.TabItem("Word Cloud"):
            cloud_out = gr.Image(label="Comparison Cloud", type="pil")
        with gr.TabItem("Tables"):
            windowed_out = gr.Dataframe(label="Windowed Sentiment", interactive=False)
            frequency_out = gr.Dataframe(
                headers=FREQUENCY_HEADERS,
                interactive=False,
                label="Word Frequencies",
            )
            warning_out = gr.Markdown(label="Diagnostics")

    run_btn.click(
        fn=run_sentiment_bundle,
        inputs=[book_files, lexicon_file, window_size, threshold, max_words, keep_first],
        outputs=[
            summary_out,
            trend_out,
            top_out,
            cloud_out,
            windowed_out,
            frequency_out,
            warning_out,
        ],
    )

if __name__ == "__main__":
    setup_logging()
    demo.launch()
