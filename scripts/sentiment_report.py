#!/usr/bin/env python3
"""
Write sentiment trend, top-words and word-cloud charts for a set of books.

Usage:
    python scripts/sentiment_report.py lexicon.csv output_dir book1.txt [book2.txt ...]

Window size, top-words threshold and the word-cloud cap come from the
NOVELMOOD_WINDOW_SIZE, NOVELMOOD_TOP_WORDS_THRESHOLD and NOVELMOOD_MAX_WORDS
environment variables.
"""
import logging
import sys

import matplotlib

matplotlib.use("Agg")

from novelmood.lexicon import Lexicon
from novelmood.log import setup_logging
from novelmood.pipeline import analyze_corpus, render_reports
from novelmood.schema import PipelineConfig
from novelmood.tokens import read_corpus

logger = logging.getLogger("novelmood.scripts.sentiment_report")


def main(lexicon_path: str, output_dir: str, book_paths: list[str]) -> None:
    setup_logging()
    config = PipelineConfig.from_env()
    lexicon = Lexicon.load(lexicon_path, on_duplicate="first")
    corpus = read_corpus(book_paths)
    report = analyze_corpus(corpus, lexicon, config)
    written = render_reports(report, output_dir)
    for name, path in written.items():
        logger.info("%s -> %s", name, path)


if __name__ == "__main__":
    if len(sys.argv) < 4:
        print(__doc__)
        sys.exit(2)
    main(sys.argv[1], sys.argv[2], sys.argv[3:])
