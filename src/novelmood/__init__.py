from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "PipelineConfig",
    "TokenRow",
    "iter_tokens",
    "tokenize_corpus",
    "read_corpus",
    "Lexicon",
    "score_tokens",
    "semi_join",
    "windowed_sentiment",
    "word_frequencies",
    "count_words",
    "top_words",
    "comparison_matrix",
    "comparison_weights",
    "SentimentReport",
    "analyze_corpus",
    "render_reports",
    "NovelMoodError",
    "LexiconError",
    "ReportError",
]

_ATTR_TO_MODULE = {
    "PipelineConfig": (".schema", "PipelineConfig"),
    "TokenRow": (".tokens", "TokenRow"),
    "iter_tokens": (".tokens", "iter_tokens"),
    "tokenize_corpus": (".tokens", "tokenize_corpus"),
    "read_corpus": (".tokens", "read_corpus"),
    "Lexicon": (".lexicon", "Lexicon"),
    "score_tokens": (".scoring", "score_tokens"),
    "semi_join": (".scoring", "semi_join"),
    "windowed_sentiment": (".aggregate", "windowed_sentiment"),
    "word_frequencies": (".aggregate", "word_frequencies"),
    "count_words": (".aggregate", "count_words"),
    "top_words": (".report", "top_words"),
    "comparison_matrix": (".report", "comparison_matrix"),
    "comparison_weights": (".report", "comparison_weights"),
    "SentimentReport": (".pipeline", "SentimentReport"),
    "analyze_corpus": (".pipeline", "analyze_corpus"),
    "render_reports": (".pipeline", "render_reports"),
    "NovelMoodError": (".errors", "NovelMoodError"),
    "LexiconError": (".errors", "LexiconError"),
    "ReportError": (".errors", "ReportError"),
}


def __getattr__(name: str) -> Any:
    if name not in _ATTR_TO_MODULE:
        raise AttributeError(f"module 'novelmood' has no attribute {name!r}")
    module_name, attr_name = _ATTR_TO_MODULE[name]
    module = import_module(module_name, __name__)
    attr = getattr(module, attr_name)
    globals()[name] = attr
    return attr


def __dir__() -> list[str]:
    return sorted(__all__)


if TYPE_CHECKING:  # pragma: no cover - import for type checkers only
    from .schema import PipelineConfig
    from .tokens import TokenRow, iter_tokens, tokenize_corpus, read_corpus
    from .lexicon import Lexicon
    from .scoring import score_tokens, semi_join
    from .aggregate import windowed_sentiment, word_frequencies, count_words
    from .report import top_words, comparison_matrix, comparison_weights
    from .pipeline import SentimentReport, analyze_corpus, render_reports
    from .errors import NovelMoodError, LexiconError, ReportError
