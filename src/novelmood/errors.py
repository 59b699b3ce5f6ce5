class NovelMoodError(RuntimeError):
    """Base error for the sentiment pipeline."""


class LexiconError(NovelMoodError):
    """Raised when a lexicon cannot be loaded or has ambiguous entries."""


class ReportError(NovelMoodError):
    """Raised when a report cannot be built from the aggregated tables."""
