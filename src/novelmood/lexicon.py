"""Sentiment lexicons: word -> sentiment label and numeric value."""
from __future__ import annotations

from numbers import Number
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union
import logging

import orjson
import pandas as pd

from .errors import LexiconError

logger = logging.getLogger(__name__)

LEXICON_COLUMNS = ["word", "sentiment", "value"]

# Signed value given to label-only entries
_LABEL_VALUES: Dict[str, float] = {"positive": 1.0, "negative": -1.0}


def _label_for_score(score: float) -> str:
    if score > 0:
        return "positive"
    if score < 0:
        return "negative"
    return "neutral"


class Lexicon:
    """Immutable word table used to score tokens.

    Every word maps to exactly one sentiment label and one numeric value.
    Label lexicons (such as Bing) get +1/-1 values; numeric lexicons (such
    as AFINN) get their label from the sign of the score.
    """

    def __init__(self, frame: pd.DataFrame, *, on_duplicate: str = "error", name: str = "lexicon") -> None:
        if on_duplicate not in ("error", "first"):
            raise ValueError("on_duplicate must be 'error' or 'first'")
        self.name = name
        self._frame = self._normalize(frame, on_duplicate)
        self._labels: Dict[str, str] = dict(zip(self._frame["word"], self._frame["sentiment"]))
        logger.debug("loaded %s with %d words", name, len(self._frame))

    @staticmethod
    def _normalize(frame: pd.DataFrame, on_duplicate: str) -> pd.DataFrame:
        if "word" not in frame.columns:
            raise LexiconError("lexicon needs a 'word' column")
        if "sentiment" not in frame.columns and "value" not in frame.columns:
            raise LexiconError("lexicon needs a 'sentiment' or a 'value' column")

        # same apostrophe folding as the tokenizer, so "don’t" can match
        words = frame["word"].astype(str).str.strip().str.lower().str.replace("’", "'", regex=False)
        table = pd.DataFrame({"word": words})
        missing = pd.Series(float("nan"), index=frame.index)

        values = missing.copy()
        if "value" in frame.columns:
            values = pd.to_numeric(frame["value"], errors="coerce")
            unparsed = values.isna() & frame["value"].notna()
            if unparsed.any():
                bad = frame.loc[unparsed, "word"].head(5).tolist()
                raise LexiconError(f"non-numeric lexicon values for: {bad}")

        labels = missing.astype(object)
        if "sentiment" in frame.columns:
            present = frame["sentiment"].notna()
            labels[present] = frame.loc[present, "sentiment"].astype(str).str.strip().str.lower()

        # fill each side from the other: label from the sign, value from the label
        labels = labels.where(labels.notna(), values.dropna().map(_label_for_score))
        if labels.isna().any():
            bad = frame.loc[labels.isna(), "word"].head(5).tolist()
            raise LexiconError(f"lexicon entries without sentiment or value: {bad}")
        values = values.where(values.notna(), labels.map(_LABEL_VALUES)).fillna(0.0)

        table["sentiment"] = labels.astype(str)
        table["value"] = values.astype(float)
        table = table[table["word"] != ""]
        duplicated = table["word"].duplicated(keep="first")
        if duplicated.any():
            words = sorted(set(table.loc[duplicated, "word"]))
            if on_duplicate == "error":
                raise LexiconError(f"duplicate lexicon entries for: {words[:10]}")
            logger.warning("dropping %d duplicate lexicon entries", int(duplicated.sum()))
            table = table[~duplicated]
        return table[LEXICON_COLUMNS].reset_index(drop=True)

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, **kwargs) -> "Lexicon":
        return cls(frame, **kwargs)

    @classmethod
    def from_mapping(cls, entries: Mapping[str, Union[str, float]], **kwargs) -> "Lexicon":
        """Build from ``{word: label}``, ``{word: score}`` or a mix of both."""
        rows = []
        for word, entry in entries.items():
            if isinstance(entry, Number) and not isinstance(entry, bool):
                rows.append((word, None, entry))
            else:
                rows.append((word, entry, None))
        frame = pd.DataFrame(rows, columns=["word", "sentiment", "value"])
        return cls(frame, **kwargs)

    @classmethod
    def read_csv(cls, path: Union[str, Path], **kwargs) -> "Lexicon":
        frame = pd.read_csv(path)
        kwargs.setdefault("name", Path(path).stem)
        return cls(frame, **kwargs)

    @classmethod
    def read_afinn(cls, path: Union[str, Path], **kwargs) -> "Lexicon":
        """Read an AFINN style file: one ``word<TAB>score`` per line.

        Multiword entries are allowed when tab separated; the score is
        always the last field.
        """
        rows: List[Tuple[str, int]] = []
        with open(path, "r", encoding="latin1") as handle:
            for lineno, line in enumerate(handle, start=1):
                line = line.strip()
                if not line:
                    continue
                word, _, score = line.rpartition("\t") if "\t" in line else line.rpartition(" ")
                try:
                    rows.append((word.strip(), int(score)))
                except ValueError as exc:
                    raise LexiconError(f"{path}:{lineno}: unable to parse score in {line!r}") from exc
        kwargs.setdefault("name", Path(path).stem)
        return cls(pd.DataFrame(rows, columns=["word", "value"]), **kwargs)

    @classmethod
    def read_json(cls, path: Union[str, Path], **kwargs) -> "Lexicon":
        """Read ``{word: label_or_score}`` or a list of ``{word, sentiment, value}`` records."""
        data = orjson.loads(Path(path).read_bytes())
        kwargs.setdefault("name", Path(path).stem)
        if isinstance(data, dict):
            return cls.from_mapping(data, **kwargs)
        if isinstance(data, list):
            return cls(pd.DataFrame.from_records(data), **kwargs)
        raise LexiconError(f"{path}: expected a JSON object or list")

    @classmethod
    def load(cls, path: Union[str, Path], **kwargs) -> "Lexicon":
        suffix = Path(path).suffix.lower()
        if suffix == ".csv":
            return cls.read_csv(path, **kwargs)
        if suffix == ".json":
            return cls.read_json(path, **kwargs)
        if suffix in (".txt", ".tsv"):
            return cls.read_afinn(path, **kwargs)
        raise LexiconError(f"unsupported lexicon format: {suffix or path}")

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame.copy()

    @property
    def labels(self) -> List[str]:
        return sorted(set(self._labels.values()))

    def label_of(self, word: str) -> Optional[str]:
        return self._labels.get(word.lower())

    def subset(self, label: str) -> "Lexicon":
        """Entries with a single sentiment label."""
        selected = self._frame[self._frame["sentiment"] == label.lower()]
        return Lexicon(selected, name=f"{self.name}[{label}]")

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._labels

    def __len__(self) -> int:
        return len(self._frame)

    def __repr__(self) -> str:
        return f"Lexicon(name={self.name!r}, words={len(self)}, labels={self.labels})"


__all__ = ["LEXICON_COLUMNS", "Lexicon"]
