from __future__ import annotations

from typing import Optional
import logging

import pandas as pd

from .lexicon import Lexicon

logger = logging.getLogger(__name__)


def score_tokens(tokens: pd.DataFrame, lexicon: Lexicon) -> pd.DataFrame:
    """Inner join tokens with the lexicon on ``word``.

    Words missing from the lexicon are dropped. Surviving rows keep the
    token order and gain ``sentiment`` and ``value`` columns.
    """
    # sort on the token position so text order survives the join
    scored = (
        tokens.assign(_pos=range(len(tokens)))
        .merge(lexicon.frame, on="word", how="inner", sort=False)
        .sort_values("_pos", kind="stable")
        .drop(columns="_pos")
        .reset_index(drop=True)
    )
    logger.info("scored %d of %d words against %s", len(scored), len(tokens), lexicon.name)
    return scored


def semi_join(tokens: pd.DataFrame, lexicon: Lexicon, label: Optional[str] = None) -> pd.DataFrame:
    """Tokens whose word appears in the lexicon, optionally restricted to one label."""
    if label is not None:
        lexicon = lexicon.subset(label)
    words = set(lexicon.frame["word"])
    return tokens[tokens["word"].isin(words)].reset_index(drop=True)


__all__ = ["score_tokens", "semi_join"]
