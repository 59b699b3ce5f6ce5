import numpy as np
import pandas as pd
import pytest

from novelmood.aggregate import book_totals, count_words, windowed_sentiment, word_frequencies
from novelmood.scoring import score_tokens
from novelmood.tokens import tokenize_corpus


def _scored(corpus, lexicon) -> pd.DataFrame:
    return score_tokens(tokenize_corpus(corpus), lexicon)


def test_good_bad_good_fills_one_bucket(good_bad) -> None:
    windowed = windowed_sentiment(_scored({"b": ["good bad good"]}, good_bad), 80)
    assert len(windowed) == 1
    row = windowed.iloc[0]
    assert row["book"] == "b"
    assert row["index"] == 0
    assert row["positive"] == 2
    assert row["negative"] == 1
    assert row["net"] == 1
    assert row["score"] == 1.0


def test_windows_split_on_line_number(emma, bing) -> None:
    windowed = windowed_sentiment(_scored(emma, bing), 10)
    assert windowed["index"].tolist() == [0, 1]
    assert windowed["positive"].tolist() == [7, 2]
    assert windowed["negative"].tolist() == [0, 5]
    assert windowed["net"].tolist() == [7, -3]


def test_net_is_positive_minus_negative(emma, bing) -> None:
    for size in (1, 3, 7, 80):
        windowed = windowed_sentiment(_scored(emma, bing), size)
        assert (windowed["net"] == windowed["positive"] - windowed["negative"]).all()
        assert (windowed[["positive", "negative"]] >= 0).all().all()


def test_missing_label_defaults_to_zero(good_bad) -> None:
    windowed = windowed_sentiment(_scored({"b": ["good good"]}, good_bad), 80)
    assert windowed["negative"].tolist() == [0]
    assert windowed["net"].tolist() == [2]


def test_windows_are_per_book(good_bad) -> None:
    windowed = windowed_sentiment(_scored({"A": ["good"], "B": ["bad", "bad"]}, good_bad), 80)
    assert windowed[["book", "net"]].values.tolist() == [["A", 1], ["B", -2]]
    totals = book_totals(windowed)
    assert totals.set_index("book")["negative"].to_dict() == {"A": 0, "B": 2}


@pytest.mark.parametrize("size", [0, -80, 2.5, True])
def test_degenerate_window_sizes_are_rejected(good_bad, size) -> None:
    with pytest.raises(ValueError):
        windowed_sentiment(_scored({"b": ["good"]}, good_bad), size)


def test_empty_scored_table_gives_empty_windows(good_bad) -> None:
    windowed = windowed_sentiment(_scored({"b": ["nothing here"]}, good_bad), 80)
    assert windowed.empty
    assert {"book", "index", "positive", "negative", "net", "score"} <= set(windowed.columns)


def test_word_frequencies_sorted_and_complete(emma, bing) -> None:
    scored = _scored(emma, bing)
    freq = word_frequencies(scored)
    assert list(freq.columns) == ["word", "sentiment", "n"]
    assert freq.iloc[0].tolist() == ["happy", "positive", 2]
    assert freq["n"].is_monotonic_decreasing
    assert freq["n"].sum() == len(scored)
    per_word = freq.groupby("word")["n"].sum()
    assert (per_word == scored["word"].value_counts().reindex(per_word.index)).all()


def test_count_words_for_one_book() -> None:
    tokens = tokenize_corpus({"A": ["joy joy sorrow"], "B": ["joy"]})
    counts = count_words(tokens, book="A")
    assert counts.values.tolist() == [["joy", 2], ["sorrow", 1]]
    assert count_words(tokens).iloc[0].tolist() == ["joy", 3]


def test_numpy_integer_window_size_is_accepted(good_bad) -> None:
    windowed = windowed_sentiment(_scored({"b": ["good bad good"]}, good_bad), np.int64(80))
    assert windowed["net"].tolist() == [1]
