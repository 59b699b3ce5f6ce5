import gradio as gr
import pytest

from app import run_sentiment_bundle


def test_bundle_renders_charts_and_tables(data_dir) -> None:
    summary, trend, top, cloud, windowed, freq, warnings = run_sentiment_bundle(
        [str(data_dir / "emma_excerpt.txt")],
        str(data_dir / "bing_sample.csv"),
        10,
        1,
        50,
        True,
    )
    assert "emma excerpt" in summary
    assert "net 4" in summary
    assert trend is not None and top is not None
    assert cloud is not None
    assert windowed["net"].tolist() == [7, -3]
    assert freq.iloc[0].tolist() == ["happy", "positive", 2]
    assert warnings == ""


def test_bundle_reports_missing_inputs(data_dir) -> None:
    with pytest.raises(gr.Error):
        run_sentiment_bundle([], str(data_dir / "bing_sample.csv"), 80, 150, 100, True)
    with pytest.raises(gr.Error):
        run_sentiment_bundle([str(data_dir / "emma_excerpt.txt")], None, 80, 150, 100, True)


def test_bundle_warns_when_nothing_passes_threshold(data_dir) -> None:
    *_, warnings = run_sentiment_bundle(
        [str(data_dir / "emma_excerpt.txt")],
        str(data_dir / "bing_sample.csv"),
        80,
        150,
        100,
        True,
    )
    assert "more than 150" in warnings
