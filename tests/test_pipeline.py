import matplotlib.pyplot as plt
import orjson
import pytest
from matplotlib.figure import Figure

from novelmood.pipeline import analyze_corpus, render_reports
from novelmood.schema import PipelineConfig


def test_analyze_corpus_builds_every_table(emma, bing) -> None:
    config = PipelineConfig(window_size=10, top_words_threshold=1)
    report = analyze_corpus(emma, bing, config)
    assert len(report.tokens) > len(report.scored) == 14
    assert report.windowed["net"].tolist() == [7, -3]
    assert report.top_words["word"].tolist() == ["happy"]
    assert report.matrix.loc["happy", "positive"] == 2
    totals = report.totals().iloc[0]
    assert (totals["positive"], totals["negative"], totals["net"]) == (9, 5, 4)


def test_default_config_uses_single_window(emma, bing) -> None:
    report = analyze_corpus(emma, bing)
    assert report.config.window_size == 80
    assert len(report.windowed) == 1
    assert report.top_words.empty


def test_render_reports_writes_charts_and_summary(tmp_path, emma, bing) -> None:
    config = PipelineConfig(window_size=10, top_words_threshold=0, cloud_width=200, cloud_height=200)
    report = analyze_corpus(emma, bing, config)
    written = render_reports(report, tmp_path / "out")
    assert set(written) == {"trend", "top_words", "wordcloud", "summary"}
    for path in written.values():
        assert path.exists() and path.stat().st_size > 0
    summary = orjson.loads(written["summary"].read_bytes())
    assert summary["books"] == ["emma excerpt"]
    assert summary["scored_tokens"] == 14
    assert summary["totals"][0]["net"] == 4
    assert len(summary["top_words"]) == 13


def test_render_reports_skips_cloud_for_single_class(tmp_path, good_bad) -> None:
    report = analyze_corpus({"b": ["good good", "good"]}, good_bad)
    written = render_reports(report, tmp_path)
    assert "wordcloud" not in written
    assert (tmp_path / "trend.png").exists()


def test_figures_are_closed_when_saving_fails(tmp_path, monkeypatch, emma, bing) -> None:
    report = analyze_corpus(emma, bing)
    open_before = set(plt.get_fignums())

    def broken_savefig(self, *args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(Figure, "savefig", broken_savefig)
    with pytest.raises(OSError, match="disk full"):
        render_reports(report, tmp_path)
    assert set(plt.get_fignums()) == open_before
