import pytest
from pydantic import ValidationError

from novelmood import config
from novelmood.schema import PipelineConfig


def test_defaults_match_the_classic_analysis() -> None:
    cfg = PipelineConfig()
    assert cfg.window_size == 80
    assert cfg.top_words_threshold == 150
    assert cfg.max_words == 100
    assert cfg.colors == {"negative": "red", "positive": "darkgreen"}


@pytest.mark.parametrize(
    "field, value",
    [("window_size", 0), ("window_size", -1), ("top_words_threshold", -5), ("max_words", 0), ("chapter_pattern", "(")],
)
def test_invalid_settings_are_rejected(field, value) -> None:
    with pytest.raises(ValidationError):
        PipelineConfig(**{field: value})


def test_config_is_frozen() -> None:
    cfg = PipelineConfig()
    with pytest.raises(ValidationError):
        cfg.window_size = 10


def test_from_env_reads_module_defaults(monkeypatch) -> None:
    monkeypatch.setattr(config, "WINDOW_SIZE", 40)
    monkeypatch.setattr(config, "TOP_WORDS_THRESHOLD", 5)
    cfg = PipelineConfig.from_env(max_words=12)
    assert (cfg.window_size, cfg.top_words_threshold, cfg.max_words) == (40, 5, 12)
