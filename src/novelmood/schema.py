import re
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import config


class PipelineConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    window_size: int = Field(default=80, gt=0)
    top_words_threshold: int = Field(default=150, ge=0)
    max_words: int = Field(default=100, gt=0)
    chapter_pattern: str = config.CHAPTER_PATTERN
    colors: Dict[str, str] = Field(
        default_factory=lambda: {"negative": "red", "positive": "darkgreen"}
    )
    cloud_width: int = Field(default=800, gt=0)
    cloud_height: int = Field(default=800, gt=0)
    seed: int = 42

    @field_validator("chapter_pattern")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid chapter pattern: {exc}") from exc
        return value

    @classmethod
    def from_env(cls, **overrides) -> "PipelineConfig":
        """Build a config from the NOVELMOOD_* environment defaults."""
        values = {
            "window_size": config.WINDOW_SIZE,
            "top_words_threshold": config.TOP_WORDS_THRESHOLD,
            "max_words": config.MAX_WORDS,
            "seed": config.SEED,
        }
        values.update(overrides)
        return cls(**values)
