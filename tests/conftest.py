from pathlib import Path
from typing import Dict, List

import matplotlib

matplotlib.use("Agg")

import pytest

from novelmood.lexicon import Lexicon
from novelmood.tokens import read_corpus

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def bing() -> Lexicon:
    return Lexicon.read_csv(DATA_DIR / "bing_sample.csv")


@pytest.fixture
def emma() -> Dict[str, List[str]]:
    return read_corpus([DATA_DIR / "emma_excerpt.txt"])


@pytest.fixture
def good_bad() -> Lexicon:
    return Lexicon.from_mapping({"good": "positive", "bad": "negative"})
