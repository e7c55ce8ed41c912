from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from wish_oracle.config import OracleConfig
from wish_oracle.pipelines import EvaluationPipeline


@pytest.fixture
def config() -> OracleConfig:
    return OracleConfig()


@pytest.fixture
def pipeline() -> EvaluationPipeline:
    return EvaluationPipeline()


@pytest.fixture
def marathon_reading() -> dict[str, object]:
    return {
        "wish": "Run a marathon next spring",
        "interpretations": [
            "A runner crossing a bridge at dawn",
            "Water flowing past stones, patience",
            "Light through clouds, I plan to train 3 times a week",
            "A path in the forest, every week I read and reflect",
        ],
    }


@pytest.fixture
def workspace(tmp_path: Path) -> Iterator[Path]:
    yield tmp_path
