"""Diagnostics suite for the Wish Oracle."""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, TextIO

import numpy as np
from rich.console import Console
from rich.table import Table

from .data import load_sample_readings
from .logging import get_logger
from .narrative import TIERS, tier_for
from .pipelines import EvaluationPipeline, EvaluationResult, build_reading
from .scoring import PROBABILITY_MAX, RANDOM_SCORE_MAX, TEXT_SCORE_MAX

LOGGER = get_logger(__name__)


@dataclass
class ReadingDiagnostic:
    wish: str
    probability: int
    text_score: int
    random_score: int
    themes: Sequence[str]
    tier: str
    reproducible: bool
    in_range: bool

    @property
    def passed(self) -> bool:
        return self.reproducible and self.in_range


@dataclass
class DistributionSummary:
    mean: float
    std: float
    minimum: int
    maximum: int


@dataclass
class DiagnosticsResult:
    readings: Sequence[ReadingDiagnostic] = field(default_factory=list)
    probability: Optional[DistributionSummary] = None
    random_score: Optional[DistributionSummary] = None
    tiers: Dict[str, int] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return all(reading.passed for reading in self.readings)

    def to_dict(self) -> Dict[str, object]:
        return {
            "passed": self.passed,
            "readings": [
                {
                    "wish": reading.wish,
                    "probability": reading.probability,
                    "text_score": reading.text_score,
                    "random_score": reading.random_score,
                    "themes": list(reading.themes),
                    "tier": reading.tier,
                    "reproducible": reading.reproducible,
                    "in_range": reading.in_range,
                }
                for reading in self.readings
            ],
            "probability": None if self.probability is None else self.probability.__dict__,
            "random_score": None if self.random_score is None else self.random_score.__dict__,
            "tiers": dict(self.tiers),
        }

    def to_json(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf8")


def _summarise(values: Sequence[int]) -> DistributionSummary:
    array = np.asarray(values, dtype=float)
    return DistributionSummary(
        mean=float(array.mean()),
        std=float(array.std()),
        minimum=int(array.min()),
        maximum=int(array.max()),
    )


def _in_range(result: EvaluationResult) -> bool:
    return (
        0 <= result.text_score <= TEXT_SCORE_MAX
        and 0 <= result.random_score <= RANDOM_SCORE_MAX
        and 0 <= result.probability <= PROBABILITY_MAX
        and len(result.themes) == 3
        and len(result.advice) == 2
    )


@dataclass
class DiagnosticsSuite:
    """Evaluate sample readings and check the reproducibility guarantees."""

    pipeline: EvaluationPipeline = field(default_factory=EvaluationPipeline)
    readings: Sequence[Dict[str, Any]] = field(default_factory=load_sample_readings)

    def run(self) -> DiagnosticsResult:
        LOGGER.info("Running diagnostics over %d readings", len(self.readings))
        result = DiagnosticsResult()
        result.readings = [self._probe(record) for record in self.readings]
        if result.readings:
            result.probability = _summarise([r.probability for r in result.readings])
            result.random_score = _summarise([r.random_score for r in result.readings])
        counts = Counter(reading.tier for reading in result.readings)
        result.tiers = {tier.name: counts[tier.name] for tier in TIERS}
        return result

    def _probe(self, record: Dict[str, Any]) -> ReadingDiagnostic:
        reading = build_reading(record["wish"], record["interpretations"])
        first = self.pipeline.evaluate(reading.combined_text, wish=reading.wish)
        second = self.pipeline.evaluate(reading.combined_text, wish=reading.wish)
        if first != second:
            LOGGER.warning("Reading for %r was not reproducible", reading.wish)
        return ReadingDiagnostic(
            wish=reading.wish,
            probability=first.probability,
            text_score=first.text_score,
            random_score=first.random_score,
            themes=first.themes,
            tier=tier_for(first.probability).name,
            reproducible=first == second,
            in_range=_in_range(first),
        )


def render_diagnostics(result: DiagnosticsResult, stream: Optional[TextIO] = None) -> None:
    """Pretty-print ``result`` as a table."""

    console = Console(file=stream)
    table = Table(title="Wish Oracle Diagnostics")
    table.add_column("Wish")
    table.add_column("Probability", justify="right")
    table.add_column("Text", justify="right")
    table.add_column("Random", justify="right")
    table.add_column("Themes")
    table.add_column("Status")
    for reading in result.readings:
        table.add_row(
            reading.wish,
            str(reading.probability),
            str(reading.text_score),
            str(reading.random_score),
            ", ".join(reading.themes),
            "PASS" if reading.passed else "FAIL",
        )
    console.print(table)
    if result.probability is not None:
        console.print(
            f"probability mean={result.probability.mean:.1f} std={result.probability.std:.1f} "
            f"range=[{result.probability.minimum}, {result.probability.maximum}]"
        )


def run_all_diagnostics(
    pipeline: Optional[EvaluationPipeline] = None,
    stream: Optional[TextIO] = None,
) -> DiagnosticsResult:
    """Run diagnostics and optionally pretty-print to *stream*."""

    suite = DiagnosticsSuite(pipeline=pipeline or EvaluationPipeline())
    result = suite.run()
    if stream is not None:
        render_diagnostics(result, stream)
    return result
