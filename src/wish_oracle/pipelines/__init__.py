"""Evaluation pipeline and reading workflows."""

from __future__ import annotations

from .evaluation import DEFAULT_PIPELINE, EvaluationPipeline, EvaluationResult, evaluate
from .workflows import Reading, ReadingValidationError, build_reading, run_reading

__all__ = [
    "DEFAULT_PIPELINE",
    "EvaluationPipeline",
    "EvaluationResult",
    "Reading",
    "ReadingValidationError",
    "build_reading",
    "evaluate",
    "run_reading",
]
