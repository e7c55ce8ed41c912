"""High-level workflows that combine reading validation and evaluation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from ..config import LimitsConfig
from ..logging import get_logger
from .evaluation import DEFAULT_PIPELINE, EvaluationPipeline, EvaluationResult

LOGGER = get_logger(__name__)


class ReadingValidationError(ValueError):
    """Raised when a wish or its interpretations break the input limits."""


@dataclass(frozen=True)
class Reading:
    wish: str
    interpretations: tuple[str, ...]

    @property
    def combined_text(self) -> str:
        return f"{self.wish} {' '.join(self.interpretations)}"


def build_reading(
    wish: str,
    interpretations: Sequence[str],
    limits: Optional[LimitsConfig] = None,
) -> Reading:
    """Validate ``wish`` and ``interpretations`` against ``limits``."""

    limits = limits or LimitsConfig()
    if not isinstance(wish, str):
        raise ReadingValidationError("Wish must be a string.")
    if isinstance(interpretations, str) or not all(isinstance(text, str) for text in interpretations):
        raise ReadingValidationError("Interpretations must be a list of strings.")
    wish_text = wish.strip()
    if not limits.wish_min_length <= len(wish_text) <= limits.wish_max_length:
        msg = (
            f"Wish must be between {limits.wish_min_length} and "
            f"{limits.wish_max_length} characters."
        )
        raise ReadingValidationError(msg)
    if len(interpretations) != limits.image_count:
        msg = f"Expected {limits.image_count} interpretations, got {len(interpretations)}."
        raise ReadingValidationError(msg)
    for index, text in enumerate(interpretations, start=1):
        if not text.strip():
            raise ReadingValidationError(f"Interpretation {index} is empty.")
        if len(text) > limits.interpretation_limit:
            msg = (
                f"Interpretation {index} exceeds {limits.interpretation_limit} characters."
            )
            raise ReadingValidationError(msg)
    return Reading(wish=wish_text, interpretations=tuple(interpretations))


def run_reading(
    wish: str,
    interpretations: Sequence[str],
    pipeline: Optional[EvaluationPipeline] = None,
    limits: Optional[LimitsConfig] = None,
) -> EvaluationResult:
    """Validate a reading and evaluate its combined text."""

    reading = build_reading(wish, interpretations, limits)
    LOGGER.info("Evaluating reading with %d interpretations", len(reading.interpretations))
    return (pipeline or DEFAULT_PIPELINE).evaluate(reading.combined_text, wish=reading.wish)
