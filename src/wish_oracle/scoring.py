"""Weighted lexical scoring of wish text."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional

from .logging import get_logger
from .utils.random import seeded_random
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

LOGGER = get_logger(__name__)

BASE_SCORE = 20
POSITIVE_WEIGHT = 6
POSITIVE_CAP = 36
NEGATIVE_WEIGHT = 7
NEGATIVE_CAP = 28
TIME_WEIGHT = 7
TIME_CAP = 21
TEXT_SCORE_MAX = 60
RANDOM_SCORE_MAX = 40
PROBABILITY_MAX = 100


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going towards positive infinity."""
    return math.floor(value + 0.5)


def count_matches(text: str, patterns: Iterable[re.Pattern[str]]) -> int:
    """Total non-overlapping matches of every pattern in ``text``."""
    return sum(len(pattern.findall(text)) for pattern in patterns)


@dataclass(frozen=True)
class ScoreComponents:
    """Deterministic and seeded parts of a probability."""

    text_score: int
    random_score: int

    @property
    def probability(self) -> int:
        return clamp(self.text_score + self.random_score, 0, PROBABILITY_MAX)


def random_score(seed: int) -> int:
    """Seeded contribution in ``[0, 40]``."""
    return round_half_up(seeded_random(seed) * RANDOM_SCORE_MAX)


class LexicalScorer:
    """Score text from positive, negative, and recurring-schedule phrases."""

    def __init__(self, vocabulary: Optional[Vocabulary] = None) -> None:
        self.vocabulary = vocabulary or DEFAULT_VOCABULARY

    def score(self, text: str) -> int:
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        lower = text.lower()
        score = BASE_SCORE
        positive = count_matches(lower, self.vocabulary.positive_patterns) * POSITIVE_WEIGHT
        score += min(positive, POSITIVE_CAP)
        negative = count_matches(lower, self.vocabulary.negative_patterns) * NEGATIVE_WEIGHT
        score -= min(negative, NEGATIVE_CAP)
        schedule = sum(1 for _ in self.vocabulary.time_regex.finditer(lower)) * TIME_WEIGHT
        score += min(schedule, TIME_CAP)
        LOGGER.debug(
            "Text score | positive=%d negative=%d schedule=%d raw=%d",
            positive,
            negative,
            schedule,
            score,
        )
        return clamp(score, 0, TEXT_SCORE_MAX)

    def components(self, text: str, seed: int) -> ScoreComponents:
        return ScoreComponents(text_score=self.score(text), random_score=random_score(seed))
