"""Single entry point that turns text into a full oracle reading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..config import OracleConfig
from ..logging import get_logger
from ..narrative import NarrativeComposer
from ..scoring import LexicalScorer
from ..themes import ThemeExtractor
from ..utils.random import fnv1a_hash
from ..vocabulary import Vocabulary

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    """Probability, themes, advice, and narrative for one input text.

    ``seed``, ``text_score`` and ``random_score`` are kept for auditing how the
    probability was reached.
    """

    probability: int
    themes: tuple[str, ...]
    advice: tuple[str, ...]
    narrative: str
    seed: int
    text_score: int
    random_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "probability": self.probability,
            "themes": list(self.themes),
            "advice": list(self.advice),
            "narrative": self.narrative,
            "seed": self.seed,
            "text_score": self.text_score,
            "random_score": self.random_score,
        }


class EvaluationPipeline:
    """Hash, score, extract themes, and compose in that order."""

    def __init__(
        self,
        vocabulary: Optional[Vocabulary] = None,
        scorer: Optional[LexicalScorer] = None,
        extractor: Optional[ThemeExtractor] = None,
        composer: Optional[NarrativeComposer] = None,
    ) -> None:
        self.scorer = scorer or LexicalScorer(vocabulary)
        self.extractor = extractor or ThemeExtractor(vocabulary)
        self.composer = composer or NarrativeComposer()

    @classmethod
    def from_config(cls, config: OracleConfig) -> EvaluationPipeline:
        return cls(vocabulary=config.vocabulary.build())

    def evaluate(self, text: str, wish: Optional[str] = None) -> EvaluationResult:
        """Evaluate ``text``; the narrative quotes ``wish`` when given, else ``text``."""
        seed = fnv1a_hash(text)
        components = self.scorer.components(text, seed)
        themes = self.extractor.extract(text, seed)
        composition = self.composer.compose(
            components.probability,
            text if wish is None else wish,
            themes,
            seed,
        )
        LOGGER.debug(
            "Evaluated seed=%d text_score=%d random_score=%d probability=%d",
            seed,
            components.text_score,
            components.random_score,
            components.probability,
        )
        return EvaluationResult(
            probability=components.probability,
            themes=themes,
            advice=composition.advice,
            narrative=composition.narrative,
            seed=seed,
            text_score=components.text_score,
            random_score=components.random_score,
        )


DEFAULT_PIPELINE = EvaluationPipeline()


def evaluate(text: str, wish: Optional[str] = None) -> EvaluationResult:
    """Evaluate ``text`` with the default vocabulary."""
    return DEFAULT_PIPELINE.evaluate(text, wish=wish)
