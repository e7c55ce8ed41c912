"""Wish Oracle package."""

from .config import OracleConfig, load_config
from .narrative import Composition, NarrativeComposer
from .pipelines import (
    EvaluationPipeline,
    EvaluationResult,
    Reading,
    ReadingValidationError,
    build_reading,
    evaluate,
    run_reading,
)
from .scoring import LexicalScorer, ScoreComponents
from .themes import ThemeExtractor, choose_keywords, pick_fallback_keywords
from .utils.random import fnv1a_hash, seeded_random
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

__all__ = [
    "OracleConfig",
    "load_config",
    "Composition",
    "NarrativeComposer",
    "EvaluationPipeline",
    "EvaluationResult",
    "Reading",
    "ReadingValidationError",
    "build_reading",
    "evaluate",
    "run_reading",
    "LexicalScorer",
    "ScoreComponents",
    "ThemeExtractor",
    "choose_keywords",
    "pick_fallback_keywords",
    "fnv1a_hash",
    "seeded_random",
    "DEFAULT_VOCABULARY",
    "Vocabulary",
]

__version__ = "0.1.0"
