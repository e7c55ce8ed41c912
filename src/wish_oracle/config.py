"""Configuration helpers for Wish Oracle."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional, cast

from .utils.io import load_yaml_or_json, save_json
from .vocabulary import (
    FALLBACK_KEYWORDS,
    NEGATIVE_WORDS,
    POSITIVE_WORDS,
    STOP_WORDS,
    TIME_PATTERN,
    Vocabulary,
)

CONFIG_ENV_VAR = "WISH_ORACLE_CONFIG"


@dataclass
class VocabularyConfig:
    """Word lists used by the scorer and the theme extractor."""

    positive: list[str] = field(default_factory=lambda: list(POSITIVE_WORDS))
    negative: list[str] = field(default_factory=lambda: list(NEGATIVE_WORDS))
    stop_words: list[str] = field(default_factory=lambda: sorted(STOP_WORDS))
    fallback_keywords: list[str] = field(default_factory=lambda: list(FALLBACK_KEYWORDS))
    time_pattern: str = TIME_PATTERN

    def build(self) -> Vocabulary:
        return Vocabulary(
            positive=tuple(self.positive),
            negative=tuple(self.negative),
            stop_words=frozenset(self.stop_words),
            fallback_keywords=tuple(self.fallback_keywords),
            time_pattern=self.time_pattern,
        )


@dataclass
class LimitsConfig:
    """Input limits enforced when assembling a reading."""

    wish_min_length: int = 3
    wish_max_length: int = 140
    interpretation_limit: int = 200
    image_count: int = 4

    def __post_init__(self) -> None:
        if self.wish_min_length < 0 or self.wish_max_length < self.wish_min_length:
            raise ValueError("wish length bounds must satisfy 0 <= min <= max")
        if self.interpretation_limit <= 0 or self.image_count <= 0:
            raise ValueError("interpretation_limit and image_count must be positive")


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    # An empty YAML section loads as None.
    section = data.get(name) or {}
    if not isinstance(section, dict):
        msg = f"Expected mapping for configuration section '{name}'"
        raise TypeError(msg)
    return section


@dataclass
class OracleConfig:
    """Top-level configuration for the oracle."""

    vocabulary: VocabularyConfig = field(default_factory=VocabularyConfig)
    limits: LimitsConfig = field(default_factory=LimitsConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OracleConfig:
        return cls(
            vocabulary=VocabularyConfig(**_section(data, "vocabulary")),
            limits=LimitsConfig(**_section(data, "limits")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def save(self, path: Path) -> None:
        save_json(Path(path), self.to_dict())


def _merge_dict(base: dict[str, Any], overrides: Iterable[dict[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for override in overrides:
        for key, value in override.items():
            existing = result.get(key)
            if isinstance(value, dict) and isinstance(existing, dict):
                nested = _merge_dict(cast(dict[str, Any], existing), [value])
                result[key] = nested
            else:
                result[key] = value
    return result


def load_config(
    path: Optional[Path] = None,
    overrides: Optional[Iterable[dict[str, Any]]] = None,
) -> OracleConfig:
    """Load configuration from disk and merge overrides.

    When ``path`` is omitted the file named by ``WISH_ORACLE_CONFIG`` is used,
    if that variable is set.
    """

    overrides = list(overrides or [])
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        path = Path(env_path) if env_path else None
    if path is None:
        base: dict[str, Any] = {}
    else:
        base = load_yaml_or_json(Path(path))

    merged = _merge_dict(base, overrides)
    return OracleConfig.from_dict(merged)
