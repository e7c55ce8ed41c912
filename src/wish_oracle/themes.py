"""Frequency-ranked theme extraction and image keyword selection."""

from __future__ import annotations

from collections import Counter
from typing import Optional

from .logging import get_logger
from .utils.random import fnv1a_hash, seeded_index
from .utils.text import keyword_tokens, theme_tokens, unique_in_order
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

LOGGER = get_logger(__name__)

THEME_COUNT = 3
THEME_SEED_STRIDE = 31
SECOND_KEYWORD_OFFSET = 13
DUPLICATE_SUFFIX = "-energy"


class ThemeExtractor:
    """Rank non-stop-word tokens by frequency and pad from the fallback pool."""

    def __init__(self, vocabulary: Optional[Vocabulary] = None, size: int = THEME_COUNT) -> None:
        self.vocabulary = vocabulary or DEFAULT_VOCABULARY
        self.size = size

    def rank(self, text: str) -> list[str]:
        """Return every candidate token, most frequent first."""
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        stop_words = self.vocabulary.stop_words
        frequency = Counter(token for token in theme_tokens(text) if token not in stop_words)
        return [token for token, _ in sorted(frequency.items(), key=lambda item: (-item[1], item[0]))]

    def extract(self, text: str, seed: int) -> tuple[str, ...]:
        themes = self.rank(text)
        fallback = self.vocabulary.fallback_keywords
        while len(themes) < self.size:
            keyword = fallback[seeded_index(seed + len(themes) * THEME_SEED_STRIDE, len(fallback))]
            # Only the bare keyword is checked, so a suffixed form may repeat.
            themes.append(keyword if keyword not in themes else f"{keyword}{DUPLICATE_SUFFIX}")
        LOGGER.debug("Themes for seed %d: %s", seed, themes[: self.size])
        return tuple(themes[: self.size])


def pick_fallback_keywords(seed: int, vocabulary: Optional[Vocabulary] = None) -> list[str]:
    """Pick two distinct fallback keywords from ``seed`` and ``seed + 13``."""
    pool = (vocabulary or DEFAULT_VOCABULARY).fallback_keywords
    first = seeded_index(seed, len(pool))
    second = seeded_index(seed + SECOND_KEYWORD_OFFSET, len(pool))
    if second == first:
        second = (second + 1) % len(pool)
    return [pool[first], pool[second]]


def choose_keywords(wish: str, vocabulary: Optional[Vocabulary] = None) -> list[str]:
    """Choose two keywords describing ``wish`` for visual prompts.

    Words of three or more letters outside the stop list are taken in order
    of first appearance. Missing slots are filled from the fallback pool,
    seeded by the wish itself when no word qualifies and by the single word
    otherwise.
    """
    vocabulary = vocabulary or DEFAULT_VOCABULARY
    words = unique_in_order(
        token
        for token in keyword_tokens(wish)
        if token not in vocabulary.stop_words and len(token) > 2
    )
    if not words:
        return pick_fallback_keywords(fnv1a_hash(wish), vocabulary)
    if len(words) == 1:
        return [words[0], pick_fallback_keywords(fnv1a_hash(words[0]), vocabulary)[0]]
    return words[:2]
