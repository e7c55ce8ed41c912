"""Fixed vocabularies that drive lexical scoring and theme extraction."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

POSITIVE_WORDS = (
    "persistence",
    "patience",
    "plan",
    "action",
    "learn",
    "health",
    "friend",
    "communicate",
    "train",
    "practice",
    "reflect",
    "sleep",
    "run",
    "read",
    "record",
)

NEGATIVE_WORDS = (
    "worry",
    "anxious",
    "delay",
    "hesitate",
    "give up",
    "hard",
    "fail",
    "impossible",
)

FALLBACK_KEYWORDS = ("abstract", "texture", "light", "pattern", "nature", "sky", "water")

STOP_WORDS = frozenset(
    {
        "the",
        "and",
        "with",
        "from",
        "that",
        "this",
        "have",
        "your",
        "about",
        "into",
        "make",
        "gets",
        "getting",
        "want",
        "wish",
        "need",
        "more",
        "less",
        "like",
        "just",
        "also",
        "take",
        "give",
        "new",
        "good",
        "better",
        "friend",
        "friends",
        "job",
    }
)

TIME_PATTERN = (
    r"\b(every\s+(day|week|month)"
    r"|\d+\s?(minutes?|minute|hours?|hour|times?|days?|weeks?|months?))\b"
)


def _word_pattern(word: str) -> re.Pattern[str]:
    # ASCII boundaries keep accented letters from splitting words differently.
    return re.compile(rf"\b{re.escape(word)}\b", re.ASCII)


@dataclass(frozen=True)
class Vocabulary:
    """Immutable word lists plus their compiled match patterns."""

    positive: tuple[str, ...] = POSITIVE_WORDS
    negative: tuple[str, ...] = NEGATIVE_WORDS
    stop_words: frozenset[str] = STOP_WORDS
    fallback_keywords: tuple[str, ...] = FALLBACK_KEYWORDS
    time_pattern: str = TIME_PATTERN
    positive_patterns: tuple[re.Pattern[str], ...] = field(init=False, repr=False, compare=False)
    negative_patterns: tuple[re.Pattern[str], ...] = field(init=False, repr=False, compare=False)
    time_regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.fallback_keywords:
            raise ValueError("fallback_keywords must not be empty")
        object.__setattr__(self, "positive", tuple(word.lower() for word in self.positive))
        object.__setattr__(self, "negative", tuple(word.lower() for word in self.negative))
        object.__setattr__(self, "stop_words", frozenset(word.lower() for word in self.stop_words))
        object.__setattr__(self, "fallback_keywords", tuple(self.fallback_keywords))
        object.__setattr__(self, "positive_patterns", tuple(_word_pattern(w) for w in self.positive))
        object.__setattr__(self, "negative_patterns", tuple(_word_pattern(w) for w in self.negative))
        object.__setattr__(
            self, "time_regex", re.compile(self.time_pattern, re.IGNORECASE | re.ASCII)
        )


DEFAULT_VOCABULARY = Vocabulary()
