"""Templated narrative and advice synthesis."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .logging import get_logger
from .utils.random import seeded_choice
from .utils.text import capitalize_word, join_with_oxford_comma

LOGGER = get_logger(__name__)

ADVICE_SEED_OFFSET = 17

DEFAULT_THEMES = ("Persistence", "Balance", "Openness")
DEFAULT_PRIMARY_THEME = "focus"
DEFAULT_SECONDARY_THEME = "balance"

CLOSING_SENTENCE = (
    "Approach each interpretation as a clue, not a command, and stay playful with the process."
)


@dataclass(frozen=True)
class Tier:
    name: str
    threshold: int
    mood: str
    advice: str


TIERS = (
    Tier(
        name="strong",
        threshold=80,
        mood="Momentum is strong—stay focused and celebrate each stride forward.",
        advice="Put your {primary} into action by scheduling a milestone this week.",
    ),
    Tier(
        name="steady",
        threshold=60,
        mood="A steady path is forming; refine your plan and keep acting with intention.",
        advice="Channel your {primary} by outlining the next two concrete steps.",
    ),
    Tier(
        name="warming",
        threshold=40,
        mood="The odds are warming up; consistent effort can tip the balance in your favor.",
        advice="Anchor your progress in {primary} with one repeatable habit.",
    ),
    Tier(
        name="nudge",
        threshold=0,
        mood="Treat this reading as a friendly nudge to recommit and set a clear first step.",
        advice="Jump-start momentum by pairing {primary} with one simple action today.",
    ),
)

ADVICE_POOL = (
    "Share your intention with a trusted friend to keep {secondary} alive.",
    "Record a quick reflection after each effort so {primary} keeps evolving.",
    "Mark a recurring reminder—consistency fuels {primary}.",
    "Celebrate micro-wins to reinforce {secondary}.",
    "Translate each image insight into a five-minute action.",
    "Blend {primary} with self-care so energy stays high.",
)


def tier_for(probability: int) -> Tier:
    """Return the first tier whose threshold ``probability`` reaches."""
    for tier in TIERS:
        if probability >= tier.threshold:
            return tier
    return TIERS[-1]


def format_themes(themes: Sequence[str]) -> str:
    capitalized = [capitalize_word(theme) for theme in themes] if themes else list(DEFAULT_THEMES)
    return join_with_oxford_comma(capitalized)


@dataclass(frozen=True)
class Composition:
    narrative: str
    advice: tuple[str, str]


class NarrativeComposer:
    """Assemble the three-sentence narrative and the two advice strings."""

    def narrative(self, probability: int, wish: str, themes: Sequence[str]) -> str:
        sentences = [
            f'Your wish "{wish}" draws on {format_themes(themes)}.',
            tier_for(probability).mood,
            CLOSING_SENTENCE,
        ]
        return " ".join(sentences)

    def advice(self, probability: int, themes: Sequence[str], seed: int) -> tuple[str, str]:
        primary = themes[0] if len(themes) > 0 and themes[0] else DEFAULT_PRIMARY_THEME
        secondary = themes[1] if len(themes) > 1 and themes[1] else DEFAULT_SECONDARY_THEME
        first = tier_for(probability).advice.format(primary=primary)
        template = seeded_choice(seed + ADVICE_SEED_OFFSET, ADVICE_POOL)
        second = template.format(primary=primary, secondary=secondary)
        return first, second

    def compose(self, probability: int, wish: str, themes: Sequence[str], seed: int) -> Composition:
        if not themes:
            LOGGER.debug("No themes supplied; using the default theme triad")
        return Composition(
            narrative=self.narrative(probability, wish, themes),
            advice=self.advice(probability, themes, seed),
        )
