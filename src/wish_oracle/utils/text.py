"""Text processing helpers used throughout the Wish Oracle package."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import List

_THEME_TOKEN_RE = re.compile(r"[a-z]{3,}")
_KEYWORD_TOKEN_RE = re.compile(r"[a-z]+")


def theme_tokens(value: str) -> List[str]:
    """Return lowercase ASCII letter runs of at least three characters."""
    if not value:
        return []
    return _THEME_TOKEN_RE.findall(value.lower())


def keyword_tokens(value: str) -> List[str]:
    """Return every lowercase ASCII letter run in ``value``."""
    if not value:
        return []
    return _KEYWORD_TOKEN_RE.findall(value.lower())


def capitalize_word(word: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    if not word:
        return ""
    return word[0].upper() + word[1:]


def join_with_oxford_comma(items: Sequence[str]) -> str:
    """Join ``items`` as ``A``, ``A and B`` or ``A, B, and C``."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def unique_in_order(tokens: Iterable[str]) -> List[str]:
    """Drop repeated tokens while keeping first-seen order."""
    seen: set[str] = set()
    result: List[str] = []
    for token in tokens:
        if token in seen:
            continue
        seen.add(token)
        result.append(token)
    return result
