"""Utility helpers shared across the Wish Oracle package."""

from .io import load_jsonl, load_yaml_or_json, save_json, write_jsonl
from .random import fnv1a_hash, seeded_choice, seeded_index, seeded_random, to_uint32
from .text import (
    capitalize_word,
    join_with_oxford_comma,
    keyword_tokens,
    theme_tokens,
    unique_in_order,
)

__all__ = [
    "capitalize_word",
    "fnv1a_hash",
    "join_with_oxford_comma",
    "keyword_tokens",
    "load_jsonl",
    "load_yaml_or_json",
    "save_json",
    "seeded_choice",
    "seeded_index",
    "seeded_random",
    "theme_tokens",
    "to_uint32",
    "unique_in_order",
    "write_jsonl",
]
