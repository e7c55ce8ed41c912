from __future__ import annotations

import pytest

from wish_oracle.utils.random import (
    FNV_OFFSET_BASIS,
    fnv1a_hash,
    seeded_choice,
    seeded_index,
    seeded_random,
    to_uint32,
)

# Seed whose single LCG step lands on 0xFFFFFFFF.
TOP_SEED = 653637408


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 2166136261),
        ("a", 3826002220),
        ("abc", 440920331),
        ("wish", 173524790),
        ("hello world", 3582672807),
        ("I will practice every day and read daily", 2453215582),
        ("é", 1812687940),
        ("😀", 3409036472),
    ],
)
def test_fnv1a_hash_matches_reference_vectors(text: str, expected: int) -> None:
    assert fnv1a_hash(text) == expected


def test_fnv1a_hash_of_empty_string_is_offset_basis() -> None:
    assert fnv1a_hash("") == FNV_OFFSET_BASIS


def test_fnv1a_hash_is_stable_and_unsigned() -> None:
    value = fnv1a_hash("Run a marathon next spring")
    assert value == fnv1a_hash("Run a marathon next spring")
    assert 0 <= value <= 0xFFFFFFFF


def test_fnv1a_hash_rejects_non_strings() -> None:
    with pytest.raises(TypeError):
        fnv1a_hash(42)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("seed", "expected"),
    [
        (0, 0.23606797289943043),
        (1, 0.23645552532664862),
        (42, 0.25234517484259444),
        (2166136261, 0.6015084014743354),
    ],
)
def test_seeded_random_matches_reference_vectors(seed: int, expected: float) -> None:
    assert seeded_random(seed) == pytest.approx(expected, abs=1e-15)


def test_seeded_random_is_pure() -> None:
    assert seeded_random(1234) == seeded_random(1234)
    assert seeded_random(0) != seeded_random(1)


def test_seeded_random_wraps_offsets_beyond_uint32() -> None:
    assert seeded_random(2**32 + 5) == seeded_random(5)
    assert to_uint32(2**32 + 5) == 5


def test_seeded_random_stays_in_unit_interval() -> None:
    for seed in range(0, 2**32, 2**32 // 257):
        assert 0.0 <= seeded_random(seed) <= 1.0


def test_top_seed_reaches_one_and_index_is_clamped() -> None:
    assert seeded_random(TOP_SEED) == 1.0
    assert seeded_index(TOP_SEED, 6) == 5
    assert seeded_choice(TOP_SEED, ["a", "b", "c"]) == "c"


def test_seeded_index_rejects_empty_pool() -> None:
    with pytest.raises(ValueError):
        seeded_index(0, 0)
