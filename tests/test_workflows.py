from __future__ import annotations

import pytest

from wish_oracle.config import LimitsConfig
from wish_oracle.pipelines import (
    ReadingValidationError,
    build_reading,
    evaluate,
    run_reading,
)


def test_build_reading_trims_wish_and_combines(marathon_reading: dict) -> None:
    reading = build_reading("  Run a marathon next spring ", marathon_reading["interpretations"])
    assert reading.wish == "Run a marathon next spring"
    assert reading.combined_text.startswith("Run a marathon next spring A runner crossing")
    assert reading.combined_text.endswith("every week I read and reflect")


def test_run_reading_matches_direct_evaluation(marathon_reading: dict) -> None:
    result = run_reading(marathon_reading["wish"], marathon_reading["interpretations"])
    combined = f"{marathon_reading['wish']} {' '.join(marathon_reading['interpretations'])}"
    assert result == evaluate(combined, wish=marathon_reading["wish"])
    assert result.probability == 65


@pytest.mark.parametrize("wish", ["", "  ab  ", "x" * 141])
def test_wish_length_is_enforced(wish: str, marathon_reading: dict) -> None:
    with pytest.raises(ReadingValidationError, match="between 3 and 140"):
        build_reading(wish, marathon_reading["interpretations"])


def test_wish_at_boundaries_is_accepted(marathon_reading: dict) -> None:
    build_reading("abc", marathon_reading["interpretations"])
    build_reading("x" * 140, marathon_reading["interpretations"])


def test_interpretation_count_is_enforced() -> None:
    with pytest.raises(ReadingValidationError, match="Expected 4"):
        build_reading("Grow a garden", ["one", "two", "three"])


def test_blank_interpretation_is_rejected() -> None:
    with pytest.raises(ReadingValidationError, match="Interpretation 3 is empty"):
        build_reading("Grow a garden", ["one", "two", "   ", "four"])


def test_interpretation_limit_is_enforced() -> None:
    with pytest.raises(ReadingValidationError, match="exceeds 200"):
        build_reading("Grow a garden", ["one", "two", "three", "y" * 201])
    build_reading("Grow a garden", ["one", "two", "three", "y" * 200])


def test_custom_limits() -> None:
    limits = LimitsConfig(image_count=2, interpretation_limit=10)
    reading = build_reading("Grow a garden", ["soil", "rain"], limits)
    assert reading.combined_text == "Grow a garden soil rain"
    assert issubclass(ReadingValidationError, ValueError)


@pytest.mark.parametrize("interpretations", ["soil", ["one", "two", 3, "four"], [None] * 4])
def test_interpretations_must_be_a_list_of_strings(interpretations: object) -> None:
    with pytest.raises(ReadingValidationError, match="list of strings"):
        build_reading("Grow a garden", interpretations)  # type: ignore[arg-type]


def test_wish_must_be_a_string(marathon_reading: dict) -> None:
    with pytest.raises(ReadingValidationError, match="Wish must be a string"):
        build_reading(42, marathon_reading["interpretations"])  # type: ignore[arg-type]
