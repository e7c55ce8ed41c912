"""Minimal quickstart script for Wish Oracle.

The script evaluates one complete reading, prints the result, and shows that
repeating the evaluation yields exactly the same output.
"""

from wish_oracle import choose_keywords, run_reading
from wish_oracle.logging import configure_logging

WISH = "Run a marathon next spring"
INTERPRETATIONS = [
    "A runner crossing a bridge at dawn",
    "Water flowing past stones, patience",
    "Light through clouds, I plan to train 3 times a week",
    "A path in the forest, every week I read and reflect",
]


def main() -> None:
    logger = configure_logging(logger_name="quickstart")
    logger.info("Image keywords: %s", ", ".join(choose_keywords(WISH)))
    result = run_reading(WISH, INTERPRETATIONS)
    print(f"Probability: {result.probability}%")
    print(f"Themes: {', '.join(result.themes)}")
    for tip in result.advice:
        print(f"- {tip}")
    print(result.narrative)
    assert result == run_reading(WISH, INTERPRETATIONS)


if __name__ == "__main__":
    main()
