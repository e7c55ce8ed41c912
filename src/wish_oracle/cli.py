"""Command line interface for Wish Oracle."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Optional

import typer

from .config import OracleConfig, load_config
from .diagnostics import render_diagnostics, run_all_diagnostics
from .logging import configure_logging
from .pipelines import EvaluationPipeline, ReadingValidationError, run_reading
from .scoring import LexicalScorer
from .themes import ThemeExtractor, choose_keywords
from .utils import fnv1a_hash, load_jsonl, write_jsonl

LOGGER = configure_logging(logger_name=__name__)

CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="Path to an oracle configuration file (YAML or JSON).",
)
WISH_OPTION = typer.Option(
    None,
    "--wish",
    help="Wish quoted in the narrative; defaults to the evaluated text.",
)
INTERPRETATION_OPTION = typer.Option(
    ...,
    "--interpretation",
    "-i",
    help="Interpretation of one image; repeat once per image.",
)
BATCH_OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    help="Write results as JSON Lines instead of printing them.",
)
DIAG_OUTPUT_OPTION = typer.Option(
    None,
    "--output",
    help="Optional path to write diagnostics report.",
)

app = typer.Typer(help="Score wishes, extract themes, and compose oracle readings.")


def _load(config_path: Optional[Path]) -> tuple[EvaluationPipeline, OracleConfig]:
    config = load_config(config_path)
    return EvaluationPipeline.from_config(config), config


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def evaluate(
    text: str = typer.Argument(..., help="Combined text to evaluate."),
    wish: Optional[str] = WISH_OPTION,
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Evaluate free text and print the reading as JSON."""

    pipeline, _ = _load(config_path)
    _echo_json(pipeline.evaluate(text, wish=wish).to_dict())


@app.command()
def reading(
    wish: str = typer.Argument(..., help="The wish to read."),
    interpretations: list[str] = INTERPRETATION_OPTION,
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Validate a wish and its interpretations, then print the reading."""

    pipeline, config = _load(config_path)
    try:
        result = run_reading(wish, interpretations, pipeline=pipeline, limits=config.limits)
    except ReadingValidationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    _echo_json(result.to_dict())


@app.command()
def score(
    text: str = typer.Argument(..., help="Text to score."),
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Print the lexical and seeded score components of ``text``."""

    config = load_config(config_path)
    scorer = LexicalScorer(config.vocabulary.build())
    seed = fnv1a_hash(text)
    components = scorer.components(text, seed)
    _echo_json(
        {
            "seed": seed,
            "text_score": components.text_score,
            "random_score": components.random_score,
            "probability": components.probability,
        }
    )


@app.command()
def themes(
    text: str = typer.Argument(..., help="Text to extract themes from."),
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Print the three ranked themes of ``text``."""

    config = load_config(config_path)
    extractor = ThemeExtractor(config.vocabulary.build())
    for theme in extractor.extract(text, fnv1a_hash(text)):
        typer.echo(theme)


@app.command()
def keywords(
    wish: str = typer.Argument(..., help="Wish to pick image keywords for."),
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Print the two image keywords chosen for ``wish``."""

    config = load_config(config_path)
    for keyword in choose_keywords(wish, config.vocabulary.build()):
        typer.echo(keyword)


def _evaluate_record(
    record: dict[str, Any],
    pipeline: EvaluationPipeline,
    config: OracleConfig,
) -> dict[str, Any]:
    if "interpretations" in record:
        result = run_reading(
            record.get("wish", ""),
            record["interpretations"],
            pipeline=pipeline,
            limits=config.limits,
        )
    elif "text" in record:
        wish = record.get("wish")
        if wish is not None and not isinstance(wish, str):
            raise TypeError(f"expected str wish, got {type(wish).__name__}")
        result = pipeline.evaluate(record["text"], wish=wish)
    else:
        raise KeyError("needs either 'text' or 'interpretations'")
    return result.to_dict()


def _batch_results(
    records: Iterable[Any],
    pipeline: EvaluationPipeline,
    config: OracleConfig,
) -> list[dict[str, Any]]:
    """Evaluate every record, failing on the first bad one before any output."""
    results: list[dict[str, Any]] = []
    for line, record in enumerate(records, start=1):
        if not isinstance(record, dict):
            raise ValueError(f"Record {line}: expected a JSON object")
        try:
            results.append(_evaluate_record(record, pipeline, config))
        except (KeyError, TypeError, ValueError) as exc:
            reason = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
            raise ValueError(f"Record {line}: {reason}") from exc
    return results


@app.command()
def batch(
    input_path: Path = typer.Argument(..., help="JSON Lines file of texts or readings."),
    output: Optional[Path] = BATCH_OUTPUT_OPTION,
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Evaluate every record of a JSON Lines file."""

    pipeline, config = _load(config_path)
    try:
        results = _batch_results(load_jsonl(input_path), pipeline, config)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    if output is None:
        for result in results:
            typer.echo(json.dumps(result, ensure_ascii=False))
        return
    count = write_jsonl(output, results)
    LOGGER.info("Wrote %d results to %s", count, output)


@app.command()
def diagnostics(
    output: Optional[Path] = DIAG_OUTPUT_OPTION,
    config_path: Optional[Path] = CONFIG_OPTION,
) -> None:
    """Run diagnostics over the bundled sample readings."""

    pipeline, _ = _load(config_path)
    result = run_all_diagnostics(pipeline)
    render_diagnostics(result)
    if output is not None:
        result.to_json(output)
        LOGGER.info("Wrote diagnostics to %s", output)
    if not result.passed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
