"""CLI entrypoint for quiz-runner: a single typer command that runs a timed quiz."""

import asyncio
import logging
import random
import sys
from pathlib import Path
from typing import Any

import structlog
import typer
from click.core import ParameterSource

from quiz_runner.config.domain.config import QuizConfig
from quiz_runner.config.infrastructure.observer import StructlogConfigObserver
from quiz_runner.config.infrastructure.yaml_loader import YamlConfigLoader, build_config
from quiz_runner.core.errors import QuizError
from quiz_runner.questions.application.preparation import prepare_questions
from quiz_runner.questions.infrastructure.csv_loader import CsvQuestionLoader
from quiz_runner.questions.infrastructure.observer import StructlogQuestionsObserver
from quiz_runner.quiz.application.controller import QuizController
from quiz_runner.quiz.application.session import QuizSession
from quiz_runner.quiz.infrastructure.observer import StructlogQuizObserver
from quiz_runner.quiz.infrastructure.score_file import ScoreFileStore
from quiz_runner.quiz.infrastructure.stdio_console import StdioConsole

app = typer.Typer(add_completion=False)

# CLI parameters that map one-to-one onto QuizConfig fields.
_SETTINGS = ("filename", "limit", "shuffle", "output", "retry", "seed")


def _configure_structlog(log_format: str, verbose: bool) -> None:
    """Configure structlog to write to stderr so logs never mix with quiz prompts."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.INFO if verbose else logging.WARNING
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _resolve_config(
    config_path: Path | None,
    overrides: dict[str, Any],
) -> QuizConfig:
    """Layer explicit CLI values over the YAML config (or the defaults)."""
    if config_path is None:
        base: dict[str, Any] = {}
    else:
        loader = YamlConfigLoader(observer=StructlogConfigObserver())
        base = loader.load(path=config_path).model_dump(exclude_unset=True)
    return build_config(raw={**base, **overrides})


def _explicit_settings(ctx: typer.Context) -> dict[str, Any]:
    """Return only the settings the user actually passed on the command line."""
    return {
        name: ctx.params[name]
        for name in _SETTINGS
        if ctx.get_parameter_source(name) is not ParameterSource.DEFAULT
    }


@app.command()
def run(
    ctx: typer.Context,
    filename: Path = typer.Option(
        Path("problems.csv"),
        "--filename",
        help="CSV file containing quiz questions (question,answer per line)",
    ),
    limit: int = typer.Option(
        30,
        "--limit",
        help="Time limit for the whole quiz in seconds",
    ),
    shuffle: bool = typer.Option(
        False,
        "--shuffle/--no-shuffle",
        help="Shuffle the questions",
    ),
    output: str = typer.Option(
        "",
        "--output",
        help="File to append the score to; empty disables saving",
    ),
    retry: bool = typer.Option(
        False,
        "--retry/--no-retry",
        help="Offer to retry the quiz after each attempt",
    ),
    seed: int | None = typer.Option(
        None,
        "--seed",
        help="Seed for --shuffle, for a reproducible question order",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        help="YAML file with any of the settings above; flags take precedence",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log quiz events at INFO level on stderr",
    ),
) -> None:
    """Run a timed quiz from a CSV file of questions and answers."""
    _configure_structlog(log_format=log_format, verbose=verbose)

    try:
        config = _resolve_config(
            config_path=config_path,
            overrides=_explicit_settings(ctx=ctx),
        )

        rng = random.Random(config.seed) if config.seed is not None else None
        question_set = prepare_questions(
            loader=CsvQuestionLoader(observer=StructlogQuestionsObserver()),
            path=config.filename,
            shuffle=config.shuffle,
            rng=rng,
        )

        console = StdioConsole()
        observer = StructlogQuizObserver()
        score_store = ScoreFileStore(path=config.output) if config.output else None
        session = QuizSession(
            controller=QuizController(console=console, observer=observer),
            console=console,
            observer=observer,
            score_store=score_store,
        )
        asyncio.run(
            session.run(
                question_set=question_set,
                time_limit_seconds=config.limit,
                retry=config.retry,
            )
        )

    except KeyboardInterrupt:
        typer.echo("\nQuiz interrupted.", err=True)
        sys.exit(1)
    except QuizError as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(1)


if __name__ == "__main__":
    app()
