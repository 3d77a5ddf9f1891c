"""
moedeck CLI - inspect the scheduling and validation engine from a terminal.

Usage:
    moedeck schedule mastered --correct 9 --incorrect 1 --streak 3
    moedeck schedule familiar --all
    moedeck transition familiar --correct --time-spent 3
    moedeck readings 行
    moedeck validate 行 ㄒㄧㄥˊ
"""

from __future__ import annotations

import asyncio
import sys
from typing import Annotated, Optional

import typer
from loguru import logger
from rich import box
from rich.console import Console
from rich.table import Table

from config import get_settings
from moedeck.core.clock import utc_now
from moedeck.core.familiarity import Familiarity, next_familiarity
from moedeck.phonetics import (
    MoedictClient,
    PhoneticValidator,
    ReadingCache,
    format_bopomofo,
    tone_of,
)
from moedeck.study.scheduling import ALGORITHMS, SchedulingAlgorithmName, get_algorithm

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="moedeck",
    help="moedeck - spaced repetition scheduling and bopomofo validation",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def _styled(familiarity: Familiarity) -> str:
    return f"[{familiarity.color}]{familiarity.display_name}[/]"


def _validator() -> tuple[MoedictClient, PhoneticValidator]:
    settings = get_settings()
    client = MoedictClient.from_settings(settings)
    cache = ReadingCache(max_size=settings.reading_cache_max_size)
    return client, PhoneticValidator(client, cache)


# =============================================================================
# Scheduling Commands
# =============================================================================


@app.command()
def schedule(
    familiarity: Annotated[Familiarity, typer.Argument(help="Familiarity tier after the answer")],
    correct: Annotated[int, typer.Option("--correct", "-c", min=0, help="Correct answers so far")] = 0,
    incorrect: Annotated[int, typer.Option("--incorrect", "-i", min=0, help="Incorrect answers so far")] = 0,
    streak: Annotated[int, typer.Option("--streak", "-s", min=0, help="Consecutive correct answers")] = 0,
    algorithm: Annotated[
        Optional[SchedulingAlgorithmName],
        typer.Option("--algorithm", "-a", help="Scheduler (defaults to settings)"),
    ] = None,
    show_all: Annotated[bool, typer.Option("--all", help="Compare every algorithm")] = False,
) -> None:
    """Show when a question is due again."""
    now = utc_now()
    if show_all:
        names = list(ALGORITHMS)
    else:
        names = [algorithm or SchedulingAlgorithmName(get_settings().default_algorithm)]

    table = Table(title=f"Next review for {_styled(familiarity)}", box=box.SIMPLE)
    table.add_column("Algorithm", style="cyan")
    table.add_column("Interval", justify="right")
    table.add_column("Due (UTC)")

    for name in names:
        scheduler = get_algorithm(name)
        interval = scheduler.next_interval(familiarity, correct, incorrect, streak)
        due = scheduler.calculate_next_review(
            familiarity, correct, incorrect, streak, now, clock=lambda: now
        )
        table.add_row(name.value, str(interval), due.strftime("%Y-%m-%d %H:%M"))

    console.print(table)


@app.command()
def transition(
    familiarity: Annotated[Familiarity, typer.Argument(help="Current familiarity tier")],
    correct: Annotated[
        bool, typer.Option("--correct/--incorrect", help="Whether the answer was correct")
    ] = True,
    time_spent: Annotated[
        float, typer.Option("--time-spent", "-t", min=0, help="Seconds spent answering")
    ] = 0.0,
) -> None:
    """Show the familiarity tier reached after one answer."""
    result = next_familiarity(familiarity, correct, time_spent)
    console.print(f"{_styled(familiarity)} → {_styled(result)}")


# =============================================================================
# Phonetic Commands
# =============================================================================


@app.command()
def readings(
    character: Annotated[str, typer.Argument(help="A single character")],
) -> None:
    """List the dictionary readings of a character."""
    entry = asyncio.run(_fetch_entry(character))
    if entry is None or not entry.readings:
        console.print(f"[yellow]No readings found for {character}[/]")
        raise typer.Exit(code=1)

    table = Table(title=character, box=box.SIMPLE)
    table.add_column("Bopomofo", style="cyan")
    table.add_column("Tone", justify="right")
    table.add_column("Pinyin")
    table.add_column("Definition")

    for reading in entry.readings:
        gloss = reading.definitions[0].gloss if reading.definitions else ""
        table.add_row(
            format_bopomofo(reading.phonetic),
            str(tone_of(reading.phonetic)),
            reading.pronunciation_latin,
            gloss,
        )
    console.print(table)


async def _fetch_entry(character: str):
    client, validator = _validator()
    async with client:
        return await validator.entry(character)


@app.command()
def validate(
    character: Annotated[str, typer.Argument(help="A single character")],
    phonetic: Annotated[str, typer.Argument(help="Bopomofo reading to check")],
) -> None:
    """Check a bopomofo reading of a character against the dictionary."""
    result = asyncio.run(_validate(character, phonetic))

    verdict = "[green]✓ correct[/]" if result.is_correct else "[red]✗ incorrect[/]"
    console.print(f"{verdict} ({result.status.value}, confidence {result.confidence:.2f})")
    if result.matched_reading:
        console.print(f"[dim]Closest reading: {result.matched_reading}[/]")
    if not result.is_correct:
        raise typer.Exit(code=1)


async def _validate(character: str, phonetic: str):
    client, validator = _validator()
    async with client:
        return await validator.validate(character, phonetic)


# =============================================================================
# Entry Point
# =============================================================================


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Verbose output")
    ] = False,
) -> None:
    """
    moedeck - spaced repetition scheduling and bopomofo validation
    """
    settings = get_settings()
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(settings.log_file, level=settings.log_level, rotation="10 MB")


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
