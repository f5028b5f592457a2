"""
vocab-drill: terminal front end for practice sessions.

Commands:
    vocab-drill types                  - List drill types
    vocab-drill preview words.json     - Show the generated drills without running them
    vocab-drill run words.json         - Practice a word list interactively
    vocab-drill quiz quizzes.json      - Run an authored study-set quiz
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional

import typer
from loguru import logger
from rich import box
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from config import get_settings
from src.practice import (
    DRILL_TYPE_LABELS,
    DrillItem,
    PracticeError,
    PracticeFlow,
    SessionEngine,
    get_flow_config,
    start_quiz_session,
    start_session,
)
from src.practice.drills import AUDIO_TYPES, FREE_TEXT_TYPES, DrillType
from src.practice.engine import SCORE_BAND_LABELS
from src.practice.flows import make_rng, resolve_drill_types
from src.practice.generator import QuestionGenerator
from src.practice.progress import (
    JsonFileProgressSink,
    build_learned_words,
    build_review_progress,
)
from src.practice.sources import JsonFileSource, JsonFileStudySetSource
from src.practice.studyset import is_multi_select

console = Console()

app = typer.Typer(
    name="vocab-drill",
    help="Vocabulary practice sessions - generated drills with retry until mastered",
    no_args_is_help=True,
)


# =============================================================================
# Helpers
# =============================================================================

def _label(drill: DrillItem) -> str:
    if isinstance(drill.drill_type, DrillType):
        return DRILL_TYPE_LABELS[drill.drill_type]
    return drill.drill_type.value.replace("_", " ").title()


def _show_drill(engine: SessionEngine, drill: DrillItem) -> None:
    progress = engine.progress()
    title = f"[bold cyan]{_label(drill)}[/bold cyan]  [dim]{progress.answered + 1} | {progress.remaining} left[/dim]"
    console.print(Panel(drill.prompt, title=title, border_style="cyan", box=box.HEAVY, padding=(1, 2)))

    if drill.drill_type in AUDIO_TYPES:
        console.print(f"[dim]Audio: {drill.audio_url or 'not available'}[/dim]")

    if drill.options:
        table = Table(box=box.MINIMAL, show_header=False)
        table.add_column("Index", style="cyan", justify="right", width=4)
        table.add_column("Option", style="white")
        for i, option in enumerate(drill.options):
            table.add_row(f"[{i + 1}]", option)
        console.print(table)


def _resolve_choice(drill: DrillItem, raw: str) -> Any:
    """Map option numbers to option text; anything else is taken literally."""
    raw = raw.strip()
    if not drill.options:
        return raw

    if is_multi_select(drill):
        tokens = raw.replace(",", " ").split()
        if all(t.isdigit() for t in tokens):
            picks = tokens
        else:
            # Option text may contain spaces, so only commas separate picks
            picks = [p.strip() for p in raw.split(",") if p.strip()]
        return [
            drill.options[int(p) - 1] if p.isdigit() and 1 <= int(p) <= len(drill.options) else p
            for p in picks
        ]

    if raw.isdigit() and 1 <= int(raw) <= len(drill.options):
        return drill.options[int(raw) - 1]
    return raw


def _run_loop(engine: SessionEngine) -> None:
    while not engine.is_complete:
        drill = engine.current
        _show_drill(engine, drill)

        if drill.drill_type is DrillType.PRONOUNCE:
            hint = "Say the word (type the transcription)"
        elif drill.drill_type in FREE_TEXT_TYPES or not drill.options:
            hint = "Type your answer"
        elif is_multi_select(drill):
            hint = "Enter choices (e.g., 1 3)"
        else:
            hint = f"Enter choice [1-{len(drill.options)}]"
        raw = Prompt.ask(f"[bold]>[/bold] {hint}", default="")

        result = engine.check_answer(_resolve_choice(drill, raw))
        if result.correct:
            console.print(f"[green]{result.feedback}[/green]")
        else:
            console.print(f"[red]{result.feedback}[/red] Correct answer: [bold]{result.correct_answer}[/bold]")
        engine.advance()


def _show_summary(engine: SessionEngine) -> None:
    summary = engine.summary()
    table = Table(title="Session Complete", box=box.ROUNDED)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Correct", f"{summary.correct_count}/{summary.total}")
    table.add_row("Answers", str(summary.answered))
    table.add_row("Skipped", str(summary.skipped_count))
    table.add_row("Score", f"{summary.percentage}%")
    console.print(table)
    console.print(f"[bold]{SCORE_BAND_LABELS[summary.band]}[/bold]")


def _fail(error: PracticeError) -> None:
    rprint(f"[red]Error:[/red] {error}")
    raise typer.Exit(code=1)


# =============================================================================
# Commands
# =============================================================================

@app.command("types")
def list_types() -> None:
    """List the available drill types."""
    table = Table(title="Drill Types", box=box.ROUNDED)
    table.add_column("Type", style="cyan")
    table.add_column("Label")
    for drill_type in DrillType:
        table.add_row(drill_type.value, DRILL_TYPE_LABELS[drill_type])
    console.print(table)


@app.command("preview")
def preview(
    words_file: Path = typer.Argument(..., help="JSON file with the word list"),
    flow: PracticeFlow = typer.Option(PracticeFlow.SPACED_REVIEW, "--flow", "-f", help="Practice flow"),
    types: Optional[str] = typer.Option(None, "--types", "-t", help="Comma-separated drill types"),
    count: Optional[int] = typer.Option(None, "--count", "-n", help="Number of words"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
) -> None:
    """Show the drills a session would run, without running it."""
    try:
        config = get_flow_config(flow)
        limit = count if count is not None else config.word_limit
        items = JsonFileSource(words_file).fetch(limit)
        if not items:
            rprint("[yellow]No words to practice.[/yellow]")
            return
        drill_types = resolve_drill_types(types, config)
        generator = QuestionGenerator(
            rng=make_rng(seed if seed is not None else config.random_seed),
            max_distractors=config.max_distractors,
            true_label=config.true_label,
            false_label=config.false_label,
        )
        drills = generator.generate(items, drill_types, items_per_source=config.items_per_source)
    except PracticeError as e:
        _fail(e)

    table = Table(title=f"{len(drills)} drills ({flow.value})", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Prompt")
    table.add_column("Answer", style="green")
    table.add_column("Options")
    for i, drill in enumerate(drills, 1):
        table.add_row(str(i), drill.drill_type.value, drill.prompt, drill.correct_answer, " | ".join(drill.options))
    console.print(table)


@app.command("run")
def run(
    words_file: Path = typer.Argument(..., help="JSON file with the word list"),
    flow: PracticeFlow = typer.Option(PracticeFlow.SPACED_REVIEW, "--flow", "-f", help="Practice flow"),
    types: Optional[str] = typer.Option(None, "--types", "-t", help="Comma-separated drill types"),
    count: Optional[int] = typer.Option(None, "--count", "-n", help="Number of words"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    progress_out: Optional[Path] = typer.Option(None, "--progress-out", "-o", help="Write progress JSON here"),
) -> None:
    """Practice a word list interactively."""
    try:
        items = JsonFileSource(words_file).fetch()
        engine = start_session(
            flow,
            items,
            enabled_types=types,
            limit=count,
            rng=make_rng(seed) if seed is not None else None,
        )
    except PracticeError as e:
        _fail(e)

    if engine is None:
        rprint("[yellow]No words to practice.[/yellow]")
        return

    _run_loop(engine)
    _show_summary(engine)

    if progress_out is not None:
        if flow is PracticeFlow.TOPIC_LEARNING:
            payload = build_learned_words(engine)
        else:
            payload = build_review_progress(engine)
        JsonFileProgressSink(progress_out).submit(payload)
        rprint(f"[dim]Progress saved to {progress_out}[/dim]")


@app.command("quiz")
def quiz(
    quiz_file: Path = typer.Argument(..., help="JSON file with study-set quizzes"),
) -> None:
    """Run an authored study-set quiz."""
    try:
        quizzes = JsonFileStudySetSource(quiz_file).fetch_quizzes()
        engine = start_quiz_session(quizzes)
    except PracticeError as e:
        _fail(e)

    if engine is None:
        rprint("[yellow]This study set has no quizzes.[/yellow]")
        return

    _run_loop(engine)
    _show_summary(engine)


# =============================================================================
# Entry Point
# =============================================================================

def main() -> None:
    """CLI entry point."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=get_settings().log_level.upper(),
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )

    app()


if __name__ == "__main__":
    main()
