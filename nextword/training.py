"""
Training Module with Rich Terminal UI

This module trains a suggestion model with terminal progress bars and
statistics tables, and runs an interactive suggestion loop, using the
Rich library.
"""

from typing import Dict, List, Tuple
from rich.console import Console
from rich.progress import (
    Progress, SpinnerColumn, TextColumn, BarColumn,
    TaskProgressColumn, TimeElapsedColumn
)
from rich.panel import Panel
from rich.table import Table
from rich import box

from .model import NGramModel, DEFAULT_TOP_K


console = Console()

# Prompt words that end the interactive loop
QUIT_WORDS = ('quit', 'exit', 'q')


def create_stats_table(stats: Dict) -> Table:
    """Create a Rich table displaying training statistics."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Metric", style="green")
    table.add_column("Value", style="yellow", justify="right")

    for key, value in stats.items():
        display_key = key.replace('_', ' ').title()

        if isinstance(value, float):
            display_value = f"{value:,.4f}"
        elif isinstance(value, int):
            display_value = f"{value:,}"
        elif isinstance(value, list):
            display_value = f"{len(value)} items"
        else:
            display_value = str(value)

        table.add_row(display_key, display_value)

    return table


def train_model_cli(text: str, source: str = "text") -> NGramModel:
    """
    Train a suggestion model with terminal output.

    Args:
        text: Raw training text
        source: Human readable description of where the text came from

    Returns:
        Trained NGramModel
    """
    console.print()
    console.print(Panel.fit(
        "[bold blue]N-gram Suggestion Model Training[/bold blue]",
        border_style="blue"
    ))
    console.print()

    config_table = Table(box=box.SIMPLE, show_header=False)
    config_table.add_column("Setting", style="cyan")
    config_table.add_column("Value", style="white")
    config_table.add_row("Source", source)
    config_table.add_row("Characters", f"{len(text):,}")
    config_table.add_row("Context Lengths", "1, 2, 3")

    console.print(Panel(config_table, title="[bold]Configuration[/bold]", border_style="green"))
    console.print()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console
    ) as progress:

        train_task = progress.add_task("[cyan]Counting n-grams...", total=None)

        def update_progress(current, total, stage=""):
            progress.update(train_task, completed=current, total=total,
                            description=f"[cyan]{stage}")

        model = NGramModel.train(text, progress_callback=update_progress)

        progress.remove_task(train_task)

    console.print("[green]✓[/green] Training complete!")
    console.print()

    console.print(Panel(
        create_stats_table(model.training_stats),
        title="[bold]Training Statistics[/bold]",
        border_style="yellow"
    ))
    console.print()

    return model


def suggestion_rows(model: NGramModel, text: str,
                    top_k: int = DEFAULT_TOP_K) -> List[Tuple[str, str, str]]:
    """Rows of (level, best suggestion, other candidates) for one input."""
    rows = []
    levels = (
        ("Unigram", model.rank_unigram),
        ("Bigram", model.rank_bigram),
        ("Trigram", model.rank_trigram),
    )
    for level, rank in levels:
        ranked = rank(text, top_k=top_k)
        if ranked:
            best = f"{ranked[0].word} ({ranked[0].score:,})"
            others = ", ".join(f"{s.word} ({s.score:,})" for s in ranked[1:])
        else:
            best = "-"
            others = ""
        rows.append((level, best, others))
    return rows


def create_suggestion_table(model: NGramModel, text: str,
                            top_k: int = DEFAULT_TOP_K) -> Table:
    """Create a Rich table of the suggestions at every context length."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("Level", style="cyan")
    table.add_column("Suggestion", style="bold green")
    table.add_column("Other Candidates", style="white")

    for row in suggestion_rows(model, text, top_k):
        table.add_row(*row)

    return table


def interactive_demo(model: NGramModel, top_k: int = DEFAULT_TOP_K):
    """Run an interactive suggestion loop."""
    console.print()
    console.print(Panel.fit(
        "[bold magenta]Interactive Demo[/bold magenta]\n"
        "Type the start of a sentence to see next-word suggestions.\n"
        "Bigram scores are scaled x1000; unigram and trigram scores are counts.\n"
        "Type 'quit' to exit.",
        border_style="magenta"
    ))
    console.print()

    while True:
        try:
            user_input = console.input("[bold cyan]Enter text:[/bold cyan] ")
        except (KeyboardInterrupt, EOFError):
            break

        if user_input.strip().lower() in QUIT_WORDS:
            break

        console.print(create_suggestion_table(model, user_input, top_k))
        console.print()

    console.print("\n[yellow]Goodbye![/yellow]")
