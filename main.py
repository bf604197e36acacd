"""Five-card poker hand classifier."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from config.settings import Config, ConfigError, load_config
from poker.cards import Card
from poker.exceptions import HandError
from poker.hand_classifier import HandClassifier
from ui.display import render_analysis, render_categories, render_category, render_hand

app = typer.Typer(
    name="poker-hand",
    help="Classify five-card poker hands (high card through royal flush).",
)
console = Console()


def setup_logging(verbose: bool) -> None:
    """Route log records through rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(config_path: Optional[Path]) -> Config:
    if config_path is None:
        return Config()
    try:
        return load_config(config_path)
    except (FileNotFoundError, ConfigError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def classify(
    cards: list[str] = typer.Argument(..., help="Five cards, e.g. Th Jh Qh Kh Ah"),
    explain: bool = typer.Option(False, "--explain", "-e", help="Show the rank tally and flags"),
    no_validate: bool = typer.Option(False, "--no-validate", help="Skip hand size/duplicate checks"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Classify a poker hand."""
    setup_logging(verbose)
    config = _load(config_path)
    validate = config.classifier.validate and not no_validate

    try:
        hand = [Card.from_string(card) for card in cards]
        analysis = HandClassifier.analyze(hand, validate=validate)
    except HandError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"{render_hand(hand, config.display.use_symbols)}  ", end="")
    console.print(render_category(analysis.category), f"[dim]({analysis.category.value})[/dim]")

    if explain or config.display.show_tally:
        console.print(render_analysis(analysis))


@app.command()
def categories() -> None:
    """List the hand categories."""
    console.print("\n[bold blue]Hand Categories[/bold blue]")
    console.print("=" * 50)
    console.print(render_categories())


@app.command()
def info(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Show the effective configuration."""
    config = _load(config_path)

    console.print("\n[bold blue]Configuration[/bold blue]")
    console.print("=" * 50)

    table = Table()
    table.add_column("Category", style="cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value", style="green")

    table.add_row("Classifier", "Validate hands", str(config.classifier.validate))
    table.add_row("Display", "Suit symbols", str(config.display.use_symbols))
    table.add_row("Display", "Show tally", str(config.display.show_tally))

    console.print(table)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
