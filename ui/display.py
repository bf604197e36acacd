"""Display utilities for terminal hand output."""

from typing import Sequence

from rich.table import Table
from rich.text import Text

from poker.cards import Card, Rank, Suit
from poker.hand_classifier import HandAnalysis, HandCategory


SUIT_COLORS = {
    Suit.HEART: "red",
    Suit.DIAMOND: "red",
    Suit.CLUB: "white",
    Suit.SPADE: "white",
}

CATEGORY_STYLES = {
    HandCategory.HIGH_CARD: "dim",
    HandCategory.PAIR: "white",
    HandCategory.TWO_PAIR: "white",
    HandCategory.THREE_OF_A_KIND: "cyan",
    HandCategory.STRAIGHT: "cyan",
    HandCategory.FLUSH: "green",
    HandCategory.FULL_HOUSE: "green",
    HandCategory.FOUR_OF_A_KIND: "yellow",
    HandCategory.STRAIGHT_FLUSH: "bold yellow",
    HandCategory.ROYAL_FLUSH: "bold magenta",
}


def render_card(card: Card, use_symbols: bool = True) -> str:
    """Render a single card with color (red for hearts/diamonds)."""
    color = SUIT_COLORS[card.suit]
    label = str(card) if use_symbols else card.notation
    return f"[{color}]\\[{label}][/{color}]"


def render_hand(cards: Sequence[Card], use_symbols: bool = True) -> str:
    return " ".join(render_card(card, use_symbols) for card in cards)


def render_category(category: HandCategory) -> Text:
    return Text(str(category), style=CATEGORY_STYLES[category])


def render_analysis(analysis: HandAnalysis) -> Table:
    """Render the rank tally and flags behind a classification."""
    table = Table(title="Rank tally", show_header=True)
    for rank in Rank:
        table.add_column(str(rank), justify="center")
    table.add_row(*(str(count) if count else "[dim]0[/dim]" for count in analysis.tally.counts))

    flags = Table(show_header=False, box=None, padding=(0, 1))
    flags.add_column("Label", style="dim")
    flags.add_column("Value", style="bold")
    flags.add_row("Largest set", str(analysis.tally.largest_set))
    flags.add_row("Distinct ranks", str(analysis.tally.distinct_ranks))
    flags.add_row("Flush", _yes_no(analysis.is_flush))
    flags.add_row("Straight", _yes_no(analysis.is_straight))
    flags.add_row("Broadway", _yes_no(analysis.is_broadway))

    layout = Table.grid(padding=(1, 0))
    layout.add_row(table)
    layout.add_row(flags)
    return layout


def render_categories() -> Table:
    """Table of every category with its definition."""
    table = Table()
    table.add_column("Label", style="cyan", no_wrap=True)
    table.add_column("Name", no_wrap=True)
    table.add_column("Description", style="white")
    for category in HandCategory:
        table.add_row(category.value, render_category(category), category.description)
    return table


def _yes_no(flag: bool) -> str:
    return "[green]yes[/green]" if flag else "[red]no[/red]"
