"""Errors raised while building or classifying poker hands."""

from typing import Any


class HandError(ValueError):
    """Base class for all hand and card errors."""


class InvalidHandSize(HandError):
    """A hand does not contain exactly five cards."""

    def __init__(self, size: int, expected: int = 5) -> None:
        self.size = size
        self.expected = expected
        super().__init__(f"Expected {expected} cards, got {size}")


class DuplicateCard(HandError):
    """The same card (rank and suit) appears more than once in a hand."""

    def __init__(self, card: Any) -> None:
        self.card = card
        super().__init__(f"Duplicate card in hand: {card!r}")


class InvalidCard(HandError):
    """A card could not be built from the given value."""

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"Invalid card: {value!r}")


class InvalidRank(InvalidCard):
    def __init__(self, value: Any) -> None:
        super().__init__(value, f"Invalid rank: {value!r} (expected 1-13 or A, 2-10, T, J, Q, K)")


class InvalidSuit(InvalidCard):
    def __init__(self, value: Any) -> None:
        super().__init__(value, f"Invalid suit: {value!r} (expected club, spade, diamond or heart)")
