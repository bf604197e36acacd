"""Card, Suit, and Rank definitions for poker hands."""

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any

from poker.exceptions import InvalidCard, InvalidRank, InvalidSuit


class Suit(str, Enum):
    """Card suits."""

    CLUB = "club"
    SPADE = "spade"
    DIAMOND = "diamond"
    HEART = "heart"

    def __str__(self) -> str:
        symbols = {"club": "♣", "spade": "♠", "diamond": "♦", "heart": "♥"}
        return symbols[self.value]

    @property
    def letter(self) -> str:
        return self.value[0]

    @classmethod
    def from_string(cls, s: str) -> "Suit":
        """Parse a suit name ('heart', 'Hearts') or letter ('h')."""
        key = s.strip().lower()
        for suit in cls:
            if key in (suit.value, suit.value + "s", suit.letter):
                return suit
        raise InvalidSuit(s)


class Rank(IntEnum):
    """Card ranks (1-13, where 1 is Ace)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {1: "A", 11: "J", 12: "Q", 13: "K"}[self.value]

    @classmethod
    def from_string(cls, s: str) -> "Rank":
        """Parse a rank like 'A', '7', 'T', '10' or 'k'."""
        rank_map = {
            "A": cls.ACE,
            "T": cls.TEN,
            "J": cls.JACK,
            "Q": cls.QUEEN,
            "K": cls.KING,
        }
        key = s.strip().upper()
        if key in rank_map:
            return rank_map[key]
        if key.isdigit() and 2 <= int(key) <= 10:
            return cls(int(key))
        raise InvalidRank(s)


def _coerce_rank(value: Any) -> Rank:
    if isinstance(value, Rank):
        return value
    if isinstance(value, str):
        # record form allows "1".."13"; letter forms go through from_string
        if value.strip().isdigit():
            value = int(value)
        else:
            return Rank.from_string(value)
    # bool is an int subclass but never a rank
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Rank(value)
        except ValueError:
            raise InvalidRank(value) from None
    raise InvalidRank(value)


def _coerce_suit(value: Any) -> Suit:
    if isinstance(value, Suit):
        return value
    if isinstance(value, str):
        return Suit.from_string(value)
    raise InvalidSuit(value)


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card.

    Plain ints and strings are accepted for ``rank`` and ``suit`` and coerced
    to their enums, so ``Card(12, "heart")`` is the queen of hearts.
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        object.__setattr__(self, "rank", _coerce_rank(self.rank))
        object.__setattr__(self, "suit", _coerce_suit(self.suit))

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def notation(self) -> str:
        """Compact ASCII notation, e.g. 'Th' or 'As'."""
        rank = "T" if self.rank == Rank.TEN else str(self.rank)
        return f"{rank}{self.suit.letter}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Kh', '2c', 'Td' or '10d'."""
        s = s.strip()
        if len(s) not in (2, 3):
            raise InvalidCard(s)
        return cls(rank=Rank.from_string(s[:-1]), suit=Suit.from_string(s[-1]))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Card":
        """Create card from a record like {"suit": "heart", "rank": 12}."""
        try:
            return cls(rank=data["rank"], suit=data["suit"])
        except (KeyError, TypeError) as e:
            raise InvalidCard(data) from e

    def to_dict(self) -> dict[str, Any]:
        return {"suit": self.suit.value, "rank": int(self.rank)}


def parse_hand(text: str) -> list[Card]:
    """Parse cards separated by whitespace or commas, e.g. 'Th Jh Qh Kh Ah'."""
    return [Card.from_string(token) for token in re.split(r"[\s,]+", text.strip()) if token]
