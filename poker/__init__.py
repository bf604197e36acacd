"""Five-card poker hand classification."""

from poker.cards import Card, Rank, Suit, parse_hand
from poker.exceptions import (
    DuplicateCard,
    HandError,
    InvalidCard,
    InvalidHandSize,
    InvalidRank,
    InvalidSuit,
)
from poker.hand_classifier import HandAnalysis, HandCategory, HandClassifier, RankTally, classify

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "parse_hand",
    "HandError",
    "InvalidHandSize",
    "DuplicateCard",
    "InvalidCard",
    "InvalidRank",
    "InvalidSuit",
    "HandAnalysis",
    "HandCategory",
    "HandClassifier",
    "RankTally",
    "classify",
]
