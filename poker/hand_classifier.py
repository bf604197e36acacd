"""Five-card poker hand classification."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from poker.cards import Card, Rank
from poker.exceptions import DuplicateCard, InvalidHandSize

logger = logging.getLogger(__name__)

HAND_SIZE = 5
NUM_RANKS = 13
ACE_INDEX = Rank.ACE - 1


class HandCategory(str, Enum):
    """The ten hand categories, weakest to strongest."""

    HIGH_CARD = "highcard"
    PAIR = "pair"
    TWO_PAIR = "twopair"
    THREE_OF_A_KIND = "threeofakind"
    STRAIGHT = "straight"
    FLUSH = "flush"
    FULL_HOUSE = "fullhouse"
    FOUR_OF_A_KIND = "fourofakind"
    STRAIGHT_FLUSH = "straightflush"
    ROYAL_FLUSH = "royalflush"

    def __str__(self) -> str:
        names = {
            "highcard": "High Card",
            "pair": "Pair",
            "twopair": "Two Pair",
            "threeofakind": "Three of a Kind",
            "straight": "Straight",
            "flush": "Flush",
            "fullhouse": "Full House",
            "fourofakind": "Four of a Kind",
            "straightflush": "Straight Flush",
            "royalflush": "Royal Flush",
        }
        return names[self.value]

    @property
    def description(self) -> str:
        return CATEGORY_DESCRIPTIONS[self]


CATEGORY_DESCRIPTIONS = {
    HandCategory.HIGH_CARD: "Five cards which do not form any of the other combinations",
    HandCategory.PAIR: "Two cards of equal rank and three cards different from these and from each other",
    HandCategory.TWO_PAIR: "Two pairs of different ranks",
    HandCategory.THREE_OF_A_KIND: "Three cards of the same rank plus two unequal cards",
    HandCategory.STRAIGHT: "Five cards of mixed suits in sequence",
    HandCategory.FLUSH: "Five cards of the same suit",
    HandCategory.FULL_HOUSE: "Three cards of one rank and two cards of another rank",
    HandCategory.FOUR_OF_A_KIND: "Four cards of the same rank and any fifth card",
    HandCategory.STRAIGHT_FLUSH: "Five cards of the same suit in sequence",
    HandCategory.ROYAL_FLUSH: "Ten, Jack, Queen, King and Ace of the same suit",
}


@dataclass(frozen=True, slots=True)
class RankTally:
    """Number of cards holding each rank.

    ``counts[0]`` is Aces, ``counts[9]`` Tens and ``counts[12]`` Kings.
    """

    counts: tuple[int, ...]

    @classmethod
    def from_cards(cls, cards: Sequence[Card]) -> "RankTally":
        counts = [0] * NUM_RANKS
        for card in cards:
            counts[card.rank - 1] += 1
        return cls(counts=tuple(counts))

    def __getitem__(self, rank: Rank) -> int:
        return self.counts[rank - 1]

    @property
    def total(self) -> int:
        return sum(self.counts)

    @property
    def largest_set(self) -> int:
        """Size of the biggest group of cards sharing a rank."""
        return max(self.counts)

    @property
    def distinct_ranks(self) -> int:
        return sum(1 for count in self.counts if count > 0)

    def longest_run(self) -> int:
        """Length of the trailing run of present ranks, scanning Ace to King.

        Ace only counts as low here. A run that reaches five is kept even
        if a gap follows it.
        """
        run = 0
        for count in self.counts:
            if count > 0:
                run += 1
            elif run != HAND_SIZE:
                run = 0
        return run


@dataclass(frozen=True, slots=True)
class HandAnalysis:
    """Result of classifying a hand, with the facts that decided it."""

    category: HandCategory
    tally: RankTally
    is_flush: bool
    is_straight: bool
    is_broadway: bool

    def __str__(self) -> str:
        return str(self.category)


class HandClassifier:
    """Classify five-card poker hands."""

    @staticmethod
    def validate(hand: Sequence[Card]) -> None:
        """Raise if the hand is not five distinct cards."""
        if len(hand) != HAND_SIZE:
            raise InvalidHandSize(len(hand), HAND_SIZE)
        seen: set[Card] = set()
        for card in hand:
            if card in seen:
                raise DuplicateCard(card)
            seen.add(card)

    @staticmethod
    def analyze(hand: Sequence[Card], validate: bool = True) -> HandAnalysis:
        """Classify a hand and report how the category was reached.

        Args:
            hand: Five cards, in any order
            validate: Reject hands that are not five distinct cards. With
                validation off, malformed hands are classified as-is and the
                result is not meaningful.

        Returns:
            HandAnalysis holding the category, rank tally and flags
        """
        if validate:
            HandClassifier.validate(hand)
        elif not hand:
            raise InvalidHandSize(0, HAND_SIZE)

        tally = RankTally.from_cards(hand)
        outcome = HandClassifier._set_pattern(tally)
        is_flush = HandClassifier._check_flush(hand)
        is_straight, is_broadway = HandClassifier._check_straight(tally)

        # Flush and straight override any set pattern
        if is_flush and is_straight:
            outcome = HandCategory.ROYAL_FLUSH if is_broadway else HandCategory.STRAIGHT_FLUSH
        elif is_flush:
            outcome = HandCategory.FLUSH
        elif is_straight:
            outcome = HandCategory.STRAIGHT
        elif outcome is None:
            outcome = HandCategory.HIGH_CARD

        logger.debug(
            "tally=%s largest_set=%d distinct=%d flush=%s straight=%s broadway=%s -> %s",
            tally.counts,
            tally.largest_set,
            tally.distinct_ranks,
            is_flush,
            is_straight,
            is_broadway,
            outcome.value,
        )
        return HandAnalysis(
            category=outcome,
            tally=tally,
            is_flush=is_flush,
            is_straight=is_straight,
            is_broadway=is_broadway,
        )

    @staticmethod
    def classify(hand: Sequence[Card], validate: bool = True) -> HandCategory:
        """Return the category of a five-card hand."""
        return HandClassifier.analyze(hand, validate=validate).category

    @staticmethod
    def _set_pattern(tally: RankTally) -> HandCategory | None:
        """Category implied by groups of equal rank, if any."""
        largest_set = tally.largest_set
        distinct = tally.distinct_ranks

        if largest_set == 4:
            return HandCategory.FOUR_OF_A_KIND
        if largest_set == 3:
            if distinct == 2:
                return HandCategory.FULL_HOUSE
            if distinct == 3:
                return HandCategory.THREE_OF_A_KIND
        elif largest_set == 2:
            if distinct == 3:
                return HandCategory.TWO_PAIR
            if distinct == 4:
                return HandCategory.PAIR
        return None

    @staticmethod
    def _check_flush(hand: Sequence[Card]) -> bool:
        first_suit = hand[0].suit
        return all(card.suit == first_suit for card in hand[1:])

    @staticmethod
    def _check_straight(tally: RankTally) -> tuple[bool, bool]:
        """Check if ranks form a straight. Returns (is_straight, is_broadway).

        A run of four ending at King plus an Ace is the Ace-high straight
        (10-J-Q-K-A). That is the only place Ace ranks above King.
        """
        run = tally.longest_run()
        is_broadway = False
        if run == 4 and tally.counts[ACE_INDEX] > 0:
            run += 1
            is_broadway = True
        return run == HAND_SIZE, is_broadway


def classify(hand: Sequence[Card]) -> HandCategory:
    """Classify a five-card hand into one of the ten categories."""
    return HandClassifier.classify(hand)
