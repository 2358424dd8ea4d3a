"""Card and Deck classes - immutable card representations."""

import logging
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterator

logger = logging.getLogger(__name__)


class DeckExhaustedError(IndexError):
    """Raised when a card is dealt from a deck that has none left."""


class Suit(Enum):
    """Card suits in canonical deck order."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Card ranks, ace through king."""

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
        return _RANK_CODES[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        if self.value <= 10:
            return self.value
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


_RANK_CODES: dict[Rank, str] = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "T",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a code like 'AS', 'td' or '10H'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {code: rank for rank, code in _RANK_CODES.items()}
        rank_map["10"] = Rank.TEN

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        try:
            suit = Suit(suit_str)
        except ValueError:
            raise ValueError(f"Invalid suit: {suit_str}") from None

        return cls(rank_map[rank_str], suit)


class Deck:
    """
    A standard 52-card deck dealt sequentially from a cursor.

    The deck is built once per game, shuffled once, and dealt from the
    front. Dealing past the last card is a programming error.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a new deck in canonical order.

        Args:
            rng: Random number generator used for shuffling
        """
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self._cursor = 0
        self.reset()

    def reset(self) -> None:
        """Reset deck to all 52 cards in canonical order."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]
        self._cursor = 0

    def shuffle(self) -> None:
        """Shuffle the deck and start dealing from the top again."""
        self._rng.shuffle(self._cards)
        self._cursor = 0
        logger.debug("Deck shuffled")

    def deal_card(self) -> Card:
        """
        Deal the card at the cursor.

        Raises:
            DeckExhaustedError: If all 52 cards have already been dealt
        """
        if self._cursor >= len(self._cards):
            raise DeckExhaustedError("Deck has gone through all cards")
        card = self._cards[self._cursor]
        self._cursor += 1
        return card

    def __len__(self) -> int:
        return self.cards_remaining

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards[self._cursor:])

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return the full deck order, dealt cards included."""
        return tuple(self._cards)

    @property
    def cursor(self) -> int:
        """Return the index of the next card to deal."""
        return self._cursor

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards) - self._cursor

    @property
    def cards_dealt(self) -> int:
        """Return the number of cards dealt."""
        return self._cursor
