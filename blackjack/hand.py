"""Hand scoring for blackjack."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

from blackjack.cards import Card

BUST_LIMIT = 21


class Outcome(Enum):
    """Final result of a game from the player's perspective."""

    WIN = auto()
    LOSE = auto()
    TIE = auto()

    def __str__(self) -> str:
        return self.name.title()


@dataclass
class Hand:
    """
    A blackjack hand with a running total.

    The total is kept incrementally: each card adds its raw value and every
    ace is counted as 11 until the hand would bust, at which point aces are
    recounted as 1 one at a time.
    """

    cards: list[Card] = field(default_factory=list)
    total: int = 0
    soft_aces: int = 0
    bust_limit: int = BUST_LIMIT

    def add_card(self, card: Card) -> None:
        """Add a card to the hand and apply the ace correction."""
        self.cards.append(card)
        self.total += card.value
        if card.is_ace:
            self.soft_aces += 1

        # Reduce aces from 11 to 1 as needed
        while self.total > self.bust_limit and self.soft_aces > 0:
            self.total -= 10
            self.soft_aces -= 1

    @property
    def is_soft(self) -> bool:
        """Check if the hand has an ace still counted as 11."""
        return self.soft_aces > 0

    @property
    def is_hard(self) -> bool:
        """Check if the hand is hard (not soft)."""
        return not self.is_soft

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (total over the bust limit)."""
        return self.total > self.bust_limit

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.total})"
        if self.is_soft:
            value_str = f"(soft {self.total})"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, total={self.total}, soft_aces={self.soft_aces})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Compare player and dealer hands.

    Returns:
        Outcome.WIN if the player wins, Outcome.LOSE if the dealer wins,
        Outcome.TIE on equal totals
    """
    # Player busts always loses
    if player_hand.is_busted:
        return Outcome.LOSE

    # Dealer busts, player wins
    if dealer_hand.is_busted:
        return Outcome.WIN

    if player_hand.total == dealer_hand.total:
        return Outcome.TIE
    if player_hand.total > dealer_hand.total:
        return Outcome.WIN
    return Outcome.LOSE
