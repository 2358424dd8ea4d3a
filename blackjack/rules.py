"""Blackjack table rules."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleSet:
    """
    Blackjack table rules configuration.

    The defaults are the standard game: bust above 21, dealer draws to 17.
    """

    # Highest total that does not bust
    bust_limit: int = 21

    # Dealer keeps hitting while below this total
    dealer_stands_on: int = 17

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.bust_limit < 12:
            raise ValueError("bust_limit must be at least 12")
        if not 2 <= self.dealer_stands_on <= self.bust_limit:
            raise ValueError("dealer_stands_on must be between 2 and bust_limit")
