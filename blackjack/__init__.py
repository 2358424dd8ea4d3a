"""Core blackjack engine - 100% UI-agnostic."""

from blackjack.cards import Card, Deck, DeckExhaustedError, Rank, Suit
from blackjack.hand import Hand, Outcome
from blackjack.rules import RuleSet

__all__ = [
    "Card",
    "Deck",
    "DeckExhaustedError",
    "Rank",
    "Suit",
    "Hand",
    "Outcome",
    "RuleSet",
]
