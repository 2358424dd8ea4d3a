"""Pytest fixtures for blackjack tests."""

import pytest
from random import Random

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.hand import Hand
from blackjack.game import BlackjackGame, Decision


class StackedShuffle:
    """
    Stand-in for the shuffle generator that puts chosen cards on top.

    The named cards are dealt first, in order; the rest of the deck
    follows in canonical order.
    """

    def __init__(self, *codes: str) -> None:
        self.top = [Card.from_string(code) for code in codes]

    def shuffle(self, cards: list[Card]) -> None:
        rest = [card for card in cards if card not in self.top]
        cards[:] = self.top + rest


class ScriptedDecisions:
    """Decision source that replays a fixed script and counts calls."""

    def __init__(self, *decisions: Decision) -> None:
        self._remaining = list(decisions)
        self.calls = 0

    def __call__(self) -> Decision:
        self.calls += 1
        return self._remaining.pop(0)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def stacked_rng():
    """Factory for shuffle generators that deal the given card codes first."""
    return StackedShuffle


@pytest.fixture
def stacked_game():
    """
    Factory for games whose deck deals the given cards first.

    Deal order is dealer, player, player, then any hits.
    """

    def make(*codes, rules=None):
        return BlackjackGame(rules=rules, rng=StackedShuffle(*codes))

    return make


@pytest.fixture
def scripted():
    """Factory for scripted decision sources."""
    return ScriptedDecisions


@pytest.fixture
def never_asked():
    """Decision source for games where the player must not be asked."""

    def decide():
        raise AssertionError("player was asked to decide")

    return decide


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    hand = Hand()
    hand.add_card(Card(Rank.ACE, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    return hand


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    hand = Hand()
    hand.add_card(Card(Rank.TEN, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    return hand


@pytest.fixture
def bust_hand():
    """A busted hand."""
    hand = Hand()
    hand.add_card(Card(Rank.TEN, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    hand.add_card(Card(Rank.KING, Suit.CLUBS))
    return hand


@pytest.fixture
def game(rng):
    """A new game instance."""
    return BlackjackGame(rng=rng)
