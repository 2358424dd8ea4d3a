"""Blackjack game engine with state machine."""

import logging
from enum import Enum, auto
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Card, Deck
from blackjack.hand import Hand, Outcome, evaluate_hands
from blackjack.rules import RuleSet
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameState

logger = logging.getLogger(__name__)


class Decision(Enum):
    """A player's choice on their turn."""

    HIT = auto()
    STAND = auto()


# Blocks until the player has made a valid choice
DecisionSource = Callable[[], Decision]


class BlackjackGame:
    """
    Single-game blackjack engine using a state machine.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal_initial", "source": "setup", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "player_busts", "source": "player_turn", "dest": "resolved"},
        {"trigger": "dealer_plays", "source": "dealer_turn", "dest": "resolved"},
    ]

    def __init__(
        self,
        rules: RuleSet | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new blackjack game.

        Args:
            rules: Game rules (uses defaults if not provided)
            rng: Random number generator for reproducible games
        """
        self.rules = rules or RuleSet()
        self.deck = Deck(rng=rng)

        self.player_hand = Hand(bust_limit=self.rules.bust_limit)
        self.dealer_hand = Hand(bust_limit=self.rules.bust_limit)
        self.outcome: Outcome | None = None
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="setup",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_state_change",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def play(self, decide: DecisionSource) -> Outcome:
        """
        Play the game to completion.

        Args:
            decide: Called each time the player must choose to hit or stand

        Returns:
            The final outcome from the player's perspective
        """
        if self.state == GameState.SETUP:
            self.deal()

        while self.state == GameState.PLAYER_TURN:
            if decide() == Decision.HIT:
                self.hit()
            else:
                self.stand()

        assert self.outcome is not None
        return self.outcome

    def deal(self) -> bool:
        """
        Shuffle the deck and deal the opening cards.

        The dealer gets one card, then the player gets two.

        Returns:
            True if the cards were dealt
        """
        if self.state != GameState.SETUP:
            self._reject("Cannot deal in current state")
            return False

        self.deck.shuffle()
        self.events.emit_new(EventType.DECK_SHUFFLED)
        self.events.emit_new(EventType.GAME_STARTED)

        self._deal_card_to_hand(self.dealer_hand)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.player_hand)

        self.deal_initial()  # Trigger state transition
        return self._check_player_total()

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if self.state != GameState.PLAYER_TURN:
            self._reject("Cannot hit in current state")
            return False

        self._deal_card_to_hand(self.player_hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player_hand.total)
        return self._check_player_total()

    def _check_player_total(self) -> bool:
        """End the player's turn early on a bust or on exactly the bust limit."""
        if self.player_hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_hand.total)
            self.player_busts()  # Dealer never plays
            return self._resolve()

        # A player on the limit is never asked to decide
        if self.player_hand.total == self.rules.bust_limit:
            return self._stand(automatic=True)

        return True

    def stand(self) -> bool:
        """Player stands (keeps current hand)."""
        if self.state != GameState.PLAYER_TURN:
            self._reject("Cannot stand in current state")
            return False

        return self._stand(automatic=False)

    def _stand(self, automatic: bool) -> bool:
        """End the player's turn and let the dealer play."""
        self.events.emit_new(
            EventType.PLAYER_STAND,
            hand_value=self.player_hand.total,
            automatic=automatic,
        )
        self.player_done()
        return self._play_dealer()

    def _play_dealer(self) -> bool:
        """Dealer plays their hand."""
        # Dealer hits until the threshold, no decisions
        while self.dealer_hand.total < self.rules.dealer_stands_on:
            self._deal_card_to_hand(self.dealer_hand)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.total)

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.total)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.total)

        self.dealer_plays()
        return self._resolve()

    def _resolve(self) -> bool:
        """Decide the outcome of a finished game."""
        self.outcome = evaluate_hands(self.player_hand, self.dealer_hand)

        totals = {
            "player_total": self.player_hand.total,
            "dealer_total": self.dealer_hand.total,
        }
        if self.outcome == Outcome.WIN:
            self.events.emit_new(EventType.PLAYER_WINS, **totals)
        elif self.outcome == Outcome.LOSE:
            self.events.emit_new(EventType.PLAYER_LOSES, **totals)
        else:
            self.events.emit_new(EventType.PUSH, **totals)

        self.events.emit_new(EventType.GAME_ENDED, outcome=self.outcome, **totals)
        logger.info(
            "Game resolved: %s (player %d, dealer %d)",
            self.outcome.name,
            self.player_hand.total,
            self.dealer_hand.total,
        )
        return True

    def _deal_card_to_hand(self, hand: Hand) -> Card:
        """Deal a card to a hand."""
        card = self.deck.deal_card()
        hand.add_card(card)
        owner = "dealer" if hand is self.dealer_hand else "player"
        logger.debug("Dealt %s to %s, total now %d", card, owner, hand.total)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand=owner,
            hand_value=hand.total,
        )
        return card

    def _reject(self, message: str) -> None:
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=message,
            state=self.state.name,
        )

    def _log_state_change(self) -> None:
        logger.debug("Game state is now %s", self.state)

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == GameState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == GameState.PLAYER_TURN
