"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: SETUP → PLAYER_TURN → DEALER_TURN → RESOLVED
    A player bust skips DEALER_TURN.
    """

    # Deck built, nothing dealt yet
    SETUP = auto()

    # Player hits or stands
    PLAYER_TURN = auto()

    # Dealer draws to the threshold
    DEALER_TURN = auto()

    # Outcome decided (terminal)
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
