"""Turns game events into console lines."""

from typing import Callable

from blackjack.hand import Outcome
from blackjack.game.events import EventType, GameEvent

RESULT_MESSAGES: dict[Outcome, str] = {
    Outcome.WIN: "You win!",
    Outcome.LOSE: "You lose!",
    Outcome.TIE: "It's a tie.",
}


class ConsoleRenderer:
    """
    Event subscriber that narrates a game.

    Subscribe an instance to all events of a BlackjackGame:
        game.subscribe(ConsoleRenderer())
    """

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write
        self._dealt: dict[str, list[str]] = {"player": [], "dealer": []}

    def __call__(self, event: GameEvent) -> None:
        etype = event.event_type
        data = event.data

        if etype == EventType.CARD_DEALT:
            self._on_card_dealt(data["hand"], data["card"], data["hand_value"])
        elif etype == EventType.PLAYER_STAND and data.get("automatic"):
            self._write(f"You have {data['hand_value']}, standing.")
        elif etype == EventType.PLAYER_BUSTS:
            self._write("You went bust!")
        elif etype == EventType.DEALER_BUSTS:
            self._write("The dealer went bust!")
        elif etype == EventType.GAME_ENDED:
            self._write(RESULT_MESSAGES[data["outcome"]])

    def _on_card_dealt(self, owner: str, card: str, total: int) -> None:
        dealt = self._dealt[owner]
        dealt.append(card)

        if owner == "dealer":
            if len(dealt) == 1:
                self._write(f"The dealer is showing {card}: {total}")
            else:
                self._write(f"The dealer flips a {card}. They now have: {total}")
        elif len(dealt) == 2:
            self._write(f"You are showing {' '.join(dealt)}: {total}")
        elif len(dealt) > 2:
            self._write(f"You were dealt {card}. You now have: {total}")
