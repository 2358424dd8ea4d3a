"""Line-oriented input for the player's decisions."""

from typing import Callable

from blackjack.game.engine import Decision

HIT_OR_STAND_PROMPT = "(h) to hit, or (s) to stand: "

_CHOICES = {
    "h": Decision.HIT,
    "s": Decision.STAND,
}


def request_hit_or_stand(
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> Decision:
    """
    Ask the player to hit or stand until they give a valid answer.

    Args:
        read: Prompt-and-read function (``input`` by default)
        write: Output function for the retry message

    Returns:
        The player's decision

    Raises:
        EOFError: If input runs out before a valid answer
    """
    read = read or input
    write = write or print

    while True:
        answer = read(HIT_OR_STAND_PROMPT).strip().lower()
        if answer in _CHOICES:
            return _CHOICES[answer]
        write("I didn't understand that. Please enter 'h' or 's'.")
