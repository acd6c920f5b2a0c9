"""
Bluff - Turn Rotation

Finds the next seated player, in seating order, who still holds dice. The
same scan advances the turn after a bid and probes for the end of the game
after a challenge.
"""

from typing import Sequence

from bluff.engine.base import Player
from bluff.engine.errors import NoEligiblePlayer


def find_next_with_dice(players: Sequence[Player], from_index: int) -> int:
    """
    Index of the next player after ``from_index`` whose hand is not empty.

    The scan wraps around the table but never returns ``from_index`` itself.

    Args:
        players: Players in seating order
        from_index: Index to start after

    Returns:
        Index of the next player with dice

    Raises:
        NoEligiblePlayer: If fewer than two players are seated or nobody
            else holds dice
    """
    n = len(players)
    if n < 2:
        raise NoEligiblePlayer("Couldn't find next player")

    i = (from_index + 1) % n
    while not players[i].has_dice:
        i = (i + 1) % n
        if i == from_index:
            raise NoEligiblePlayer("Couldn't find next player")
    return i


def has_next_with_dice(players: Sequence[Player], from_index: int) -> bool:
    """True if any player other than ``from_index`` still holds dice."""
    try:
        find_next_with_dice(players, from_index)
    except NoEligiblePlayer:
        return False
    return True
