"""
Bluff - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random
from typing import Callable, Sequence

import pytest

from bluff.engine.base import NO_BID, Bid, Dice, GameState, Hand, Player, PlayerInfo
from bluff.engine.game import BluffGame


class FixedRng:
    """Random source that always rolls the same face."""

    def __init__(self, face: Dice = Dice.FIVE) -> None:
        self.face = face
        self.calls = 0

    def randrange(self, stop: int) -> int:
        self.calls += 1
        return self.face.value


# =============================================================================
# RANDOMNESS
# =============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible deals."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng() -> FixedRng:
    """Random source whose rolls are always FIVE."""
    return FixedRng(Dice.FIVE)


# =============================================================================
# PLAYERS
# =============================================================================

@pytest.fixture
def alice() -> PlayerInfo:
    return PlayerInfo(id=42, name="Alice")


@pytest.fixture
def bob() -> PlayerInfo:
    return PlayerInfo(id=43, name="Bob")


@pytest.fixture
def carl() -> PlayerInfo:
    return PlayerInfo(id=44, name="Carl")


# =============================================================================
# GAME STATE FIXTURES
# =============================================================================

@pytest.fixture
def started_game(rng, alice, bob) -> BluffGame:
    """Two-player game, dealt and waiting for Alice's opening bid."""
    game = BluffGame(rng=rng)
    game.add_player(alice)
    game.add_player(bob)
    game.start_game()
    return game


@pytest.fixture
def three_player_game(rng, alice, bob, carl) -> BluffGame:
    """Three-player game, dealt and waiting for Alice's opening bid."""
    game = BluffGame(rng=rng)
    for info in (alice, bob, carl):
        game.add_player(info)
    game.start_game()
    return game


@pytest.fixture
def make_game(fixed_rng) -> Callable[..., BluffGame]:
    """
    Build a started game with known hands.

    Usage:
        make_game([(1, "A", [Dice.ONE]), (2, "B", [Dice.TWO])], turn_idx=1,
                  bid=Bid(Dice.ONE, 1, player_id=1))
    """
    def _make(
        seats: Sequence[tuple[int, str, Sequence[Dice]]],
        turn_idx: int = 0,
        bid: Bid = NO_BID,
    ) -> BluffGame:
        game = BluffGame(rng=fixed_rng)
        game.state = GameState.STARTED
        game.players = [
            Player(info=PlayerInfo(id=pid, name=name), hand=Hand.of(faces))
            for pid, name, faces in seats
        ]
        game.turn_idx = turn_idx
        game.current_bid = bid
        return game

    return _make
