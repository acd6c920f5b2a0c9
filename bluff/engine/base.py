"""
Bluff - Game Engine Base Classes

This module defines the value domain of the game: dice faces, hands, players,
bids and challenge outcomes. Identity and outcome types are immutable (frozen
dataclasses); hands and players are mutable and owned by a single game.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Protocol, Sequence


DICE_PER_PLAYER = 5


class Dice(Enum):
    """
    Faces of a Bluff die.

    The values are ordinals used by the bid scoring formula and must stay
    stable. WILD counts towards every claim.
    """
    WILD = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5


class GameState(Enum):
    """Lifecycle of a game. Transitions only move forward."""
    NOT_STARTED = "not_started"  # players can still be added
    STARTED = "started"          # bids and challenges can be made
    FINISHED = "finished"        # one player has dice left: the winner


class BidClass(Enum):
    """Classification of a challenged bid."""
    LOW_BID = "low_bid"      # more dice than bid, challenger loses
    EXACT_BID = "exact_bid"  # exactly right, everyone but the bidder loses one
    HIGH_BID = "high_bid"    # fewer dice than bid, bidder loses


class RandomSource(Protocol):
    """Anything with ``randrange``: ``random.Random`` or the ``random`` module."""

    def randrange(self, stop: int) -> int: ...


def roll_die(rng: RandomSource) -> Dice:
    """Draw one face uniformly from all six faces, wild included."""
    return Dice(rng.randrange(len(Dice)))


@dataclass(frozen=True)
class PlayerInfo:
    """
    Identity of a participant.

    Attributes:
        id: Unique id, stable for the whole session
        name: Display name
    """
    id: int
    name: str


@dataclass
class Hand:
    """
    A player's private dice.

    Order is not significant, only the count per face matters. The number of
    dice never grows once dealt.
    """
    dice: list[Dice] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.dice)

    def __iter__(self) -> Iterator[Dice]:
        return iter(self.dice)

    @classmethod
    def of(cls, faces: Sequence[Dice]) -> "Hand":
        """Create a hand holding the given faces."""
        return cls(dice=list(faces))

    @classmethod
    def deal(cls, size: int, rng: RandomSource) -> "Hand":
        """Create a hand of ``size`` freshly rolled dice."""
        hand = cls(dice=[Dice.WILD] * size)
        hand.reroll(rng)
        return hand

    def reroll(self, rng: RandomSource) -> None:
        """Give every die a new random face. The hand size is unchanged."""
        self.dice = [roll_die(rng) for _ in self.dice]

    def lose(self, n: int) -> int:
        """
        Remove up to ``n`` dice.

        Removing more dice than the hand holds empties it.

        Returns:
            Number of dice actually removed
        """
        removed = min(max(n, 0), len(self.dice))
        self.dice = self.dice[removed:]
        return removed

    def count(self, face: Dice) -> int:
        """Count dice showing ``face`` or WILD. A wild die is counted once."""
        return sum(1 for d in self.dice if d == face or d == Dice.WILD)


@dataclass
class Player:
    """A seated participant and their hand."""
    info: PlayerInfo
    hand: Hand = field(default_factory=Hand)

    @property
    def id(self) -> int:
        return self.info.id

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def has_dice(self) -> bool:
        return len(self.hand) > 0


@dataclass(frozen=True)
class Bid:
    """
    A claim that at least ``count`` dice show ``dice`` (or wild) across all
    hands combined.

    Attributes:
        dice: Claimed face
        count: Claimed number of dice; 0 means no bid has been made
        player_id: Id of the bidding player (None for suggested bids)
    """
    dice: Dice = Dice.ONE
    count: int = 0
    player_id: int | None = None

    @property
    def is_placed(self) -> bool:
        """True when this is a real bid rather than the zero bid."""
        return self.count >= 1

    def by(self, player_id: int) -> "Bid":
        """Return the same claim attributed to ``player_id``."""
        return Bid(dice=self.dice, count=self.count, player_id=player_id)


NO_BID = Bid()


@dataclass(frozen=True)
class ChallengeResult:
    """
    Outcome of challenging the standing bid.

    Attributes:
        result: Whether the bid was low, exact or high
        lost_dice_count: Dice lost by the losing side (per player for EXACT_BID)
        challenged_bid: The bid that was challenged
        bidder: Identity of the player who made the bid
        challenger: Identity of the player who challenged
        actual_count: Revealed number of matching dice, wild included
        revealed_hands: Every player's hand as it was before losses and reroll
    """
    result: BidClass
    lost_dice_count: int
    challenged_bid: Bid
    bidder: PlayerInfo
    challenger: PlayerInfo
    actual_count: int = 0
    revealed_hands: tuple[tuple[PlayerInfo, tuple[Dice, ...]], ...] = ()

    @property
    def round_winner(self) -> PlayerInfo:
        """The side that was right about the bid."""
        if self.result == BidClass.HIGH_BID:
            return self.challenger
        return self.bidder


@dataclass(frozen=True)
class GameConfig:
    """
    Rules configuration for a game session.

    Attributes:
        dice_per_player: Dice dealt to every player when the game starts
        min_players: Players required before the game can start
    """
    dice_per_player: int = DICE_PER_PLAYER
    min_players: int = 2

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.dice_per_player < 1:
            raise ValueError("Each player needs at least one die.")
        if self.min_players < 2:
            raise ValueError("At least two players are needed to play.")
