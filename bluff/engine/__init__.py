"""
Bluff Game Engine.

Pure Python game logic with zero UI/transport dependencies.
Handles admission, dealing, bidding, bid ordering and challenge resolution.
"""

from bluff.engine.base import (
    DICE_PER_PLAYER,
    NO_BID,
    Bid,
    BidClass,
    ChallengeResult,
    Dice,
    GameConfig,
    GameState,
    Hand,
    Player,
    PlayerInfo,
)
from bluff.engine.codec import from_score, is_greater, next_bid, score, suggest_bids
from bluff.engine.errors import (
    AlreadyStarted,
    BidTooLow,
    DuplicatePlayer,
    EngineInvariantError,
    GameError,
    InvalidCount,
    NoBidYet,
    NoEligiblePlayer,
    NotEnoughPlayers,
    NotStarted,
    WrongState,
    WrongTurn,
)
from bluff.engine.game import BluffGame
from bluff.engine.rotation import find_next_with_dice

__all__ = [
    # Data Classes
    "Bid",
    "ChallengeResult",
    "GameConfig",
    "Hand",
    "Player",
    "PlayerInfo",
    "NO_BID",
    "DICE_PER_PLAYER",
    # Enums
    "BidClass",
    "Dice",
    "GameState",
    # Codec
    "from_score",
    "is_greater",
    "next_bid",
    "score",
    "suggest_bids",
    # Rotation
    "find_next_with_dice",
    # Errors
    "AlreadyStarted",
    "BidTooLow",
    "DuplicatePlayer",
    "EngineInvariantError",
    "GameError",
    "InvalidCount",
    "NoBidYet",
    "NoEligiblePlayer",
    "NotEnoughPlayers",
    "NotStarted",
    "WrongState",
    "WrongTurn",
    # Engine
    "BluffGame",
]
