"""
Bluff - Message Formatting

Renders game state and challenge outcomes as chat text, parses dice given by
players, and builds the bid suggestion keyboard.
"""

from typing import Iterable

from bluff.engine.base import Bid, BidClass, ChallengeResult, Dice
from bluff.engine.codec import suggest_bids
from bluff.engine.game import BluffGame

GAME_NAME = "Bluff"
BID_BUTTON_TEXT = "Bid"

# Keycap emoji: the character followed by VS16 and the combining keycap
DICE_GLYPHS: dict[Dice, str] = {
    Dice.WILD: "*️⃣",
    Dice.ONE: "1️⃣",
    Dice.TWO: "2️⃣",
    Dice.THREE: "3️⃣",
    Dice.FOUR: "4️⃣",
    Dice.FIVE: "5️⃣",
}

_DICE_ALIASES: dict[str, Dice] = {
    "*": Dice.WILD,
    "1": Dice.ONE,
    "2": Dice.TWO,
    "3": Dice.THREE,
    "4": Dice.FOUR,
    "5": Dice.FIVE,
    **{glyph: face for face, glyph in DICE_GLYPHS.items()},
}


def dice_text(dice: Dice) -> str:
    """Glyph for a die face."""
    return DICE_GLYPHS[dice]


def parse_dice(text: str) -> Dice:
    """
    Parse a die face written as ``*``, ``1``-``5`` or its glyph.

    Raises:
        ValueError: If the text names no face
    """
    try:
        return _DICE_ALIASES[text]
    except KeyError:
        raise ValueError(f"Unknown dice: {text}") from None


def hand_text(hand: Iterable[Dice]) -> str:
    """Glyphs of every die in a hand."""
    return "".join(dice_text(d) for d in hand)


def bid_text(name: str, bid: Bid) -> str:
    return f"{name} bid {bid.count} {dice_text(bid.dice)}s."


def turn_text(game: BluffGame) -> str:
    return f"It's {game.current_player.name}'s turn."


def status_text(game: BluffGame) -> str:
    """Dice count per player and in total."""
    lines = ["Game status:"]
    lines.extend(f"{p.name} {len(p.hand)} dice" for p in game.players)
    lines.append(f"Total {game.total_dice} dice")
    return "\n".join(lines)


def challenge_text(result: ChallengeResult) -> str:
    """Revealed hands followed by who lost how many dice."""
    lines = [
        f"{info.name}: {hand_text(hand)}"
        for info, hand in result.revealed_hands
        if hand
    ]
    bidder = result.bidder.name
    n = result.lost_dice_count
    if result.result == BidClass.LOW_BID:
        outcome = f"{bidder}'s bid was good. {result.challenger.name} loses {n} dice."
    elif result.result == BidClass.EXACT_BID:
        outcome = f"{bidder}'s bid was exactly right! Everyone else loses {n} dice."
    else:
        outcome = f"{bidder}'s bid was too high. {bidder} loses {n} dice."
    return "\n".join(lines) + "\n\n" + outcome


def bid_button(bid: Bid) -> str:
    """Button label that the bot accepts back as a bid command."""
    return f"{BID_BUTTON_TEXT} {bid.count} {dice_text(bid.dice)}"


def bid_keyboard(current_bid: Bid, rows: int = 4, columns: int = 4) -> list[list[str]]:
    """Grid of the next higher bids, lowest first, row by row."""
    bids = suggest_bids(current_bid, rows * columns)
    return [
        [bid_button(b) for b in bids[row * columns:(row + 1) * columns]]
        for row in range(rows)
    ]
