"""
Bluff - Bid Codec

Maps every bid to a single ordering integer and back. The mapping is a
bijection between bids with ``count >= 1`` and the positive integers:

    count 1:  ONE..FIVE -> 1..5,    WILD x1 -> 6
    count 2:  ONE..FIVE -> 7..11
    count 3:  ONE..FIVE -> 12..16,  WILD x2 -> 17
    ...

A wild bid of count k sits just above the numbered bids of count 2k - 1,
because a wild die counts towards every numbered claim.
"""

from bluff.engine.base import NO_BID, Bid, Dice

# Scores per block of two counts: ten numbered bids plus one wild bid.
_WILD_STEP = 11
_FACES = 5


def score(bid: Bid) -> int:
    """
    Ordering integer of a bid.

    Args:
        bid: Bid to score

    Returns:
        0 for the zero bid, otherwise a positive integer
    """
    if bid.count <= 0:
        return 0
    if bid.dice == Dice.WILD:
        return 6 + (bid.count - 1) * _WILD_STEP
    # leave room for the wild bids
    stars = bid.count // 2
    return (bid.count - 1) * _FACES + bid.dice.value + stars


def from_score(value: int) -> Bid:
    """
    Bid with the given ordering integer; exact inverse of :func:`score`.

    Args:
        value: Ordering integer

    Returns:
        The zero bid for ``value <= 0``, otherwise the bid scoring ``value``
    """
    if value <= 0:
        return NO_BID
    stars, rem = divmod(value + 5, _WILD_STEP)
    if rem == 0:
        return Bid(dice=Dice.WILD, count=stars)
    count, face = divmod(value - stars - 1, _FACES)
    return Bid(dice=Dice(face + 1), count=count + 1)


def is_greater(b1: Bid, b2: Bid) -> bool:
    """True if ``b1`` strictly outranks ``b2``. Equal bids never do."""
    return score(b1) > score(b2)


def next_bid(bid: Bid) -> Bid:
    """Lowest bid that outranks ``bid``."""
    return from_score(score(bid) + 1)


def suggest_bids(bid: Bid, n: int) -> list[Bid]:
    """
    The ``n`` lowest bids that outrank ``bid``, in increasing order.

    Args:
        bid: Bid to outrank (the zero bid suggests opening bids)
        n: Number of suggestions

    Returns:
        List of unattributed bids
    """
    base = score(bid)
    return [from_score(base + i) for i in range(1, n + 1)]
