"""UI components for Bluff."""

from bluff.ui.components.bid_controls import render_bid_controls
from bluff.ui.components.scoreboard import render_scoreboard

__all__ = [
    "render_bid_controls",
    "render_scoreboard",
]
