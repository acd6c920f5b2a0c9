"""Scoreboard component - dice left per player and turn indicator."""

from __future__ import annotations

import streamlit as st

from bluff.engine.game import BluffGame
from bluff.session.formatting import bid_text


def render_scoreboard(game: BluffGame) -> None:
    """Render the table: every player's dice count and the standing bid."""
    html = ['<div class="scoreboard">']
    html.append(f'<div class="scoreboard-title">Table &mdash; {game.total_dice} dice in play</div>')

    for idx, player in enumerate(game.players):
        is_active = idx == game.turn_idx
        row_classes = ["player-row"]
        if is_active:
            row_classes.append("active")
        if not player.has_dice:
            row_classes.append("out")

        indicator = "&#9876; " if is_active else ""
        html.append(
            f'<div class="{" ".join(row_classes)}">'
            f'<span class="name">{indicator}{player.name}</span>'
            f'<span class="score">{len(player.hand)} dice</span>'
            f"</div>"
        )

    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)

    bid = game.current_bid
    if bid.is_placed:
        bidder = game.players[game.index_of(bid.player_id)]
        st.caption(bid_text(bidder.name, bid))
    else:
        st.caption("No bid yet this round.")
