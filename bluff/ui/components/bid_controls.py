"""Bid controls - suggested bids, free bid picker and Challenge."""

from __future__ import annotations

import streamlit as st

from bluff.engine.base import Bid, Dice
from bluff.engine.codec import suggest_bids
from bluff.session.formatting import dice_text


def render_bid_controls(current_bid: Bid, total_dice: int, columns: int = 4) -> tuple[str, Bid | None] | None:
    """Render the acting player's options.

    Args:
        current_bid: The standing bid (zero bid at round start).
        total_dice: Dice in play, the upper bound of the count picker.
        columns: Number of suggested bid buttons.

    Returns:
        ``("bid", bid)``, ``("challenge", None)`` or ``None`` if no action taken.
        Returned bids are not yet attributed to a player.
    """
    cols = st.columns(columns)
    for col, bid in zip(cols, suggest_bids(current_bid, columns)):
        with col:
            if st.button(
                f"{bid.count} × {dice_text(bid.dice)}",
                key=f"btn_suggest_{bid.count}_{bid.dice.name}",
                use_container_width=True,
            ):
                return ("bid", bid)

    with st.form("free_bid"):
        count_col, face_col = st.columns(2)
        with count_col:
            count = st.number_input("Count", min_value=1, max_value=max(total_dice, 1), value=1, step=1)
        with face_col:
            face = st.selectbox("Dice", list(Dice), format_func=dice_text)
        if st.form_submit_button("Bid", use_container_width=True, type="primary"):
            return ("bid", Bid(dice=face, count=int(count)))

    if st.button(
        "Challenge",
        key="btn_challenge",
        use_container_width=True,
        disabled=not current_bid.is_placed,
    ):
        return ("challenge", None)

    return None
