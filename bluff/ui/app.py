"""Bluff - Streamlit hot-seat table."""

from __future__ import annotations

import logging

import streamlit as st

from bluff.config.settings import configure_logging, get_settings, seed_random
from bluff.engine.base import GameState, PlayerInfo
from bluff.engine.errors import GameError
from bluff.engine.game import BluffGame
from bluff.session.formatting import challenge_text, hand_text, status_text
from bluff.ui.components import render_bid_controls, render_scoreboard

logger = logging.getLogger(__name__)

_RULES = """\
**Goal:** Be the last player holding dice!

**Bidding:**
- Bid how many dice of one face lie on the whole table
- **\\*** is wild and counts towards every face
- Each bid must outrank the last: more dice, or a higher face
- A wild bid counts about double

**Challenge:**
- Too few dice → the bidder loses the difference
- Too many dice → the challenger loses the difference
- Exactly right → everyone but the bidder loses one die
"""

_CSS = """
<style>
.scoreboard .player-row { display: flex; justify-content: space-between; padding: 0.2rem 0.5rem; }
.scoreboard .player-row.active { font-weight: bold; }
.scoreboard .player-row.out { opacity: 0.4; text-decoration: line-through; }
.scoreboard-title { font-size: 1.1rem; margin-bottom: 0.4rem; }
</style>
"""


@st.cache_resource
def _bootstrap() -> bool:
    """Process-wide setup, run once per server process."""
    settings = get_settings()
    configure_logging(settings)
    seed_random(settings)
    logger.info("Bluff table ready")
    return True


def _new_game() -> None:
    ss = st.session_state
    ss["game"] = BluffGame(config=get_settings().game_config())
    ss["last_result"] = None
    ss["next_player_id"] = 1


def _render_lobby(game: BluffGame) -> None:
    st.subheader("Seat the players")
    with st.form("add_player", clear_on_submit=True):
        name = st.text_input("Name", max_chars=30)
        if st.form_submit_button("Add player") and name.strip():
            player_id = st.session_state["next_player_id"]
            try:
                game.add_player(PlayerInfo(id=player_id, name=name.strip()))
            except GameError as exc:
                st.error(str(exc))
            else:
                st.session_state["next_player_id"] = player_id + 1

    for player in game.players:
        st.markdown(f"- {player.name}")

    if st.button("Begin", type="primary", use_container_width=True):
        try:
            game.start_game()
        except GameError as exc:
            st.error(str(exc))
        else:
            st.rerun()


def _render_table(game: BluffGame) -> None:
    ss = st.session_state
    render_scoreboard(game)

    if ss.get("last_result") is not None:
        with st.expander("Last challenge", expanded=True):
            st.text(challenge_text(ss["last_result"]))

    player = game.current_player
    st.subheader(f"{player.name}'s turn")
    if st.toggle("Show my hand", key=f"show_hand_{player.id}"):
        st.markdown(f"## {hand_text(player.hand)}")

    action = render_bid_controls(game.current_bid, game.total_dice)
    if action is None:
        return

    kind, bid = action
    try:
        if kind == "bid":
            game.bid(bid.by(player.id))
        else:
            ss["last_result"] = game.challenge_current_bid(player.id)
    except GameError as exc:
        st.error(str(exc))
        return
    st.rerun()


def _render_results(game: BluffGame) -> None:
    result = st.session_state.get("last_result")
    if result is not None:
        st.text(challenge_text(result))
    st.text(status_text(game))
    st.success(f"Game finished! {game.winner.name} is the winner!")
    if st.button("New game", type="primary", use_container_width=True):
        _new_game()
        st.rerun()


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Bluff",
        page_icon="🎲",
        layout="centered",
    )
    _bootstrap()
    st.markdown(_CSS, unsafe_allow_html=True)

    if "game" not in st.session_state:
        _new_game()
    game: BluffGame = st.session_state["game"]

    st.title("Bluff")
    if game.state == GameState.NOT_STARTED:
        _render_lobby(game)
    elif game.state == GameState.STARTED:
        _render_table(game)
    else:
        _render_results(game)

    with st.sidebar:
        st.markdown("### Rules")
        st.markdown(_RULES)


if __name__ == "__main__":
    main()
