"""
Bluff - Chat Bot

Turns chat commands into game operations and game outcomes into chat replies.
One game is played per chat; players join through a private chat with the bot
and receive their hands there.

Rule violations are answered in the chat they came from. An
``EngineInvariantError`` is not a rule violation and propagates to the caller.
"""

from __future__ import annotations

import logging
from typing import Callable

from bluff.config.settings import Settings, get_settings
from bluff.engine.base import Bid, GameState, PlayerInfo
from bluff.engine.errors import GameError
from bluff.engine.game import BluffGame
from bluff.session.formatting import (
    BID_BUTTON_TEXT,
    GAME_NAME,
    bid_keyboard,
    bid_text,
    challenge_text,
    hand_text,
    parse_dice,
    status_text,
    turn_text,
)
from bluff.session.models import Message, Update
from bluff.session.registry import Session, SessionExists, SessionRegistry
from bluff.session.sender import MessageSender

logger = logging.getLogger(__name__)

START_CMD = "/start"
STOP_CMD = "/stop"
BEGIN_CMD = "/begin"
BID_CMD = "/bid"
CHALLENGE_CMD = "/challenge"

NO_GAME = "No game started in this chat"


class BluffBot:
    """Dispatches chat updates to the game played in each chat."""

    def __init__(
        self,
        username: str,
        sender: MessageSender,
        settings: Settings | None = None,
        registry: SessionRegistry | None = None,
    ) -> None:
        self.username = username
        self.sender = sender
        self.settings = settings or get_settings()
        self.registry = registry or SessionRegistry(
            lambda: BluffGame(config=self.settings.game_config())
        )
        self._handlers: dict[str, Callable[[list[str], Message], None]] = {
            START_CMD: self._on_start,
            STOP_CMD: self._on_stop,
            BEGIN_CMD: self._on_begin,
            BID_CMD: self._on_bid,
            BID_BUTTON_TEXT: self._on_bid,
            CHALLENGE_CMD: self._on_challenge,
        }

    def handle_update(self, update: Update) -> None:
        """Handle one incoming update."""
        msg = update.message
        if msg is None or msg.text is None or msg.from_user is None:
            logger.debug("Ignoring update %d without a user text message", update.update_id)
            return

        parts = msg.text.split()
        if not parts:
            return
        cmd_name = parts[0].removesuffix(f"@{self.username}")
        handler = self._handlers.get(cmd_name)
        if handler is None:
            self.sender.send_message(msg.chat.id, f"Unknown command: {cmd_name}")
            return

        logger.debug("Chat %d: %s from %d", msg.chat.id, cmd_name, msg.from_user.id)
        handler(parts[1:], msg)

    # -- Commands --------------------------------------------------------

    def _on_start(self, params: list[str], msg: Message) -> None:
        if not params:
            self._open_game(msg)
        else:
            self._join_game(params[0], msg)

    def _open_game(self, msg: Message) -> None:
        try:
            self.registry.create(msg.chat.id, msg.chat.title)
        except SessionExists as exc:
            self.sender.send_message(msg.chat.id, str(exc))
            return

        link = self.settings.join_link.format(username=self.username, session_id=msg.chat.id)
        response = (
            f"Starting a new game of {GAME_NAME}! "
            "Use the below link and click the START button in the opened chat window to join the game. "
            f"Once everyone has joined, send {BEGIN_CMD} command to begin the game."
            f"\n\n{link}"
        )
        self.sender.send_message(msg.chat.id, response)

    def _join_game(self, param: str, msg: Message) -> None:
        try:
            game_id = int(param)
        except ValueError:
            self.sender.send_message(msg.chat.id, f"Invalid game ID: {param}")
            return

        session = self.registry.get(game_id)
        if session is None:
            self.sender.send_message(msg.chat.id, f"Invalid game ID: {game_id}")
            return

        user = msg.from_user
        with session.lock:
            try:
                session.game.add_player(PlayerInfo(id=user.id, name=user.first_name))
            except GameError as exc:
                self.sender.send_message(msg.chat.id, str(exc))
                return
        self.sender.send_message(game_id, f"{user.first_name} joined")

    def _on_stop(self, params: list[str], msg: Message) -> None:
        if msg.chat.id in self.registry:
            self._finish_game(msg.chat.id, "Game ended")
        else:
            self.sender.send_message(msg.chat.id, NO_GAME)

    def _on_begin(self, params: list[str], msg: Message) -> None:
        session = self.registry.get(msg.chat.id)
        if session is None:
            self.sender.send_message(msg.chat.id, NO_GAME)
            return

        with session.lock:
            try:
                session.game.start_game()
            except GameError as exc:
                self.sender.send_message(msg.chat.id, str(exc))
                return

            response = (
                "The game begins. All the players should have now received "
                "their first round hand from me as a private message."
                f"\n\nSend \"{BID_CMD} count dice\" command to make a bid. "
                f"Use \"*\" for wild. For example, to make a bid of five wilds, send command \"{BID_CMD} 5 *\"."
                f"\n\nSend {CHALLENGE_CMD} command to challenge current bid."
                f"\n\n{turn_text(session.game)}"
            )
            self._begin_round(session, response)

    def _on_bid(self, params: list[str], msg: Message) -> None:
        session = self.registry.get(msg.chat.id)
        if session is None:
            self.sender.send_message(msg.chat.id, NO_GAME)
            return

        if len(params) != 2:
            self.sender.send_message(msg.chat.id, f"Send \"{BID_CMD} count dice\" command to make a bid.")
            return

        try:
            count = int(params[0])
        except ValueError:
            self.sender.send_message(msg.chat.id, f"Invalid count: {params[0]}")
            return

        try:
            dice = parse_dice(params[1])
        except ValueError as exc:
            self.sender.send_message(msg.chat.id, str(exc))
            return

        bid = Bid(dice=dice, count=count, player_id=msg.from_user.id)
        with session.lock:
            try:
                session.game.bid(bid)
            except GameError as exc:
                self.sender.send_message(msg.chat.id, str(exc))
                return

            self.sender.send_message_with_keyboard(
                msg.chat.id,
                f"{bid_text(msg.from_user.first_name, bid)} {turn_text(session.game)}",
                self._keyboard(session.game),
            )

    def _on_challenge(self, params: list[str], msg: Message) -> None:
        session = self.registry.get(msg.chat.id)
        if session is None:
            self.sender.send_message(msg.chat.id, NO_GAME)
            return

        with session.lock:
            game = session.game
            try:
                result = game.challenge_current_bid(msg.from_user.id)
            except GameError as exc:
                self.sender.send_message(msg.chat.id, str(exc))
                return

            response = f"{challenge_text(result)}\n\n{status_text(game)}\n\n"
            if game.state == GameState.STARTED:
                self._begin_round(session, response + f"Starting next round. {turn_text(game)}")
                return

        response += f"Game finished! {game.winner.name} is the winner!"
        self._finish_game(msg.chat.id, response)

    # -- Helpers ---------------------------------------------------------

    def _keyboard(self, game: BluffGame) -> list[list[str]]:
        return bid_keyboard(
            game.current_bid,
            rows=self.settings.keyboard_rows,
            columns=self.settings.keyboard_columns,
        )

    def _begin_round(self, session: Session, text: str) -> None:
        self.sender.send_message_with_keyboard(session.session_id, text, self._keyboard(session.game))
        self._send_hands(session)

    def _send_hands(self, session: Session) -> None:
        title = session.title or ""
        for player in session.game.players:
            if player.has_dice:
                self.sender.send_message(
                    player.id,
                    f"Your {GAME_NAME} hand in {title}:\n{hand_text(player.hand)}",
                )

    def _finish_game(self, chat_id: int, text: str) -> None:
        self.sender.send_message_and_remove_keyboard(chat_id, text)
        self.registry.close(chat_id)
