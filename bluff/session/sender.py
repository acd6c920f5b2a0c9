"""Outgoing message interface implemented by the chat transport."""

from typing import Protocol

Keyboard = list[list[str]]


class MessageSender(Protocol):
    """Sends bot replies to chats."""

    def send_message(self, chat_id: int, text: str) -> None: ...

    def send_message_with_keyboard(self, chat_id: int, text: str, keyboard: Keyboard) -> None: ...

    def send_message_and_remove_keyboard(self, chat_id: int, text: str) -> None: ...
