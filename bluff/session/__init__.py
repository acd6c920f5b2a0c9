"""
Bluff Chat Sessions.

Per-chat game ownership, command handling and reply formatting for playing
Bluff over a chat API.
"""

from bluff.session.bot import BluffBot
from bluff.session.models import Chat, Message, Update, User
from bluff.session.registry import Session, SessionExists, SessionRegistry
from bluff.session.sender import MessageSender

__all__ = [
    "BluffBot",
    "Chat",
    "Message",
    "MessageSender",
    "Session",
    "SessionExists",
    "SessionRegistry",
    "Update",
    "User",
]
