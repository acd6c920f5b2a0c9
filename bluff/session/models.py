"""
Bluff - Chat Update Models

Pydantic models that mirror the chat API update schema the bot consumes.
"""

from pydantic import BaseModel, Field


class User(BaseModel):
    """A chat user or bot."""

    id: int
    first_name: str
    last_name: str | None = None
    username: str | None = None

    model_config = {"from_attributes": True}


class Chat(BaseModel):
    """A private chat, group, supergroup or channel."""

    id: int
    type: str = "private"
    title: str | None = None

    model_config = {"from_attributes": True}


class Message(BaseModel):
    """An incoming message. ``from`` is exposed as ``from_user``."""

    message_id: int
    date: int = 0
    chat: Chat
    from_user: User | None = Field(default=None, alias="from")
    text: str | None = None

    model_config = {"from_attributes": True, "populate_by_name": True}


class Update(BaseModel):
    """An incoming update; only message updates are handled."""

    update_id: int
    message: Message | None = None

    model_config = {"from_attributes": True}
