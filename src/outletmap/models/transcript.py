"""Chat transcript models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Sender(StrEnum):
    BOT = "bot"
    USER = "user"


class ChatMessage(BaseModel):
    """A transcript entry.

    ``outlets`` lists outlet names rendered as clickable buttons under
    the message text; it is empty for plain messages.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    text: str
    sender: Sender
    outlets: tuple[str, ...] = ()

    @classmethod
    def bot(cls, text: str, outlets: tuple[str, ...] | list[str] = ()) -> ChatMessage:
        return cls(text=text, sender=Sender.BOT, outlets=tuple(outlets))

    @classmethod
    def user(cls, text: str) -> ChatMessage:
        return cls(text=text, sender=Sender.USER)
