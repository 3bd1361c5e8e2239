"""Chat message records exchanged between visitor, assistant and listing agent."""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MessageKind(str, Enum):
    USER = "user"
    BOT = "bot"
    AGENT = "agent"


class Sender(BaseModel):
    """Display identity of a human agent posting into the chat."""

    model_config = ConfigDict(frozen=True)

    name: str
    avatar: Optional[str] = None


class Message(BaseModel):
    """A single message in a session log. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    kind: MessageKind
    text: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    sender: Optional[Sender] = None

    @model_validator(mode="after")
    def _agent_needs_sender(self) -> "Message":
        if self.kind == MessageKind.AGENT and self.sender is None:
            raise ValueError("agent messages require a sender")
        return self


def user_message(text: str) -> Message:
    return Message(kind=MessageKind.USER, text=text)


def bot_message(text: str) -> Message:
    return Message(kind=MessageKind.BOT, text=text)


def agent_message(text: str, agent_name: str, avatar: Optional[str] = None) -> Message:
    return Message(
        kind=MessageKind.AGENT,
        text=text,
        sender=Sender(name=agent_name, avatar=avatar),
    )
