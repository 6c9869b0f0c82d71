"""Message types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from .tools import ToolInvocation, ToolResponse


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


@dataclass(frozen=True)
class TokenUsage:
    prompt_tokens: int = 0
    response_tokens: int = 0
    total_tokens: int = 0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Message:
    id: str
    content: str
    role: MessageRole
    timestamp: datetime = field(default_factory=_utcnow)
    token_usage: TokenUsage | None = None
    produced_by: str | None = None


# Turn roles understood by model clients
ROLE_USER = "user"
ROLE_MODEL = "model"
ROLE_TOOL = "tool"

_TURN_ROLES = {
    MessageRole.USER: ROLE_USER,
    MessageRole.ASSISTANT: ROLE_MODEL,
    # the system instruction travels separately; stray system messages read as user text
    MessageRole.SYSTEM: ROLE_USER,
}


@dataclass(frozen=True)
class TextPart:
    text: str


Part = TextPart | ToolInvocation | ToolResponse


@dataclass(frozen=True)
class ConversationTurn:
    role: str
    parts: tuple[Part, ...] = ()

    @classmethod
    def from_message(cls, message: Message) -> ConversationTurn:
        return cls(role=_TURN_ROLES[message.role], parts=(TextPart(message.content),))

    @classmethod
    def tool_call(cls, invocation: ToolInvocation) -> ConversationTurn:
        return cls(role=ROLE_MODEL, parts=(invocation,))

    @classmethod
    def tool_result(cls, response: ToolResponse) -> ConversationTurn:
        return cls(role=ROLE_TOOL, parts=(response,))


def to_turns(messages: list[Message] | tuple[Message, ...]) -> list[ConversationTurn]:
    return [ConversationTurn.from_message(m) for m in messages]


def new_message(
    source: str,
    content: str,
    role: MessageRole,
    after: Message | None = None,
    **kwargs,
) -> Message:
    """Build a Message with a fresh id, never timestamped before ``after``."""
    now = _utcnow()
    if after is not None and now < after.timestamp:
        now = after.timestamp
    return Message(
        id=f"{source}-{uuid4().hex[:12]}", content=content, role=role, timestamp=now, **kwargs
    )
