"""Event types."""

from __future__ import annotations

from dataclasses import dataclass

from .messages import Message


@dataclass
class MessageAddedEvent:
    source: str
    message: Message
    type: str = "message_added"


@dataclass
class ProcessingChangedEvent:
    source: str
    is_processing: bool
    type: str = "processing_changed"


@dataclass
class ToolCallStartEvent:
    source: str
    tool_call_id: str
    name: str
    arguments: dict | None = None
    type: str = "tool:call_start"


@dataclass
class ToolCallEndEvent:
    source: str
    tool_call_id: str
    name: str
    result: str
    is_error: bool = False
    duration_ms: int = 0
    type: str = "tool:call_end"


AgentEvent = (
    MessageAddedEvent
    | ProcessingChangedEvent
    | ToolCallStartEvent
    | ToolCallEndEvent
)
