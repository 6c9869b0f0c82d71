"""Core type definitions: re-exported from sub-modules."""

from .tools import SchemaProperty, ToolSchema, ToolDeclaration, ToolInvocation, ToolResult, ToolResponse
from .messages import (
    Message, MessageRole, TokenUsage, ConversationTurn, TextPart, Part,
    ROLE_USER, ROLE_MODEL, ROLE_TOOL, to_turns, new_message,
)
from .llm import ToolConfig, ToolMode, GenerationParams, GenerationResult, ModelClient
from .results import ProcessResult
from .events import (
    AgentEvent, MessageAddedEvent, ProcessingChangedEvent,
    ToolCallStartEvent, ToolCallEndEvent,
)

__all__ = [
    "SchemaProperty", "ToolSchema", "ToolDeclaration", "ToolInvocation", "ToolResult", "ToolResponse",
    "Message", "MessageRole", "TokenUsage", "ConversationTurn", "TextPart", "Part",
    "ROLE_USER", "ROLE_MODEL", "ROLE_TOOL", "to_turns", "new_message",
    "ToolConfig", "ToolMode", "GenerationParams", "GenerationResult", "ModelClient",
    "ProcessResult",
    "AgentEvent", "MessageAddedEvent", "ProcessingChangedEvent",
    "ToolCallStartEvent", "ToolCallEndEvent",
]
