"""Model client types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Protocol, runtime_checkable

from .messages import ConversationTurn, TokenUsage
from .tools import ToolDeclaration, ToolInvocation

ToolMode = Literal["AUTO", "ANY", "NONE"]


@dataclass(frozen=True)
class ToolConfig:
    mode: ToolMode = "AUTO"


@dataclass
class GenerationParams:
    prompt: str
    model: str | None
    history: list[ConversationTurn] = field(default_factory=list)
    system_instruction: str | None = None
    tools: list[ToolDeclaration] | None = None
    tool_config: ToolConfig | None = None


@dataclass
class GenerationResult:
    """Either direct content or exactly one tool invocation."""

    content: str | None = None
    usage: TokenUsage | None = None
    tool_invocation: ToolInvocation | None = None


@runtime_checkable
class ModelClient(Protocol):
    async def generate(self, params: GenerationParams) -> GenerationResult: ...
