"""Shared fixtures: a scripted model client and a recording tool handler."""

from __future__ import annotations

from typing import Any

import pytest

from tandem.errors import LLMError
from tandem.tools import BaseToolHandler, define_tool
from tandem.types import (
    GenerationParams,
    GenerationResult,
    TokenUsage,
    ToolInvocation,
    ToolResult,
)


def text(content: str, total: int = 0) -> GenerationResult:
    usage = TokenUsage(total_tokens=total) if total else None
    return GenerationResult(content=content, usage=usage)


def tool_call(name: str, **arguments: Any) -> GenerationResult:
    return GenerationResult(tool_invocation=ToolInvocation(name=name, arguments=arguments))


class MockModelClient:
    """Replays scripted results in order and records every request.

    A script entry that is an exception is raised instead of returned.
    """

    def __init__(self, script: list[GenerationResult | Exception] | None = None) -> None:
        self.script = list(script or [])
        self.calls: list[GenerationParams] = []

    async def generate(self, params: GenerationParams) -> GenerationResult:
        self.calls.append(params)
        if not self.script:
            raise LLMError("LLM_EMPTY_RESPONSE", "mock", "script exhausted")
        item = self.script.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class EchoToolHandler(BaseToolHandler):
    """Answers ``echo`` with its message; ``explode`` raises inside _execute."""

    name = "echo"
    description = "test handler"

    def __init__(self) -> None:
        super().__init__((
            define_tool(
                "echo",
                "Echo a message",
                properties={"message": ("string", "text to echo"), "times": ("integer", "")},
                required=["message"],
            ),
            define_tool("explode", "Always fails"),
        ))
        self.received: list[dict] = []

    async def _execute(self, tool_name: str, arguments: dict[str, Any]) -> ToolResult:
        self.received.append(arguments)
        if tool_name == "explode":
            raise RuntimeError("kaboom")
        return ToolResult.success(str(arguments["message"]) * int(arguments.get("times") or 1))


@pytest.fixture
def echo_handler() -> EchoToolHandler:
    return EchoToolHandler()
