"""Function-backed tool handler and the define_tool helper."""

from __future__ import annotations

import inspect
import json
from typing import Any, Awaitable, Callable, Mapping

from ..types import SchemaProperty, ToolDeclaration, ToolResult, ToolSchema
from .handler import BaseToolHandler

ToolFn = Callable[..., Any | Awaitable[Any]]


def define_tool(
    name: str,
    description: str,
    properties: Mapping[str, SchemaProperty | tuple[str, str]] | None = None,
    required: tuple[str, ...] | list[str] = (),
) -> ToolDeclaration:
    """Build a declaration; properties may be given as ``(type, description)`` pairs."""
    props = {
        key: value if isinstance(value, SchemaProperty) else SchemaProperty(*value)
        for key, value in (properties or {}).items()
    }
    return ToolDeclaration(
        name=name,
        description=description,
        input_schema=ToolSchema(properties=props, required=tuple(required)),
    )


class FunctionToolHandler(BaseToolHandler):
    """Registry of plain callables, each called with the tool arguments as kwargs."""

    def __init__(self, name: str = "functions", description: str = "Local function tools") -> None:
        super().__init__()
        self.name = name
        self.description = description
        self._fns: dict[str, ToolFn] = {}

    def register(self, tool: ToolDeclaration, fn: ToolFn) -> None:
        self._tools[tool.name] = tool
        self._fns[tool.name] = fn

    def tool(self, name: str, description: str, **kwargs: Any) -> Callable[[ToolFn], ToolFn]:
        def decorator(fn: ToolFn) -> ToolFn:
            self.register(define_tool(name, description, **kwargs), fn)
            return fn
        return decorator

    async def _execute(self, tool_name: str, arguments: dict[str, Any]) -> ToolResult:
        result = self._fns[tool_name](**arguments)
        if inspect.isawaitable(result):
            result = await result
        if isinstance(result, ToolResult):
            return result
        return ToolResult.success(result if isinstance(result, str) else json.dumps(result))
