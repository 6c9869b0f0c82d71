"""Tool handler capability and the shared base implementation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from ..errors import ToolConfigurationError
from ..types import ToolDeclaration, ToolResult

logger = logging.getLogger(__name__)


@runtime_checkable
class ToolHandler(Protocol):
    name: str
    description: str

    def list_tools(self) -> list[ToolDeclaration]: ...
    def supports(self, tool_name: str) -> bool: ...
    async def execute(self, tool_name: str, arguments: dict[str, Any]) -> ToolResult: ...


@dataclass(frozen=True)
class ValidationError:
    tool_name: str
    missing: tuple[str, ...]

    @property
    def message(self) -> str:
        return f"Missing required parameters: {', '.join(self.missing)}"


def validate_arguments(tool: ToolDeclaration, arguments: dict[str, Any]) -> ValidationError | None:
    missing = tuple(p for p in tool.input_schema.required if arguments.get(p) is None)
    if missing:
        return ValidationError(tool_name=tool.name, missing=missing)
    return None


def collect_declarations(handlers: Iterable[ToolHandler]) -> list[ToolDeclaration]:
    """Union of every handler's tools, in handler order. Names must be unique."""
    seen: dict[str, str] = {}
    declarations: list[ToolDeclaration] = []
    for handler in handlers:
        for tool in handler.list_tools():
            if tool.name in seen:
                raise ToolConfigurationError(
                    tool.name,
                    f'Tool "{tool.name}" is declared by both '
                    f'"{seen[tool.name]}" and "{handler.name}"',
                )
            seen[tool.name] = handler.name
            declarations.append(tool)
    return declarations


class BaseToolHandler(ABC):
    """Validates arguments and turns every failure into an error ToolResult.

    Subclasses declare ``tools`` and implement ``_execute``.
    """

    name: str = ""
    description: str = ""

    def __init__(self, tools: Iterable[ToolDeclaration] = ()) -> None:
        self._tools: dict[str, ToolDeclaration] = {t.name: t for t in tools}

    def list_tools(self) -> list[ToolDeclaration]:
        return list(self._tools.values())

    def supports(self, tool_name: str) -> bool:
        return tool_name in self._tools

    def get(self, tool_name: str) -> ToolDeclaration | None:
        return self._tools.get(tool_name)

    async def execute(self, tool_name: str, arguments: dict[str, Any]) -> ToolResult:
        tool = self._tools.get(tool_name)
        if tool is None:
            return ToolResult.error(f"Tool '{tool_name}' not found")

        invalid = validate_arguments(tool, arguments)
        if invalid is not None:
            return ToolResult.error(invalid.message)

        try:
            return await self._execute(tool_name, arguments)
        except Exception as e:
            logger.exception("Tool execution error: %s", tool_name)
            return ToolResult.error(f"Failed: {e}")

    @abstractmethod
    async def _execute(self, tool_name: str, arguments: dict[str, Any]) -> ToolResult:
        raise NotImplementedError
