"""Resolve a model tool invocation to a handler and normalize its result."""

from __future__ import annotations

import json
import logging
import re
import time
from collections.abc import Sequence
from typing import Any

from ..events import EventBus
from ..types import (
    ToolCallEndEvent,
    ToolCallStartEvent,
    ToolInvocation,
    ToolResponse,
    ToolResult,
    ToolSchema,
)
from .handler import ToolHandler

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?")


def coerce_value(value: Any, declared_type: str | None = None) -> Any:
    """Integer, then float, then strict boolean, else the original string."""
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    if not isinstance(value, str):
        return str(value)
    if declared_type == "string":
        return value
    if _INT_RE.fullmatch(value):
        return int(value)
    if _FLOAT_RE.fullmatch(value):
        return float(value)
    if value == "true":
        return True
    if value == "false":
        return False
    return value


def coerce_arguments(arguments: dict[str, Any], schema: ToolSchema | None = None) -> dict[str, Any]:
    return {
        key: coerce_value(value, schema.type_of(key) if schema else None)
        for key, value in arguments.items()
    }


def _schema_for(handler: ToolHandler, tool_name: str) -> ToolSchema | None:
    for tool in handler.list_tools():
        if tool.name == tool_name:
            return tool.input_schema
    return None


class ToolCallBridge:
    def __init__(self, event_bus: EventBus | None = None) -> None:
        self.event_bus = event_bus

    async def execute(
        self, invocation: ToolInvocation, handlers: Sequence[ToolHandler], source: str = ""
    ) -> ToolResponse:
        """``source`` names the caller (usually the agent id) on the emitted tool events."""
        # first match in caller-supplied order
        handler = next((h for h in handlers if h.supports(invocation.name)), None)
        if handler is None:
            logger.warning("No handler found for tool %s", invocation.name)
            return ToolResponse.from_result(
                invocation, ToolResult.error(f"No handler found for tool '{invocation.name}'")
            )

        arguments = coerce_arguments(invocation.arguments, _schema_for(handler, invocation.name))
        await self._emit(ToolCallStartEvent(
            source=source, tool_call_id=invocation.id, name=invocation.name, arguments=arguments,
        ))
        t0 = time.monotonic()
        try:
            result = await handler.execute(invocation.name, arguments)
        except Exception as e:
            logger.exception("Handler %s raised for tool %s", handler.name, invocation.name)
            result = ToolResult.error(f"Failed: {e}")
        dur_ms = int((time.monotonic() - t0) * 1000)

        logger.debug("Tool %s finished in %dms (error=%s)", invocation.name, dur_ms, result.is_error)
        await self._emit(ToolCallEndEvent(
            source=source, tool_call_id=invocation.id, name=invocation.name,
            result=result.content, is_error=result.is_error, duration_ms=dur_ms,
        ))
        return ToolResponse.from_result(invocation, result)

    async def _emit(self, event: Any) -> None:
        if self.event_bus:
            await self.event_bus.emit(event)
