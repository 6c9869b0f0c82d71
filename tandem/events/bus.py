"""Typed event bus: publish/subscribe with parent-child propagation and pattern matching."""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from typing import Awaitable, Callable

from ..types import AgentEvent

logger = logging.getLogger(__name__)

Handler = Callable[[AgentEvent], Awaitable[None] | None]


class EventBus:
    """Observer list for presentation layers. Handlers may be sync or async.

    A child bus forwards every event to its parent, so a workflow bus sees
    what its agents publish.
    """

    def __init__(self, node_id: str | None = None, parent: EventBus | None = None) -> None:
        self.node_id = node_id
        self._parent = parent
        self._handlers: dict[str, list[Handler]] = defaultdict(list)
        self._wildcard: list[Handler] = []

    def create_child(self, node_id: str) -> EventBus:
        return EventBus(node_id=node_id, parent=self)

    def on(self, event_type: str, handler: Handler) -> None:
        self._handlers[event_type].append(handler)

    def on_all(self, handler: Handler) -> None:
        self._wildcard.append(handler)

    def off(self, event_type: str, handler: Handler) -> None:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
        if handler in self._wildcard:
            self._wildcard.remove(handler)

    async def emit(self, event: AgentEvent) -> None:
        event_type = getattr(event, "type", "")
        for h in self._handlers.get(event_type, []) + self._wildcard:
            await self._call(h, event, event_type)
        # 'tool:*' matches 'tool:call_start', etc.
        for pat, handlers in list(self._handlers.items()):
            if not pat.endswith(":*"):
                continue
            if event_type.startswith(pat[:-1]):
                for h in handlers:
                    await self._call(h, event, pat)
        if self._parent:
            await self._parent.emit(event)

    @staticmethod
    async def _call(handler: Handler, event: AgentEvent, label: str) -> None:
        try:
            result = handler(event)
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Event handler error for %s", label)
