"""Workflow protocol and the shared message-stream plumbing."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Protocol, runtime_checkable

from ..agent import Agent
from ..events import EventBus
from ..providers.models import GeminiModel
from ..types import (
    Message,
    MessageAddedEvent,
    MessageRole,
    ProcessingChangedEvent,
    ProcessResult,
    new_message,
)


class WorkflowType(str, Enum):
    SIMPLE_CHAT = "simple_chat"
    RECIPE_CREATION = "recipe_creation"


@runtime_checkable
class Workflow(Protocol):
    workflow_type: WorkflowType

    @property
    def is_processing(self) -> bool: ...

    async def process_input(self, input_text: str) -> ProcessResult: ...

    def reset(self) -> None: ...

    def set_model(self, model: GeminiModel | str) -> None: ...

    def get_history(self) -> tuple[Message, ...]: ...


class BaseWorkflow:
    """Owns the user-facing message stream for a set of agents.

    Agent events reach the workflow bus when the agents were built on child
    buses of it; filter on ``event.source`` to tell them apart.
    """

    workflow_type: WorkflowType

    def __init__(
        self, workflow_id: str, agents: Sequence[Agent], event_bus: EventBus | None = None
    ) -> None:
        self.id = workflow_id
        self.agents = list(agents)
        self.event_bus = event_bus or EventBus(node_id=workflow_id)
        self._messages: list[Message] = []
        self._processing = False

    @property
    def is_processing(self) -> bool:
        return self._processing

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def get_history(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def reset(self) -> None:
        self._messages.clear()
        for agent in self.agents:
            agent.clear_history()

    def set_model(self, model: GeminiModel | str) -> None:
        for agent in self.agents:
            agent.set_model(model)

    async def process_input(self, input_text: str) -> ProcessResult:
        await self._set_processing(True)
        try:
            return await self._process(input_text)
        finally:
            await self._set_processing(False)

    # -- Override this --

    async def _process(self, input_text: str) -> ProcessResult:
        raise NotImplementedError

    # -- Internals --

    async def _add_user_message(self, content: str) -> Message:
        last = self._messages[-1] if self._messages else None
        message = new_message(self.id, content, MessageRole.USER, after=last)
        await self._append(message)
        return message

    async def _append(self, message: Message) -> None:
        self._messages.append(message)
        await self.event_bus.emit(MessageAddedEvent(source=self.id, message=message))

    async def _set_processing(self, value: bool) -> None:
        if self._processing == value:
            return
        self._processing = value
        await self.event_bus.emit(ProcessingChangedEvent(source=self.id, is_processing=value))
