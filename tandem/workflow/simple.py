"""Single-agent pass-through workflow."""

from __future__ import annotations

from ..agent import Agent
from ..events import EventBus
from ..types import ProcessResult
from .base import BaseWorkflow, WorkflowType


class SimpleChatWorkflow(BaseWorkflow):
    workflow_type = WorkflowType.SIMPLE_CHAT

    def __init__(self, agent: Agent, event_bus: EventBus | None = None) -> None:
        super().__init__("chat-workflow", [agent], event_bus)
        self.agent = agent

    async def _process(self, input_text: str) -> ProcessResult:
        await self._add_user_message(input_text)
        result = await self.agent.process(input_text)
        if result.success:
            await self._append(result.unwrap())
        return result
