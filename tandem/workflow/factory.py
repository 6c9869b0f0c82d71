"""Build a workflow by type."""

from __future__ import annotations

from collections.abc import Sequence

from ..agent import create_chat_agent
from ..events import EventBus
from ..providers.models import GeminiModel
from ..tools import ToolHandler
from ..types import ModelClient
from .base import BaseWorkflow, WorkflowType
from .recipe import RecipeCreationWorkflow
from .simple import SimpleChatWorkflow


def create_workflow(
    workflow_type: WorkflowType | str,
    client: ModelClient,
    model: GeminiModel | str | None = None,
    handlers: Sequence[ToolHandler] | None = None,
    event_bus: EventBus | None = None,
) -> BaseWorkflow:
    """``handlers`` applies to the chat agent; ``None`` attaches the GitHub tools."""
    workflow_type = WorkflowType(workflow_type)
    if workflow_type is WorkflowType.RECIPE_CREATION:
        return RecipeCreationWorkflow(client, model=model, event_bus=event_bus)

    bus = event_bus or EventBus(node_id="chat-workflow")
    agent = create_chat_agent(
        client, handlers=handlers, model=model, event_bus=bus.create_child("chat-agent")
    )
    return SimpleChatWorkflow(agent, event_bus=bus)
