"""Agents and their preset constructors."""

from .core import FORMAT_TOOL_RESULT_PROMPT, Agent, AgentState
from .presets import (
    create_chat_agent,
    create_chef_agent,
    create_coder_agent,
    create_nutritionist_agent,
)

__all__ = [
    "Agent",
    "AgentState",
    "FORMAT_TOOL_RESULT_PROMPT",
    "create_chat_agent",
    "create_chef_agent",
    "create_nutritionist_agent",
    "create_coder_agent",
]
