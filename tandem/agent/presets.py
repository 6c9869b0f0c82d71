"""Preset agents: a general assistant and the recipe/code specialists."""

from __future__ import annotations

from collections.abc import Sequence

from ..events import EventBus
from ..providers.models import GeminiModel
from ..tools import ToolHandler
from ..tools.github import GitHubToolHandler
from ..types import ModelClient
from .core import Agent

RECIPE_START = "=== RECIPE START ==="
RECIPE_END = "=== RECIPE END ==="
CODE_START = "=== CODE START ==="
CODE_END = "=== CODE END ==="

CHEF_PROMPT = f"""\
You are a chef. First ask 3 questions:
1. How many servings?
2. Any dietary restrictions?
3. How much time for cooking?

After getting answers, create recipe in this format:

{RECIPE_START}
RECIPE_NAME: [dish name]
SERVINGS: [number]
COOK_TIME: [minutes]

INGREDIENTS:
- [ingredient with amount]
- [ingredient with amount]

INSTRUCTIONS:
1. [step]
2. [step]
{RECIPE_END}

Rules: Ask questions first. When you have answers, use the exact format above."""

NUTRITIONIST_PROMPT = """\
You are a nutritionist. Analyze recipes and provide:

1. **Calories per serving**: [estimate]
2. **Main nutrients**: Protein, carbs, fats (in grams)
3. **Health rating**: 1-10 scale with reason
4. **Allergens**: List any (gluten, dairy, nuts, etc.)
5. **Diet compatibility**: Vegetarian? Keto? Gluten-free?
6. **Recommendations**: Any healthier substitutions

Keep analysis clear and practical."""

CODER_PROMPT = f"""\
You are a coder. First ask these questions:
1. What is the programming language?
2. What are the requirements?
3. Any specific libraries or frameworks to use?

After getting answers, provide the code in this format:

{CODE_START}
LANGUAGE: [programming language]

[code]
{CODE_END}

Rules: Ask questions first. When you have answers, use the exact format above."""


def create_chat_agent(
    client: ModelClient,
    handlers: Sequence[ToolHandler] | None = None,
    model: GeminiModel | str | None = None,
    event_bus: EventBus | None = None,
) -> Agent:
    """General assistant. Gets the GitHub tools unless ``handlers`` is given."""
    if handlers is None:
        handlers = [GitHubToolHandler()]
    return Agent(
        client,
        agent_id="chat-agent",
        display_name="Assistant",
        handlers=handlers,
        model=model,
        event_bus=event_bus,
    )


def create_chef_agent(
    client: ModelClient, model: GeminiModel | str | None = None, event_bus: EventBus | None = None
) -> Agent:
    return Agent(
        client,
        agent_id="chef-agent",
        display_name="Chef Assistant",
        system_instruction=CHEF_PROMPT,
        model=model,
        event_bus=event_bus,
    )


def create_nutritionist_agent(
    client: ModelClient, model: GeminiModel | str | None = None, event_bus: EventBus | None = None
) -> Agent:
    return Agent(
        client,
        agent_id="nutritionist-agent",
        display_name="Nutritionist Expert",
        system_instruction=NUTRITIONIST_PROMPT,
        model=model,
        event_bus=event_bus,
    )


def create_coder_agent(
    client: ModelClient, model: GeminiModel | str | None = None, event_bus: EventBus | None = None
) -> Agent:
    return Agent(
        client,
        agent_id="coder-agent",
        display_name="Coder Assistant",
        system_instruction=CODER_PROMPT,
        model=model,
        event_bus=event_bus,
    )
