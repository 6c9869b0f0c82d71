"""Chef produces a recipe, nutritionist analyzes it."""

from __future__ import annotations

from ..agent import Agent, create_chef_agent, create_nutritionist_agent
from ..events import EventBus
from ..providers.models import GeminiModel
from ..types import ModelClient
from .base import WorkflowType
from .markers import RECIPE_MARKER
from .pipeline import ArtifactPipelineWorkflow

NUTRITION_ANALYSIS_PROMPT = """\
Please analyze the following recipe that was created based on this user request:

User Request: "{request}"

Recipe:
{recipe}

Provide a comprehensive nutritional analysis including calories, macronutrients,
allergens, health benefits, and dietary compatibility."""


def build_nutrition_prompt(request: str, recipe: str) -> str:
    return NUTRITION_ANALYSIS_PROMPT.format(request=request, recipe=recipe)


class RecipeCreationWorkflow(ArtifactPipelineWorkflow):
    def __init__(
        self,
        client: ModelClient,
        model: GeminiModel | str | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        bus = event_bus or EventBus(node_id="recipe-workflow")
        super().__init__(
            producer=create_chef_agent(client, model, bus.create_child("chef-agent")),
            analyzer=create_nutritionist_agent(client, model, bus.create_child("nutritionist-agent")),
            marker=RECIPE_MARKER,
            build_analysis_prompt=build_nutrition_prompt,
            workflow_type=WorkflowType.RECIPE_CREATION,
            workflow_id="recipe-workflow",
            event_bus=bus,
        )

    @property
    def chef(self) -> Agent:
        return self.producer

    @property
    def nutritionist(self) -> Agent:
        return self.analyzer
