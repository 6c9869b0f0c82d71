"""Workflows: user-facing message streams over one or more agents."""

from .base import BaseWorkflow, Workflow, WorkflowType
from .markers import CODE_MARKER, RECIPE_MARKER, CompletionMarker
from .pipeline import ArtifactPipelineWorkflow, WorkflowStep
from .recipe import RecipeCreationWorkflow, build_nutrition_prompt
from .simple import SimpleChatWorkflow
from .factory import create_workflow

__all__ = [
    "Workflow", "WorkflowType", "BaseWorkflow",
    "CompletionMarker", "RECIPE_MARKER", "CODE_MARKER",
    "ArtifactPipelineWorkflow", "WorkflowStep",
    "RecipeCreationWorkflow", "build_nutrition_prompt",
    "SimpleChatWorkflow", "create_workflow",
]
