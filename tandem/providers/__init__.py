"""Model client protocol re-export and implementations."""

from ..types import ModelClient, GenerationParams, GenerationResult
from .base import BaseModelClient
from .gemini import GeminiClient
from .models import GeminiModel

__all__ = [
    "ModelClient", "GenerationParams", "GenerationResult",
    "BaseModelClient", "GeminiClient", "GeminiModel",
]
