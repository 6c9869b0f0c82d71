"""Gemini model catalog."""

from __future__ import annotations

from enum import Enum


class GeminiModel(Enum):
    GEMINI_1_5_PRO = ("gemini-1.5-pro", "Gemini 1.5 Pro", 1048576)
    GEMINI_1_5_FLASH = ("gemini-1.5-flash", "Gemini 1.5 Flash", 1048576)
    GEMINI_1_5_FLASH_8B = ("gemini-1.5-flash-8b", "Gemini 1.5 Flash 8B", 1048576)
    GEMINI_2_0_FLASH = ("gemini-2.0-flash", "Gemini 2.0 Flash", 1048576)
    GEMINI_2_0_FLASH_LITE = ("gemini-2.0-flash-lite", "Gemini 2.0 Flash-Lite", 1048576)
    GEMINI_2_5_FLASH = ("gemini-2.5-flash", "Gemini 2.5 Flash", 1048576)
    GEMINI_2_5_PRO = ("gemini-2.5-pro", "Gemini 2.5 Pro", 1048576)

    def __init__(self, model_name: str, display_name: str, max_tokens: int) -> None:
        self.model_name = model_name
        self.display_name = display_name
        self.max_tokens = max_tokens

    @classmethod
    def default(cls) -> GeminiModel:
        return cls.GEMINI_2_0_FLASH

    @classmethod
    def from_model_name(cls, model_name: str) -> GeminiModel | None:
        return next((m for m in cls if m.model_name == model_name), None)

    @staticmethod
    def resolve(model: GeminiModel | str | None) -> str | None:
        """Model identifier for a catalog entry or a raw model name; ``None`` passes through."""
        return model.model_name if isinstance(model, GeminiModel) else model
