"""Shared real client: loads .env, creates the Gemini client."""

from pathlib import Path

from tandem.config import ClientConfig
from tandem.providers import GeminiClient

_ENV = Path(__file__).resolve().parents[2] / ".env"


def create_client(**overrides) -> GeminiClient:
    cfg = ClientConfig.from_env(_ENV)
    for key, value in overrides.items():
        setattr(cfg, key, value)
    return GeminiClient(cfg)
