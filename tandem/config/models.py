"""Configuration dataclasses.

``from_env`` loaders read a ``.env`` file (python-dotenv) without overriding
variables already set in the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_MODEL = "gemini-2.0-flash"
GITHUB_API_URL = "https://api.github.com"


def _load_env(env_file: str | Path | None) -> None:
    if env_file is not None:
        load_dotenv(env_file)
    else:
        load_dotenv()


@dataclass
class ClientConfig:
    """Connection and generation settings for the model client."""

    api_key: str | None = None
    base_url: str | None = None
    model: str = DEFAULT_MODEL
    temperature: float = 0.7
    top_p: float = 0.95
    max_output_tokens: int = 2048
    timeout: float = 60.0

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> ClientConfig:
        _load_env(env_file)
        return cls(
            api_key=os.getenv("GEMINI_API_KEY"),
            base_url=os.getenv("GEMINI_BASE_URL") or None,
            model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        )


@dataclass
class GitHubConfig:
    token: str | None = None
    base_url: str = GITHUB_API_URL
    user_agent: str = "tandem-agents"
    api_version: str = "2022-11-28"
    timeout: float = 30.0

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> GitHubConfig:
        _load_env(env_file)
        return cls(token=os.getenv("GITHUB_TOKEN") or None)


@dataclass
class AgentConfig:
    agent_id: str
    display_name: str
    system_instruction: str | None = None
    model: str | None = None


