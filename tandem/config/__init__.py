"""Tandem configuration."""

from .models import AgentConfig, ClientConfig, GitHubConfig, DEFAULT_MODEL, GITHUB_API_URL

__all__ = ["AgentConfig", "ClientConfig", "GitHubConfig", "DEFAULT_MODEL", "GITHUB_API_URL"]
