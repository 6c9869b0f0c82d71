"""GitHub tool handler: user and repository lookups."""

from __future__ import annotations

import json
from typing import Any

from ...errors import GitHubAPIError
from ...types import ToolResult
from ..handler import BaseToolHandler
from ..registry import define_tool
from .client import GitHubClient

GITHUB_TOOLS = (
    define_tool(
        "get_user_info",
        "Get information about a GitHub user",
        properties={
            "username": ("string", "GitHub username to get information about"),
        },
        required=["username"],
    ),
    define_tool(
        "list_repositories",
        "List repositories for a GitHub user",
        properties={
            "username": ("string", "GitHub username whose repositories to list"),
            "type": ("string", "Type of repositories to list (all, owner, member)"),
            "sort": ("string", "Sort order for repositories (created, updated, pushed, full_name)"),
            "per_page": ("integer", "Number of repositories per page (max 100)"),
            "page": ("integer", "Page number for pagination"),
        },
        required=["username"],
    ),
)


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return int(value)
    return default


class GitHubToolHandler(BaseToolHandler):
    name = "github"
    description = "GitHub API integration for user and repository information"

    def __init__(self, client: GitHubClient | None = None) -> None:
        super().__init__(GITHUB_TOOLS)
        self.client = client or GitHubClient()

    async def _execute(self, tool_name: str, arguments: dict[str, Any]) -> ToolResult:
        if tool_name == "get_user_info":
            return await self._get_user_info(arguments)
        if tool_name == "list_repositories":
            return await self._list_repositories(arguments)
        return ToolResult.error(f"Unknown tool: {tool_name}")

    async def _get_user_info(self, arguments: dict[str, Any]) -> ToolResult:
        username = str(arguments["username"])
        try:
            user = await self.client.get_user(username)
        except GitHubAPIError as e:
            return ToolResult.error(e.message or "Failed to get user info")
        return ToolResult.success(json.dumps(user.summary()))

    async def _list_repositories(self, arguments: dict[str, Any]) -> ToolResult:
        username = str(arguments["username"])
        per_page = min(max(_as_int(arguments.get("per_page"), 30), 1), 100)
        try:
            repos = await self.client.list_repositories(
                username,
                type=arguments.get("type") or "all",
                sort=arguments.get("sort") or "updated",
                per_page=per_page,
                page=_as_int(arguments.get("page"), 1),
            )
        except GitHubAPIError as e:
            return ToolResult.error(e.message or "Failed to list repositories")
        return ToolResult.success(json.dumps({
            "username": username,
            "count": len(repos),
            "repositories": [r.summary() for r in repos],
        }))
