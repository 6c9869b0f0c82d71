"""Minimal async GitHub REST client."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ...config import GitHubConfig
from ...errors import GitHubAPIError
from .models import GitHubErrorBody, GitHubRepository, GitHubUser

logger = logging.getLogger(__name__)


class GitHubClient:
    def __init__(
        self,
        config: GitHubConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or GitHubConfig.from_env()
        self._transport = transport

    async def get_user(self, username: str) -> GitHubUser:
        data = await self._get(
            f"/users/{quote(username, safe='')}",
            not_found=f"User '{username}' not found",
            context="Failed to fetch user info",
        )
        try:
            return GitHubUser.model_validate(data)
        except ValidationError as e:
            raise GitHubAPIError(f"Failed to fetch user info: {e}", cause=e) from e

    async def list_repositories(
        self,
        username: str,
        type: str = "all",
        sort: str = "updated",
        per_page: int = 30,
        page: int = 1,
    ) -> list[GitHubRepository]:
        data = await self._get(
            f"/users/{quote(username, safe='')}/repos",
            params={"type": type, "sort": sort, "per_page": per_page, "page": page},
            not_found=f"User '{username}' not found",
            context="Failed to fetch repositories",
        )
        try:
            return [GitHubRepository.model_validate(r) for r in data]
        except (ValidationError, TypeError) as e:
            raise GitHubAPIError(f"Failed to fetch repositories: {e}", cause=e) from e

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": self.config.api_version,
            "User-Agent": self.config.user_agent,
        }
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    async def _get(
        self,
        path: str,
        *,
        not_found: str,
        context: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        logger.debug("GET %s%s params=%s", self.config.base_url, path, params)
        try:
            async with httpx.AsyncClient(
                base_url=self.config.base_url,
                headers=self._headers(),
                timeout=self.config.timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(path, params=params)
        except httpx.HTTPError as e:
            raise GitHubAPIError(f"{context}: {e}", cause=e) from e

        if response.status_code in (200, 304):
            try:
                return response.json()
            except ValueError as e:
                raise GitHubAPIError(f"{context}: invalid JSON response", cause=e) from e
        if response.status_code == 404:
            raise GitHubAPIError(not_found, status_code=404)
        raise _error_from(response)


def _error_from(response: httpx.Response) -> GitHubAPIError:
    try:
        body = GitHubErrorBody.model_validate(response.json())
        return GitHubAPIError(f"GitHub API Error: {body.message}", status_code=response.status_code)
    except (ValueError, ValidationError):
        return GitHubAPIError(
            f"HTTP {response.status_code}: {response.reason_phrase}",
            status_code=response.status_code,
        )
