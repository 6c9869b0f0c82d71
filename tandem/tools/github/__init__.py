from .client import GitHubClient
from .handler import GITHUB_TOOLS, GitHubToolHandler
from .models import GitHubErrorBody, GitHubRepository, GitHubUser

__all__ = [
    "GitHubClient", "GitHubToolHandler", "GITHUB_TOOLS",
    "GitHubUser", "GitHubRepository", "GitHubErrorBody",
]
