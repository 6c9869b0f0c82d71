"""GitHub REST payloads."""

from pydantic import BaseModel, Field


class GitHubUser(BaseModel):
    login: str
    id: int
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    bio: str | None = None
    public_repos: int = 0
    public_gists: int = 0
    followers: int = 0
    following: int = 0
    created_at: str = ""
    updated_at: str = ""
    avatar_url: str = ""
    html_url: str = ""

    def summary(self) -> dict:
        return {
            "login": self.login,
            "name": self.name or "",
            "bio": self.bio or "",
            "company": self.company or "",
            "location": self.location or "",
            "publicRepos": self.public_repos,
            "followers": self.followers,
            "following": self.following,
            "createdAt": self.created_at,
            "htmlUrl": self.html_url,
        }


class GitHubRepository(BaseModel):
    id: int
    name: str
    full_name: str = ""
    private: bool = False
    description: str | None = None
    fork: bool = False
    created_at: str = ""
    updated_at: str = ""
    pushed_at: str | None = None
    size: int = 0
    stargazers_count: int = 0
    watchers_count: int = 0
    language: str | None = None
    forks_count: int = 0
    open_issues_count: int = 0
    default_branch: str = ""
    html_url: str = ""
    topics: list[str] = Field(default_factory=list)
    archived: bool = False
    disabled: bool = False

    def summary(self) -> dict:
        return {
            "name": self.name,
            "description": self.description or "",
            "language": self.language or "",
            "stars": self.stargazers_count,
            "forks": self.forks_count,
            "updatedAt": self.updated_at,
            "htmlUrl": self.html_url,
        }


class GitHubErrorBody(BaseModel):
    message: str
    documentation_url: str | None = None
