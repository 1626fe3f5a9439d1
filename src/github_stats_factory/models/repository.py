"""Repository and language models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class Repository(BaseModel):
    """GitHub repository data."""

    name: str
    full_name: str = ""
    owner: str = ""
    description: str | None = None
    language: str | None = None
    stargazers_count: int = 0
    forks_count: int = 0
    is_fork: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Repository":
        """Create from GitHub REST API response."""
        owner = (data.get("owner") or {}).get("login", "")
        name = data.get("name", "")
        return cls(
            name=name,
            full_name=data.get("full_name") or f"{owner}/{name}",
            owner=owner,
            description=data.get("description"),
            language=data.get("language"),
            stargazers_count=data.get("stargazers_count") or 0,
            forks_count=data.get("forks_count") or 0,
            is_fork=data.get("fork", False),
        )


class RepoInfo(BaseModel):
    """Top repository entry shown on the cards."""

    name: str
    stars: int = 0
    forks: int = 0
    description: str = ""
    language: str = "Unknown"


class LanguageStats(BaseModel):
    """Aggregated byte size and share of a single language."""

    name: str
    color: str
    percentage: float
    size: int


def parse_datetime(value: str | None) -> datetime | None:
    """Parse ISO datetime string."""
    if not value:
        return None
    try:
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
