"""User profile models."""

from typing import Any
from urllib.parse import quote

from pydantic import BaseModel


class UserInfo(BaseModel):
    """GitHub user profile data used by the report."""

    id: int = 0
    login: str
    name: str | None = None
    avatar_url: str = ""
    public_repos: int = 0
    total_private_repos: int = 0  # Only visible to the token owner
    followers: int = 0
    following: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "UserInfo":
        """Create from GitHub REST API response."""
        return cls(
            id=data.get("id", 0),
            login=data.get("login", ""),
            name=data.get("name"),
            avatar_url=data.get("avatar_url", ""),
            public_repos=data.get("public_repos", 0),
            total_private_repos=data.get("total_private_repos") or 0,
            followers=data.get("followers", 0),
            following=data.get("following", 0),
        )


class SocialLink(BaseModel):
    """A link shown in the "Connect" section of the generated documents."""

    name: str
    url: str
    icon: str | None = None

    @property
    def icon_url(self) -> str:
        """Explicit icon, or a shields.io badge named after the link."""
        if self.icon:
            return self.icon
        label = quote(self.name.replace("-", "--").replace("_", "__"))
        return f"https://img.shields.io/badge/{label}-24292e?style=for-the-badge"
