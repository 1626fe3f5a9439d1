"""Configuration management for GitHub Stats Factory."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from github_stats_factory import constants
from github_stats_factory.exceptions import ConfigError
from github_stats_factory.models.profile import SocialLink


@dataclass
class Config:
    """Application configuration.

    Built once (usually via ``Config.from_env()``) and handed to the
    generator, which passes it on to the clients and services.
    """

    github_token: str | None
    github_username: str = constants.DEFAULT_USERNAME
    github_api_url: str = "https://api.github.com"
    github_graphql_url: str = "https://api.github.com/graphql"
    language_colors_url: str = (
        "https://raw.githubusercontent.com/ozh/github-colors/master/colors.json"
    )

    # Output locations
    generated_dir: Path = Path(constants.GENERATED_DIR)
    readme_path: Path = Path(constants.README_PATH)
    index_path: Path = Path(constants.INDEX_PATH)

    # Document text
    profile_name: str | None = None
    profile_tagline: str = constants.DEFAULT_TAGLINE
    social_links: list[SocialLink] = field(default_factory=list)

    # Windows and limits
    contribution_days: int = constants.CONTRIBUTION_DAYS
    activity_days: int = constants.ACTIVITY_DAYS
    max_repos_for_details: int = constants.MAX_REPOS_FOR_DETAILS
    max_commit_pages: int = constants.MAX_COMMIT_PAGES
    top_languages: int = constants.TOP_LANGUAGES
    other_threshold: float = constants.OTHER_THRESHOLD
    top_repos: int = constants.TOP_REPOS

    # Pagination
    default_per_page: int = 100

    # Timeouts
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        # Support both GITHUB_STATS_TOKEN (preferred) and GITHUB_TOKEN (fallback)
        token = os.getenv("GITHUB_STATS_TOKEN") or os.getenv("GITHUB_TOKEN")

        return cls(
            github_token=token,
            github_username=os.getenv("GITHUB_USERNAME") or constants.DEFAULT_USERNAME,
            github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
            github_graphql_url=os.getenv(
                "GITHUB_GRAPHQL_URL", "https://api.github.com/graphql"
            ),
            generated_dir=Path(os.getenv("GENERATED_DIR", constants.GENERATED_DIR)),
            readme_path=Path(os.getenv("README_PATH", constants.README_PATH)),
            index_path=Path(os.getenv("INDEX_PATH", constants.INDEX_PATH)),
            profile_name=os.getenv("PROFILE_NAME") or None,
            profile_tagline=os.getenv("PROFILE_TAGLINE", constants.DEFAULT_TAGLINE),
            social_links=parse_social_links(os.getenv("SOCIAL_LINKS")),
        )

    @property
    def is_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)

    @property
    def display_name(self) -> str:
        """Name shown in the generated documents."""
        return self.profile_name or self.github_username

    def validate(self) -> None:
        """Fail fast when a required setting is missing.

        Raises:
            ConfigError: If no token is configured or the username is empty
        """
        if not self.github_token:
            raise ConfigError(
                constants.ERROR_NO_TOKEN,
                context={"username": self.github_username},
            )
        if not self.github_username.strip():
            raise ConfigError(constants.ERROR_NO_USERNAME)


def parse_social_links(raw: str | None) -> list[SocialLink]:
    """Parse ``Name=url,Name=url`` pairs into social links.

    Entries without ``=`` or with an empty side are ignored.
    """
    if not raw:
        return []

    links = []
    for entry in raw.split(","):
        name, sep, url = entry.partition("=")
        name, url = name.strip(), url.strip()
        if sep and name and url:
            links.append(SocialLink(name=name, url=url))
    return links
