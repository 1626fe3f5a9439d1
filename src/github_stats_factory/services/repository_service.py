"""Repository listing and ranking service."""

import logging

import httpx

from github_stats_factory.exceptions import GitHubAPIError
from github_stats_factory.models.repository import RepoInfo, Repository
from github_stats_factory.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)


class RepositoryService:
    """Lists the user's repositories."""

    def __init__(self, rest_client: GitHubRestClient):
        self.rest_client = rest_client

    async def fetch_repositories(self, username: str) -> list[Repository]:
        """Fetch owned repositories, private ones included when the token allows.

        Falls back to the public listing when the authenticated one fails.
        """
        logger.info("Fetching repositories for %s", username)

        try:
            repos_data = await self.rest_client.get_authenticated_repos()
        except (GitHubAPIError, httpx.HTTPError) as e:
            logger.warning(
                "Error fetching authenticated repos, falling back to public: %s", e
            )
            repos_data = await self.rest_client.get_user_repos(username)

        repos = [Repository.from_api(r) for r in repos_data]
        logger.info("Found %d repositories", len(repos))
        return repos


def get_top_repositories(repos: list[Repository], limit: int = 5) -> list[RepoInfo]:
    """Rank non-fork repositories by stars."""
    ranked = sorted(
        (repo for repo in repos if not repo.is_fork),
        key=lambda repo: repo.stargazers_count,
        reverse=True,
    )
    return [
        RepoInfo(
            name=repo.name,
            stars=repo.stargazers_count,
            forks=repo.forks_count,
            description=repo.description or "",
            language=repo.language or "Unknown",
        )
        for repo in ranked[:limit]
    ]
