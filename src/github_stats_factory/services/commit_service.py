"""Commit fetching and commit-rhythm aggregation."""

import asyncio
import logging
import re
from datetime import date, datetime, timedelta

import httpx

from github_stats_factory.exceptions import StatsFactoryError
from github_stats_factory.models.activity import CommitData, RepoActivity
from github_stats_factory.models.repository import Repository
from github_stats_factory.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)

COMMIT_TYPES = (
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "perf",
    "test",
    "chore",
    "build",
    "ci",
    "revert",
    "merge",
)

# Conventional Commits prefix with optional scope, e.g. "feat(api): ..."
COMMIT_TYPE_PATTERN = re.compile(
    rf"^({'|'.join(COMMIT_TYPES)})(\(.+\))?:",
    re.IGNORECASE,
)


class CommitService:
    """Fetches the user's commits across repositories."""

    def __init__(
        self,
        rest_client: GitHubRestClient,
        max_pages: int | None = 10,
        batch_size: int = 5,
    ):
        self.rest_client = rest_client
        self.max_pages = max_pages
        self.batch_size = batch_size

    async def fetch_all_commits(
        self,
        repos: list[Repository],
        author: str,
        since: datetime,
        until: datetime,
    ) -> list[CommitData]:
        """Fetch commits by ``author`` in the window from every given repository.

        Each repository fills its own result slot; slots are merged in
        repository order once all fetches have settled.
        """
        logger.info("Fetching commits from %d repositories", len(repos))

        per_repo: list[list[CommitData]] = []
        for i in range(0, len(repos), self.batch_size):
            batch = repos[i : i + self.batch_size]
            per_repo.extend(
                await asyncio.gather(
                    *(self._fetch_repo_commits(repo, author, since, until) for repo in batch)
                )
            )

        commits = [commit for repo_commits in per_repo for commit in repo_commits]
        logger.info("Fetched %d commits", len(commits))
        return commits

    async def _fetch_repo_commits(
        self,
        repo: Repository,
        author: str,
        since: datetime,
        until: datetime,
    ) -> list[CommitData]:
        """Fetch commits from a single repository; failures yield no commits."""
        try:
            commits_data = await self.rest_client.get_repo_commits(
                repo.owner,
                repo.name,
                author=author,
                since=since,
                until=until,
                max_pages=self.max_pages,
            )
        except (StatsFactoryError, httpx.HTTPError) as e:
            logger.warning("Could not fetch commits for %s: %s", repo.full_name, e)
            return []

        commits = []
        for item in commits_data:
            commit = CommitData.from_api(item, repo.name)
            if commit is not None:
                commits.append(commit)
        return commits


def classify_commit(message: str) -> str:
    """Return the conventional commit type of a message, or "other"."""
    match = COMMIT_TYPE_PATTERN.match(message.strip())
    return match.group(1).lower() if match else "other"


def parse_commit_types(commits: list[CommitData]) -> dict[str, int]:
    """Count commits per conventional commit type."""
    types: dict[str, int] = {}
    for commit in commits:
        commit_type = classify_commit(commit.message)
        types[commit_type] = types.get(commit_type, 0) + 1
    return types


def calculate_hourly_distribution(commits: list[CommitData]) -> list[int]:
    """Bucket commits by UTC hour into 24 slots."""
    hours = [0] * 24
    for commit in commits:
        hours[commit.hour] += 1
    return hours


def calculate_repo_activity(
    commits: list[CommitData],
    today: date,
    days: int = 30,
    limit: int = 5,
) -> list[RepoActivity]:
    """Rank repositories by commits over the trailing ``days`` ending ``today``.

    Each entry carries a daily series of exactly ``days`` slots, oldest
    first; repositories without commits in the window are left out.
    """
    start = today - timedelta(days=days - 1)
    series: dict[str, list[int]] = {}

    for commit in commits:
        index = (commit.date.date() - start).days
        if 0 <= index < days:
            series.setdefault(commit.repository, [0] * days)[index] += 1

    activity = [
        RepoActivity(name=name, commits=sum(counts), activity_over_time=counts)
        for name, counts in series.items()
    ]
    activity.sort(key=lambda repo: (-repo.commits, repo.name))
    return activity[:limit]
