"""Collects raw GitHub data and assembles the report statistics."""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Awaitable

import httpx

from github_stats_factory import constants
from github_stats_factory.config import Config
from github_stats_factory.models.activity import ContributionPercentages, ProductivityStats
from github_stats_factory.models.profile import UserInfo
from github_stats_factory.models.stats import GitHubStats
from github_stats_factory.services.commit_service import (
    CommitService,
    calculate_hourly_distribution,
    calculate_repo_activity,
    parse_commit_types,
)
from github_stats_factory.services.contribution_service import (
    ContributionService,
    calculate_streak,
    calculate_weekday_distribution,
    parse_contribution_graph,
)
from github_stats_factory.services.github_graphql_client import GitHubGraphQLClient
from github_stats_factory.services.github_rest_client import GitHubRestClient
from github_stats_factory.services.language_service import (
    LanguageService,
    fetch_language_colors,
)
from github_stats_factory.services.repository_service import (
    RepositoryService,
    get_top_repositories,
)
from github_stats_factory.utils.formatting import round_half_up

logger = logging.getLogger(__name__)


class StatsAggregator:
    """Fetches everything a report needs and builds one ``GitHubStats``."""

    def __init__(
        self,
        config: Config,
        rest_client: GitHubRestClient,
        graphql_client: GitHubGraphQLClient,
        colors_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.rest_client = rest_client
        self.graphql_client = graphql_client
        self.colors_transport = colors_transport

        self.contribution_service = ContributionService(graphql_client)
        self.repository_service = RepositoryService(rest_client)
        self.language_service = LanguageService(rest_client)
        self.commit_service = CommitService(rest_client, max_pages=config.max_commit_pages)

    async def fetch_all_stats(self, now: datetime | None = None) -> GitHubStats:
        """Fetch and aggregate all statistics for the configured user.

        Args:
            now: Reference time for every window (defaults to the current UTC time)

        Returns:
            The assembled statistics
        """
        username = self.config.github_username
        now = now or datetime.now(timezone.utc)
        today = now.date()
        since = now - timedelta(days=self.config.contribution_days)

        logger.info("Collecting stats for %s (%s to %s)", username, since.date(), today)

        # Independent fetches; profile and calendar failures are fatal
        user_data, repos, contributions, colors = await gather_or_cancel(
            self.rest_client.get_user(username),
            self.repository_service.fetch_repositories(username),
            self.contribution_service.fetch_user_contributions(username, since, now),
            fetch_language_colors(
                self.config.language_colors_url,
                timeout=self.config.request_timeout,
                transport=self.colors_transport,
            ),
        )
        user = UserInfo.from_api(user_data)

        detail_repos = repos[: self.config.max_repos_for_details]
        languages, commits = await gather_or_cancel(
            self.language_service.calculate_language_stats(detail_repos, colors),
            self.commit_service.fetch_all_commits(detail_repos, username, since, now),
        )

        contribution_graph = parse_contribution_graph(contributions)
        streak = calculate_streak(contribution_graph, today)

        productivity_stats = ProductivityStats(
            hourly_distribution=calculate_hourly_distribution(commits),
            commit_types=parse_commit_types(commits),
            weekday_distribution=calculate_weekday_distribution(contribution_graph),
        )

        stats = GitHubStats(
            username=username,
            user_id=user.id,
            period_start=since.date(),
            period_end=today,
            total_commits=contributions.total_commits,
            total_prs=contributions.total_pull_requests,
            total_issues=contributions.total_issues,
            total_reviews=contributions.total_reviews,
            total_repos=user.public_repos + user.total_private_repos,
            total_stars=sum(repo.stargazers_count for repo in repos),
            total_forks=sum(repo.forks_count for repo in repos),
            contributed_to=contributions.total_repositories_with_contributed_commits,
            followers=user.followers,
            following=user.following,
            streak=streak,
            languages=languages,
            contribution_graph=contribution_graph,
            top_repos=get_top_repositories(repos, limit=self.config.top_repos),
            avg_commits_per_day=average_commits_per_day(
                contributions.total_commits, len(contribution_graph)
            ),
            contribution_percentages=contribution_percentages(
                commits=contributions.total_commits,
                prs=contributions.total_pull_requests,
                reviews=contributions.total_reviews,
                issues=contributions.total_issues,
            ),
            commit_data=commits,
            productivity_stats=productivity_stats,
            repo_activity=calculate_repo_activity(
                commits,
                today,
                days=self.config.activity_days,
                limit=constants.TOP_ACTIVE_REPOS,
            ),
        )

        logger.info(
            "Aggregated %d contributions, %d repositories, %d languages",
            streak.total_contributions,
            len(repos),
            len(languages),
        )
        return stats


async def gather_or_cancel(*coros: Awaitable[Any]) -> list[Any]:
    """Run coroutines concurrently; the first failure cancels the rest.

    Sibling tasks are cancelled and awaited before the error propagates.
    """
    tasks = [asyncio.ensure_future(coro) for coro in coros]
    try:
        return await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


def contribution_percentages(
    commits: int, prs: int, reviews: int, issues: int
) -> ContributionPercentages:
    """Share of each activity type in their sum, as whole percentages."""
    total = commits + prs + reviews + issues
    if total <= 0:
        return ContributionPercentages()

    def share(value: int) -> int:
        return int(round_half_up(value / total * 100))

    return ContributionPercentages(
        commits=share(commits),
        prs=share(prs),
        reviews=share(reviews),
        issues=share(issues),
    )


def average_commits_per_day(total_commits: int, days: int) -> float:
    """Commits per tracked day, rounded to one decimal."""
    if days <= 0:
        return 0.0
    return round_half_up(total_commits / days, 1)
