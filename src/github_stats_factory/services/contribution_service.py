"""Contribution calendar service: fetching, graph parsing and streaks."""

import logging
from datetime import date, datetime

from github_stats_factory.exceptions import GitHubGraphQLError
from github_stats_factory.models.contribution import (
    ContributionDay,
    StreakInfo,
    UserContributions,
)
from github_stats_factory.services.github_graphql_client import GitHubGraphQLClient

logger = logging.getLogger(__name__)


class ContributionService:
    """Fetches the contribution calendar and totals via GraphQL."""

    def __init__(self, graphql_client: GitHubGraphQLClient):
        self.graphql_client = graphql_client

    async def fetch_user_contributions(
        self,
        username: str,
        from_datetime: datetime,
        to_datetime: datetime,
    ) -> UserContributions:
        """Fetch contribution totals and calendar for a window.

        Failures propagate: without the calendar no report can be produced.
        """
        logger.info(
            "Fetching contributions for %s (%s to %s)",
            username,
            from_datetime.date(),
            to_datetime.date(),
        )

        try:
            data = await self.graphql_client.get_contributions(
                username, from_datetime, to_datetime
            )
        except GitHubGraphQLError as e:
            logger.error("Failed to fetch contributions: %s", e)
            raise

        contributions = UserContributions.from_graphql(data)
        logger.debug(
            "Contribution breakdown: commits=%d prs=%d reviews=%d issues=%d "
            "repos=%d restricted=%d calendar_total=%d",
            contributions.total_commits,
            contributions.total_pull_requests,
            contributions.total_reviews,
            contributions.total_issues,
            contributions.total_repository_contributions,
            contributions.restricted_contributions,
            contributions.calendar.total_contributions,
        )
        return contributions


def parse_contribution_graph(contributions: UserContributions) -> list[ContributionDay]:
    """Flatten the week/day calendar into chronological days.

    The level is derived from the count rather than taken from the API so it
    stays consistent whatever the data source.
    """
    days = [
        ContributionDay.from_count(day.date, day.contribution_count)
        for week in contributions.calendar.weeks
        for day in week.days
    ]
    days.sort(key=lambda d: d.date)
    return days


def calculate_streak(days: list[ContributionDay], today: date) -> StreakInfo:
    """Calculate current and longest streaks plus the total count.

    The current streak walks back from the most recent day. A zero day only
    ends it when it lies more than one day before ``today``, so an empty
    today or yesterday does not break a running streak (and is not counted).
    The longest streak is a plain forward scan with no such allowance.
    """
    current_streak = 0
    for day in sorted(days, key=lambda d: d.date, reverse=True):
        if day.count > 0:
            current_streak += 1
        elif (today - day.date).days > 1:
            break

    longest_streak = 0
    run = 0
    for day in sorted(days, key=lambda d: d.date):
        if day.count > 0:
            run += 1
            longest_streak = max(longest_streak, run)
        else:
            run = 0

    return StreakInfo(
        current_streak=current_streak,
        longest_streak=longest_streak,
        total_contributions=sum(day.count for day in days),
    )


def calculate_weekday_distribution(days: list[ContributionDay]) -> list[int]:
    """Sum contribution counts per weekday, Sunday first."""
    weekdays = [0] * 7
    for day in days:
        # date.weekday() is Monday=0; shift so Sunday lands in slot 0
        weekdays[(day.date.weekday() + 1) % 7] += day.count
    return weekdays
