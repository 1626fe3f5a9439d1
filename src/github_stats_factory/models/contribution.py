"""Contribution calendar and streak models."""

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def contribution_level(count: int) -> int:
    """Map a daily contribution count to an activity level (0-4).

    Thresholds: 0 -> 0, 1-2 -> 1, 3-5 -> 2, 6-8 -> 3, 9+ -> 4.
    """
    if count <= 0:
        return 0
    if count < 3:
        return 1
    if count < 6:
        return 2
    if count < 9:
        return 3
    return 4


class ContributionDay(BaseModel):
    """Single day in the contribution graph, with a derived activity level."""

    model_config = ConfigDict(frozen=True)

    date: date
    count: int = Field(default=0, ge=0)
    level: int = Field(default=0, ge=0, le=4)

    @classmethod
    def from_count(cls, day: date, count: int) -> "ContributionDay":
        """Create a day, deriving the level from the count."""
        return cls(date=day, count=count, level=contribution_level(count))


class StreakInfo(BaseModel):
    """Streak counts derived from the contribution graph."""

    current_streak: int = 0
    longest_streak: int = 0
    total_contributions: int = 0


class CalendarDay(BaseModel):
    """Day as reported by the GraphQL contribution calendar."""

    date: date
    contribution_count: int = 0
    contribution_level: str = "NONE"  # NONE, FIRST_QUARTILE, ..., FOURTH_QUARTILE

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "CalendarDay":
        """Create from GraphQL response."""
        return cls(
            date=date.fromisoformat(data["date"]),
            contribution_count=data.get("contributionCount", 0),
            contribution_level=data.get("contributionLevel", "NONE"),
        )


class CalendarWeek(BaseModel):
    """Week of contributions."""

    days: list[CalendarDay] = Field(default_factory=list)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "CalendarWeek":
        """Create from GraphQL response."""
        return cls(
            days=[CalendarDay.from_graphql(day) for day in data.get("contributionDays", [])]
        )


class ContributionCalendar(BaseModel):
    """Full contribution calendar (the green squares mosaic)."""

    total_contributions: int = 0
    weeks: list[CalendarWeek] = Field(default_factory=list)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionCalendar":
        """Create from GraphQL response."""
        return cls(
            total_contributions=data.get("totalContributions", 0),
            weeks=[CalendarWeek.from_graphql(week) for week in data.get("weeks", [])],
        )


class UserContributions(BaseModel):
    """Contribution totals and calendar from a contributionsCollection."""

    total_commits: int = 0
    total_issues: int = 0
    total_pull_requests: int = 0
    total_reviews: int = 0
    total_repository_contributions: int = 0
    total_repositories_with_contributed_commits: int = 0
    restricted_contributions: int = 0  # Private contributions (count only)
    calendar: ContributionCalendar = Field(default_factory=ContributionCalendar)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "UserContributions":
        """Create from GraphQL contributionsCollection response."""
        return cls(
            total_commits=data.get("totalCommitContributions", 0),
            total_issues=data.get("totalIssueContributions", 0),
            total_pull_requests=data.get("totalPullRequestContributions", 0),
            total_reviews=data.get("totalPullRequestReviewContributions", 0),
            total_repository_contributions=data.get("totalRepositoryContributions", 0),
            total_repositories_with_contributed_commits=data.get(
                "totalRepositoriesWithContributedCommits", 0
            ),
            restricted_contributions=data.get("restrictedContributionsCount", 0),
            calendar=ContributionCalendar.from_graphql(data.get("contributionCalendar", {})),
        )
