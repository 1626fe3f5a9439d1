"""Commit and productivity models."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from github_stats_factory.models.repository import parse_datetime


class CommitData(BaseModel):
    """A commit authored by the target user."""

    date: datetime
    hour: int = Field(ge=0, le=23)  # UTC
    message: str = ""
    repository: str

    @classmethod
    def from_api(cls, data: dict[str, Any], repository: str) -> "CommitData | None":
        """Create from a REST commit listing entry.

        Returns None when the entry carries no usable author date.
        """
        commit = data.get("commit") or {}
        author = commit.get("author") or commit.get("committer") or {}
        when = parse_datetime(author.get("date"))
        if when is None:
            return None
        if when.tzinfo is None:
            when = when.replace(tzinfo=timezone.utc)
        when = when.astimezone(timezone.utc)
        return cls(
            date=when,
            hour=when.hour,
            message=(commit.get("message") or "").split("\n", 1)[0],
            repository=repository,
        )


class ProductivityStats(BaseModel):
    """Commit rhythm histograms and commit type counts."""

    model_config = ConfigDict(frozen=True)

    hourly_distribution: tuple[int, ...] = Field(default_factory=lambda: (0,) * 24)
    commit_types: dict[str, int] = Field(default_factory=dict)
    weekday_distribution: tuple[int, ...] = Field(default_factory=lambda: (0,) * 7)  # Sunday first

    @field_validator("hourly_distribution")
    @classmethod
    def _check_hours(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if len(value) != 24:
            raise ValueError("hourly_distribution must have exactly 24 slots")
        return value

    @field_validator("weekday_distribution")
    @classmethod
    def _check_weekdays(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if len(value) != 7:
            raise ValueError("weekday_distribution must have exactly 7 slots")
        return value


class RepoActivity(BaseModel):
    """Commits to one repository over a trailing window of days."""

    model_config = ConfigDict(frozen=True)

    name: str
    commits: int = 0
    activity_over_time: tuple[int, ...] = Field(default_factory=tuple)


class ContributionPercentages(BaseModel):
    """Share of each activity type, as rounded whole percentages."""

    commits: int = 0
    prs: int = 0
    reviews: int = 0
    issues: int = 0
