"""Data models for GitHub Stats Factory."""

from github_stats_factory.models.activity import (
    CommitData,
    ContributionPercentages,
    ProductivityStats,
    RepoActivity,
)
from github_stats_factory.models.contribution import (
    CalendarDay,
    CalendarWeek,
    ContributionCalendar,
    ContributionDay,
    StreakInfo,
    UserContributions,
    contribution_level,
)
from github_stats_factory.models.profile import SocialLink, UserInfo
from github_stats_factory.models.repository import LanguageStats, RepoInfo, Repository
from github_stats_factory.models.stats import GitHubStats

__all__ = [
    "UserInfo",
    "SocialLink",
    "Repository",
    "RepoInfo",
    "LanguageStats",
    "CalendarDay",
    "CalendarWeek",
    "ContributionCalendar",
    "ContributionDay",
    "StreakInfo",
    "UserContributions",
    "contribution_level",
    "CommitData",
    "ProductivityStats",
    "RepoActivity",
    "ContributionPercentages",
    "GitHubStats",
]
