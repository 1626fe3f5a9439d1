"""Aggregate statistics consumed by every renderer."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from github_stats_factory.models.activity import (
    CommitData,
    ContributionPercentages,
    ProductivityStats,
    RepoActivity,
)
from github_stats_factory.models.contribution import ContributionDay, StreakInfo
from github_stats_factory.models.repository import LanguageStats, RepoInfo


class GitHubStats(BaseModel):
    """Everything one report generation knows about a user.

    Built once by the aggregator and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    user_id: int = 0
    period_start: date
    period_end: date

    total_commits: int = 0
    total_prs: int = 0
    total_issues: int = 0
    total_reviews: int = 0
    total_repos: int = 0
    total_stars: int = 0
    total_forks: int = 0
    contributed_to: int = 0
    followers: int = 0
    following: int = 0

    streak: StreakInfo = Field(default_factory=StreakInfo)
    languages: tuple[LanguageStats, ...] = Field(default_factory=tuple)
    contribution_graph: tuple[ContributionDay, ...] = Field(default_factory=tuple)
    top_repos: tuple[RepoInfo, ...] = Field(default_factory=tuple)

    avg_commits_per_day: float = 0.0
    contribution_percentages: ContributionPercentages = Field(
        default_factory=ContributionPercentages
    )
    commit_data: tuple[CommitData, ...] = Field(default_factory=tuple)
    productivity_stats: ProductivityStats = Field(default_factory=ProductivityStats)
    repo_activity: tuple[RepoActivity, ...] = Field(default_factory=tuple)

    @property
    def top_language(self) -> LanguageStats | None:
        """Language with the most bytes, if any."""
        return self.languages[0] if self.languages else None
