"""Pytest configuration and fixtures."""

from datetime import date, datetime, timedelta, timezone

import pytest

from github_stats_factory.config import Config
from github_stats_factory.models import (
    CommitData,
    ContributionDay,
    ContributionPercentages,
    GitHubStats,
    LanguageStats,
    ProductivityStats,
    RepoActivity,
    RepoInfo,
    StreakInfo,
)
from github_stats_factory.models.profile import SocialLink

# Fixed reference time used across tests
NOW = datetime(2025, 3, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration writing into a temporary directory."""
    return Config(
        github_token="test_token",
        github_username="testuser",
        github_api_url="https://api.github.test",
        github_graphql_url="https://api.github.test/graphql",
        language_colors_url="https://colors.test/colors.json",
        generated_dir=tmp_path / "generated",
        readme_path=tmp_path / "README.md",
        index_path=tmp_path / "index.html",
        profile_name="Test User",
        profile_tagline="Writes tests",
        social_links=[SocialLink(name="Blog", url="https://blog.test")],
    )


def make_graph(counts: list[int], end: date) -> list[ContributionDay]:
    """Build a chronological graph whose last day is ``end``."""
    start = end - timedelta(days=len(counts) - 1)
    return [
        ContributionDay.from_count(start + timedelta(days=i), count)
        for i, count in enumerate(counts)
    ]


@pytest.fixture
def sample_stats() -> GitHubStats:
    """A populated stats object covering every card section."""
    graph = make_graph([i % 7 for i in range(120)], NOW.date())
    commits = [
        CommitData(
            date=NOW - timedelta(hours=h),
            hour=(NOW - timedelta(hours=h)).hour,
            message="feat: thing" if h % 2 else "fix(ui): other",
            repository="alpha",
        )
        for h in range(10)
    ]
    return GitHubStats(
        username="testuser",
        user_id=42,
        period_start=date(2024, 3, 15),
        period_end=NOW.date(),
        total_commits=321,
        total_prs=45,
        total_issues=12,
        total_reviews=22,
        total_repos=17,
        total_stars=1234,
        total_forks=56,
        contributed_to=9,
        followers=78,
        following=3,
        streak=StreakInfo(current_streak=5, longest_streak=12, total_contributions=360),
        languages=[
            LanguageStats(name="Python", color="#3572A5", percentage=60.0, size=60000),
            LanguageStats(name="TypeScript", color="#3178c6", percentage=30.0, size=30000),
            LanguageStats(name="C++", color="#f34b7d", percentage=10.0, size=10000),
        ],
        contribution_graph=graph,
        top_repos=[RepoInfo(name="alpha", stars=100, forks=10, language="Python")],
        avg_commits_per_day=0.9,
        contribution_percentages=ContributionPercentages(commits=80, prs=11, reviews=6, issues=3),
        commit_data=commits,
        productivity_stats=ProductivityStats(
            hourly_distribution=[i % 4 for i in range(24)],
            commit_types={"feat": 5, "fix": 5},
            weekday_distribution=[10, 20, 30, 40, 50, 60, 70],
        ),
        repo_activity=[RepoActivity(name="alpha", commits=10, activity_over_time=[0] * 29 + [10])],
    )


@pytest.fixture
def empty_stats() -> GitHubStats:
    """Stats for a user with no activity at all."""
    return GitHubStats(
        username="nobody",
        period_start=date(2024, 3, 15),
        period_end=NOW.date(),
    )
