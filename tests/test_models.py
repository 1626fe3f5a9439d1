"""Tests for data models."""

from datetime import date, timezone

import pytest
from pydantic import ValidationError

from github_stats_factory.models import (
    CommitData,
    ContributionDay,
    GitHubStats,
    LanguageStats,
    ProductivityStats,
    Repository,
    UserContributions,
    UserInfo,
    contribution_level,
)
from github_stats_factory.models.profile import SocialLink


class TestContributionLevel:
    """Tests for the count -> level thresholds."""

    @pytest.mark.parametrize(
        "count,level",
        [(0, 0), (1, 1), (2, 1), (3, 2), (5, 2), (6, 3), (8, 3), (9, 4), (250, 4)],
    )
    def test_thresholds(self, count, level):
        """Test each threshold boundary."""
        assert contribution_level(count) == level

    def test_negative_count_is_level_zero(self):
        """Test that a negative count maps to level 0."""
        assert contribution_level(-3) == 0

    def test_monotonic(self):
        """Test that the level never decreases as the count grows."""
        levels = [contribution_level(n) for n in range(30)]
        assert levels == sorted(levels)


class TestContributionDay:
    """Tests for ContributionDay model."""

    def test_from_count_derives_level(self):
        """Test that the level is derived from the count."""
        day = ContributionDay.from_count(date(2024, 1, 1), 7)
        assert day.count == 7
        assert day.level == 3

    def test_is_immutable(self):
        """Test that a parsed day cannot be changed."""
        day = ContributionDay.from_count(date(2024, 1, 1), 1)
        with pytest.raises(ValidationError):
            day.count = 5

    def test_rejects_negative_count(self):
        """Test that negative counts are rejected."""
        with pytest.raises(ValidationError):
            ContributionDay(date=date(2024, 1, 1), count=-1)


class TestUserContributions:
    """Tests for UserContributions model."""

    def test_from_graphql(self):
        """Test creating contributions from a GraphQL collection."""
        data = {
            "totalCommitContributions": 120,
            "totalIssueContributions": 4,
            "totalPullRequestContributions": 10,
            "totalPullRequestReviewContributions": 6,
            "totalRepositoryContributions": 2,
            "totalRepositoriesWithContributedCommits": 8,
            "restrictedContributionsCount": 30,
            "contributionCalendar": {
                "totalContributions": 170,
                "weeks": [
                    {
                        "contributionDays": [
                            {"date": "2024-01-01", "contributionCount": 3},
                            {"date": "2024-01-02", "contributionCount": 0},
                        ]
                    }
                ],
            },
        }

        contributions = UserContributions.from_graphql(data)

        assert contributions.total_commits == 120
        assert contributions.total_reviews == 6
        assert contributions.total_repositories_with_contributed_commits == 8
        assert contributions.calendar.total_contributions == 170
        assert contributions.calendar.weeks[0].days[0].date == date(2024, 1, 1)
        assert contributions.calendar.weeks[0].days[0].contribution_count == 3

    def test_from_graphql_empty(self):
        """Test that an empty collection yields zero totals."""
        contributions = UserContributions.from_graphql({})
        assert contributions.total_commits == 0
        assert contributions.calendar.weeks == []


class TestRepository:
    """Tests for Repository model."""

    def test_from_api(self):
        """Test creating Repository from API response."""
        api_data = {
            "name": "test-repo",
            "full_name": "testuser/test-repo",
            "owner": {"login": "testuser"},
            "description": "A test repository",
            "language": "Python",
            "stargazers_count": 100,
            "forks_count": 20,
            "fork": False,
        }

        repo = Repository.from_api(api_data)

        assert repo.name == "test-repo"
        assert repo.owner == "testuser"
        assert repo.stargazers_count == 100
        assert repo.full_name == "testuser/test-repo"
        assert repo.is_fork is False

    def test_from_api_missing_fields(self):
        """Test creating Repository with missing optional fields."""
        repo = Repository.from_api({"name": "bare", "owner": {"login": "me"}})

        assert repo.full_name == "me/bare"
        assert repo.language is None
        assert repo.stargazers_count == 0
        assert repo.is_fork is False


class TestUserInfo:
    """Tests for UserInfo model."""

    def test_from_api(self):
        """Test creating UserInfo from API response."""
        info = UserInfo.from_api(
            {
                "id": 7,
                "login": "testuser",
                "public_repos": 10,
                "total_private_repos": 3,
                "followers": 100,
                "following": 5,
            }
        )
        assert info.id == 7
        assert info.public_repos + info.total_private_repos == 13

    def test_private_repos_absent_for_other_users(self):
        """Test that total_private_repos defaults to 0 when not visible."""
        info = UserInfo.from_api({"login": "someone", "total_private_repos": None})
        assert info.total_private_repos == 0


class TestCommitData:
    """Tests for CommitData model."""

    def test_from_api_uses_author_date_in_utc(self):
        """Test that the hour is taken from the author date in UTC."""
        commit = CommitData.from_api(
            {
                "commit": {
                    "author": {"date": "2024-05-01T23:30:00+02:00"},
                    "message": "feat: add thing\n\nLonger body",
                }
            },
            "repo",
        )

        assert commit is not None
        assert commit.hour == 21
        assert commit.date.tzinfo == timezone.utc
        assert commit.message == "feat: add thing"
        assert commit.repository == "repo"

    def test_from_api_without_date(self):
        """Test that entries without a date are skipped."""
        assert CommitData.from_api({"commit": {"message": "x"}}, "repo") is None


class TestProductivityStats:
    """Tests for ProductivityStats model."""

    def test_defaults_have_fixed_slots(self):
        """Test that the default histograms have 24 and 7 slots."""
        stats = ProductivityStats()
        assert len(stats.hourly_distribution) == 24
        assert len(stats.weekday_distribution) == 7

    def test_rejects_wrong_hour_count(self):
        """Test that a histogram with the wrong slot count is rejected."""
        with pytest.raises(ValidationError):
            ProductivityStats(hourly_distribution=[0] * 23)


class TestGitHubStats:
    """Tests for the GitHubStats aggregate."""

    def test_top_language(self):
        """Test that the top language is the first entry."""
        stats = GitHubStats(
            username="u",
            period_start=date(2024, 1, 1),
            period_end=date(2025, 1, 1),
            languages=[LanguageStats(name="Go", color="#00ADD8", percentage=100.0, size=10)],
        )
        assert stats.top_language.name == "Go"

    def test_top_language_none_when_empty(self, empty_stats):
        """Test that no languages means no top language."""
        assert empty_stats.top_language is None

    def test_is_frozen(self, empty_stats):
        """Test that stats cannot be mutated after construction."""
        with pytest.raises(ValidationError):
            empty_stats.total_commits = 5

    def test_collections_are_immutable(self, sample_stats):
        """Test that list input is stored as tuples that cannot be appended to."""
        assert isinstance(sample_stats.languages, tuple)
        assert isinstance(sample_stats.contribution_graph, tuple)
        assert isinstance(sample_stats.repo_activity[0].activity_over_time, tuple)
        assert isinstance(sample_stats.productivity_stats.hourly_distribution, tuple)

        with pytest.raises(AttributeError):
            sample_stats.languages.append(sample_stats.languages[0])

    def test_nested_stats_are_frozen(self, sample_stats):
        """Test that productivity and activity entries reject assignment."""
        with pytest.raises(ValidationError):
            sample_stats.productivity_stats.weekday_distribution = (1,) * 7
        with pytest.raises(ValidationError):
            sample_stats.repo_activity[0].commits = 99


class TestSocialLink:
    """Tests for SocialLink model."""

    def test_explicit_icon(self):
        """Test that an explicit icon is used as is."""
        link = SocialLink(name="X", url="https://x.test", icon="https://icon.test/x.svg")
        assert link.icon_url == "https://icon.test/x.svg"

    def test_badge_fallback(self):
        """Test that a shields.io badge is generated when no icon is set."""
        link = SocialLink(name="My-Blog", url="https://blog.test")
        assert link.icon_url.startswith("https://img.shields.io/badge/My--Blog-")
