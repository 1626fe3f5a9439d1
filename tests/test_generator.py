"""Tests for the end-to-end generator."""

import io
from datetime import datetime, timezone

import httpx
import pytest
from rich.console import Console as RichConsole

from github_stats_factory.exceptions import ConfigError, GenerationError, StatsFactoryError
from github_stats_factory.generator import StatsGenerator
from github_stats_factory.output.console import Console

CONTRIBUTIONS = {
    "totalCommitContributions": 12,
    "totalPullRequestContributions": 3,
    "totalPullRequestReviewContributions": 1,
    "totalIssueContributions": 0,
    "totalRepositoriesWithContributedCommits": 2,
    "contributionCalendar": {
        "totalContributions": 4,
        "weeks": [
            {
                "contributionDays": [
                    {"date": "2025-03-14", "contributionCount": 1},
                    {"date": "2025-03-15", "contributionCount": 3},
                ]
            }
        ],
    },
}


def github_handler(request: httpx.Request) -> httpx.Response:
    """Serve a tiny GitHub account over both APIs."""
    path = request.url.path
    if path == "/graphql":
        return httpx.Response(
            200, json={"data": {"user": {"contributionsCollection": CONTRIBUTIONS}}}
        )
    if path == "/users/testuser":
        return httpx.Response(200, json={"id": 7, "login": "testuser", "public_repos": 1})
    if path == "/user/repos":
        return httpx.Response(
            200,
            json=[
                {
                    "name": "alpha",
                    "owner": {"login": "testuser"},
                    "language": "Python",
                    "stargazers_count": 3,
                }
            ],
        )
    if path == "/repos/testuser/alpha/languages":
        return httpx.Response(200, json={"Python": 7000})
    if path == "/repos/testuser/alpha/commits":
        return httpx.Response(
            200,
            json=[{"commit": {"message": "feat: first", "author": {"date": "2025-03-15T09:00:00Z"}}}],
        )
    return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def console(output):
    return Console(console=RichConsole(file=output, width=120))


class TestStatsGenerator:
    """Tests for StatsGenerator."""

    def test_requires_fetch_first(self, test_config, console):
        """Test that rendering before fetching raises GenerationError."""
        generator = StatsGenerator(test_config, console=console)

        assert generator.stats is None
        with pytest.raises(GenerationError, match="before generating SVGs"):
            generator.generate_svgs()
        with pytest.raises(GenerationError, match="before generating outputs"):
            generator.generate_outputs()
        with pytest.raises(GenerationError, match="before printing summary"):
            generator.print_summary()

    def test_initialize_without_token(self, test_config, console):
        """Test that a missing token fails validation."""
        test_config.github_token = None
        generator = StatsGenerator(test_config, console=console)

        with pytest.raises(ConfigError, match="GITHUB_TOKEN"):
            generator.initialize()

    def test_initialize_without_username(self, test_config, console):
        test_config.github_username = "  "
        generator = StatsGenerator(test_config, console=console)

        with pytest.raises(ConfigError, match="GITHUB_USERNAME"):
            generator.initialize()

    def test_generate_svgs(self, test_config, console, sample_stats):
        """Test that the three cards land in the generated directory."""
        generator = StatsGenerator(test_config, console=console)
        generator._stats = sample_stats

        paths = generator.generate_svgs()

        assert [p.name for p in paths] == [
            "stats-overview.svg",
            "languages.svg",
            "productivity.svg",
        ]
        for path in paths:
            assert path.parent == test_config.generated_dir
            assert path.read_text(encoding="utf-8").startswith("<svg")

    def test_generate_outputs(self, test_config, console, sample_stats):
        """Test that README and index.html are written."""
        generator = StatsGenerator(test_config, console=console)
        generator._stats = sample_stats
        now = datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)

        readme, index = generator.generate_outputs(now=now)

        assert "<!-- STATS:START -->" in readme.read_text(encoding="utf-8")
        assert "October 19, 2026 at 8:00 AM UTC" in index.read_text(encoding="utf-8")

    def test_overwrites_existing_files(self, test_config, console, sample_stats):
        test_config.readme_path.write_text("old content", encoding="utf-8")
        generator = StatsGenerator(test_config, console=console)
        generator._stats = sample_stats

        generator.generate_outputs()

        assert "old content" not in test_config.readme_path.read_text(encoding="utf-8")

    @pytest.mark.asyncio
    async def test_run(self, test_config, console, output, now):
        """Test a full run against a mocked GitHub."""
        generator = StatsGenerator(
            test_config,
            console=console,
            transport=httpx.MockTransport(github_handler),
            colors_transport=httpx.MockTransport(lambda request: httpx.Response(404)),
        )

        stats = await generator.run(now=now)

        assert stats.user_id == 7
        assert stats.total_commits == 12
        assert stats.streak.current_streak == 2
        assert stats.languages[0].name == "Python"
        assert stats.repo_activity[0].name == "alpha"

        assert (test_config.generated_dir / "languages.svg").exists()
        assert test_config.readme_path.exists()
        assert test_config.index_path.exists()

        text = output.getvalue()
        assert "GitHub Stats Factory completed successfully!" in text
        assert "Python (100.0%)" in text
        assert "Most Active Repositories" in text

    @pytest.mark.asyncio
    async def test_run_without_token_makes_no_requests(self, test_config, console):
        test_config.github_token = None
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(500)

        generator = StatsGenerator(test_config, console=console, transport=httpx.MockTransport(handler))

        with pytest.raises(ConfigError):
            await generator.run()

        assert calls == []

    @pytest.mark.asyncio
    async def test_run_fetch_failure_writes_nothing(self, test_config, console, tmp_path, now):
        """Test that a failed fetch leaves no cards, README or page behind."""
        failing = httpx.MockTransport(
            lambda request: httpx.Response(500, json={"message": "Server Error"})
        )
        generator = StatsGenerator(
            test_config, console=console, transport=failing, colors_transport=failing
        )

        with pytest.raises(StatsFactoryError):
            await generator.run(now=now)

        assert generator.stats is None
        assert not test_config.readme_path.exists()
        assert not test_config.index_path.exists()
        assert list(tmp_path.rglob("*.svg")) == []


class TestConsole:
    """Tests for the summary console."""

    def test_summary_without_languages(self, empty_stats, output, console):
        console.print_summary(empty_stats)

        text = output.getvalue()
        assert "N/A" in text
        assert "Most Active Repositories" not in text

    def test_quiet(self, sample_stats, output):
        console = Console(quiet=True, console=RichConsole(file=output))

        console.print_header("testuser")
        console.print_summary(sample_stats)
        console.print_error("still shown")

        assert "Summary" not in output.getvalue()
        assert "still shown" in output.getvalue()

    def test_traceback_only_when_verbose(self, output):
        """Test that print_exception is a no-op unless verbose."""
        quiet_console = Console(console=RichConsole(file=output, width=120))
        verbose_console = Console(verbose=True, console=RichConsole(file=output, width=120))

        try:
            raise RuntimeError("kaboom")
        except RuntimeError:
            quiet_console.print_exception()
            assert "kaboom" not in output.getvalue()
            verbose_console.print_exception()

        assert "Traceback" in output.getvalue()
        assert "kaboom" in output.getvalue()

    def test_summary_reports_completion(self, sample_stats, output, console):
        console.print_summary(sample_stats)
        assert "completed successfully" in output.getvalue()
