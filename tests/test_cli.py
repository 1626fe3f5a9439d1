"""Tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from github_stats_factory import __version__
from github_stats_factory.cli import app
from github_stats_factory.generator import StatsGenerator

runner = CliRunner()


@pytest.fixture
def env(monkeypatch, tmp_path):
    """Isolated environment with a token and output paths under tmp_path."""
    monkeypatch.setenv("GITHUB_TOKEN", "test_token")
    monkeypatch.setenv("GITHUB_STATS_TOKEN", "")
    monkeypatch.setenv("GITHUB_USERNAME", "envuser")
    monkeypatch.setenv("GENERATED_DIR", str(tmp_path / "generated"))
    monkeypatch.setenv("README_PATH", str(tmp_path / "README.md"))
    monkeypatch.setenv("INDEX_PATH", str(tmp_path / "index.html"))
    return monkeypatch


@pytest.fixture
def captured(env):
    """Replace the generator run and record the config it was given."""
    configs = []

    async def fake_run(self, now=None):
        configs.append(self.config)

    env.setattr(StatsGenerator, "run", fake_run)
    return configs


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestGenerate:
    """Tests for the generate command."""

    def test_missing_token(self, env):
        """Test that a missing token exits with a usage hint."""
        env.setenv("GITHUB_TOKEN", "")

        result = runner.invoke(app, ["generate"])

        assert result.exit_code == 1
        assert "GITHUB_TOKEN is not set" in result.output
        assert "Example: GITHUB_TOKEN=ghp_xxxxxxxxxxxx" in result.output

    def test_uses_environment(self, captured):
        result = runner.invoke(app, ["generate"])

        assert result.exit_code == 0
        assert captured[0].github_username == "envuser"
        assert captured[0].github_token == "test_token"

    def test_options_override_environment(self, captured, tmp_path):
        """Test that command line options win over environment variables."""
        result = runner.invoke(
            app,
            [
                "generate",
                "--username",
                "cliuser",
                "--output-dir",
                str(tmp_path / "cards"),
                "--readme",
                str(tmp_path / "PROFILE.md"),
                "--index",
                str(tmp_path / "page.html"),
            ],
        )

        assert result.exit_code == 0
        config = captured[0]
        assert config.github_username == "cliuser"
        assert config.generated_dir == tmp_path / "cards"
        assert config.readme_path == tmp_path / "PROFILE.md"
        assert config.index_path == tmp_path / "page.html"

    def test_unexpected_error(self, env):
        async def failing_run(self, now=None):
            raise RuntimeError("boom")

        env.setattr(StatsGenerator, "run", failing_run)

        result = runner.invoke(app, ["generate"])

        assert result.exit_code == 1
        assert "Error: Could not generate stats: boom" in result.output


class TestCheckToken:
    """Tests for the check-token command."""

    def test_configured(self, env):
        result = runner.invoke(app, ["check-token"])

        assert result.exit_code == 0
        assert "GitHub token is configured" in result.output
        assert "Username: envuser" in result.output

    def test_missing(self, env):
        env.setenv("GITHUB_TOKEN", "")

        result = runner.invoke(app, ["check-token"])

        assert result.exit_code == 1
        assert "No GitHub token configured" in result.output
