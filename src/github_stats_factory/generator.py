"""End-to-end report generation: fetch, render, write, summarize."""

import logging
from datetime import datetime, timezone
from pathlib import Path

import httpx

from github_stats_factory import constants
from github_stats_factory.aggregator import StatsAggregator
from github_stats_factory.config import Config
from github_stats_factory.exceptions import GenerationError
from github_stats_factory.models.stats import GitHubStats
from github_stats_factory.output.console import Console
from github_stats_factory.renderers import render_languages, render_overview, render_productivity
from github_stats_factory.services.github_graphql_client import GitHubGraphQLClient
from github_stats_factory.services.github_rest_client import GitHubRestClient
from github_stats_factory.templates import render_html, render_readme
from github_stats_factory.utils.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class StatsGenerator:
    """Runs one report generation for the configured user.

    Example usage:
        ```python
        generator = StatsGenerator(Config.from_env())
        await generator.run()
        ```

    Args:
        config: Application configuration
        console: Console for progress output (a default one is created)
        transport: Optional httpx transport for the GitHub API clients
        colors_transport: Optional httpx transport for the language colour fetch
    """

    def __init__(
        self,
        config: Config,
        console: Console | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        colors_transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.console = console or Console()
        self._transport = transport
        self._colors_transport = colors_transport
        self._stats: GitHubStats | None = None

    @property
    def stats(self) -> GitHubStats | None:
        """Statistics from the last fetch, if any."""
        return self._stats

    def initialize(self) -> None:
        """Validate configuration before any request is made.

        Raises:
            ConfigError: If the configuration is incomplete
        """
        self.config.validate()

    async def fetch_data(self, now: datetime | None = None) -> GitHubStats:
        """Fetch and aggregate all statistics."""
        self.console.print_step(constants.MSG_FETCHING_DATA)

        rate_limiter = RateLimiter()
        async with GitHubRestClient(
            self.config, rate_limiter=rate_limiter, transport=self._transport
        ) as rest_client, GitHubGraphQLClient(
            self.config, rate_limiter=rate_limiter, transport=self._transport
        ) as graphql_client:
            aggregator = StatsAggregator(
                self.config,
                rest_client,
                graphql_client,
                colors_transport=self._colors_transport,
            )
            self._stats = await aggregator.fetch_all_stats(now=now)

        logger.debug("Rate limit status after fetch: %s", rate_limiter.get_status())
        return self._stats

    def _require_stats(self, action: str) -> GitHubStats:
        if self._stats is None:
            raise GenerationError(f"Stats must be fetched before {action}")
        return self._stats

    def generate_svgs(self) -> list[Path]:
        """Render the three cards into the generated directory."""
        stats = self._require_stats("generating SVGs")
        self.console.print_step(constants.MSG_GENERATING_SVG)

        output_dir = self.config.generated_dir
        output_dir.mkdir(parents=True, exist_ok=True)

        cards = (
            (constants.SVG_STATS_OVERVIEW, render_overview(stats)),
            (
                constants.SVG_LANGUAGES,
                render_languages(
                    stats,
                    limit=self.config.top_languages,
                    threshold=self.config.other_threshold,
                ),
            ),
            (constants.SVG_PRODUCTIVITY, render_productivity(stats)),
        )

        written = []
        for filename, markup in cards:
            path = output_dir / filename
            _write(path, markup)
            self.console.print_written(str(path))
            written.append(path)
        return written

    def generate_outputs(self, now: datetime | None = None) -> list[Path]:
        """Write the README and the HTML page."""
        stats = self._require_stats("generating outputs")
        now = now or datetime.now(timezone.utc)

        self.console.print_step(constants.MSG_GENERATING_README)
        _write(self.config.readme_path, render_readme(stats, self.config))
        self.console.print_written(str(self.config.readme_path))

        self.console.print_step(constants.MSG_GENERATING_HTML)
        _write(self.config.index_path, render_html(stats, self.config, now))
        self.console.print_written(str(self.config.index_path))

        return [self.config.readme_path, self.config.index_path]

    def print_summary(self) -> None:
        """Print the human-readable run summary."""
        stats = self._require_stats("printing summary")
        self.console.print_summary(stats)

    async def run(self, now: datetime | None = None) -> GitHubStats:
        """Validate, fetch, render and report in one go."""
        self.console.print_header(self.config.github_username)
        self.initialize()
        stats = await self.fetch_data(now=now)
        self.generate_svgs()
        self.generate_outputs(now=now)
        self.print_summary()
        return stats


def _write(path: Path, content: str) -> None:
    """Overwrite a file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s (%d bytes)", path, len(content))
