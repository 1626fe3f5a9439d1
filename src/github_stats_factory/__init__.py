"""GitHub Stats Factory - Generate GitHub profile statistics cards.

Fetches a user's contributions, repositories, languages and commits, then
renders:
- Three SVG stat cards (overview, languages, productivity)
- A README.md with the cards embedded
- A standalone index.html page

Example usage:
    ```python
    import asyncio

    from github_stats_factory import Config, StatsGenerator

    asyncio.run(StatsGenerator(Config.from_env()).run())
    ```
"""

from importlib.metadata import PackageNotFoundError, version

from github_stats_factory.aggregator import StatsAggregator
from github_stats_factory.config import Config
from github_stats_factory.exceptions import (
    ConfigError,
    GenerationError,
    GitHubAPIError,
    GitHubGraphQLError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    RateLimitExceededError,
    StatsFactoryError,
)
from github_stats_factory.generator import StatsGenerator
from github_stats_factory.models import (
    CommitData,
    ContributionDay,
    GitHubStats,
    LanguageStats,
    ProductivityStats,
    RepoActivity,
    RepoInfo,
    StreakInfo,
)

try:
    __version__ = version("github-stats-factory")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"

__all__ = [
    # Orchestration
    "StatsGenerator",
    "StatsAggregator",
    # Configuration
    "Config",
    # Exceptions
    "StatsFactoryError",
    "ConfigError",
    "GitHubAPIError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
    "GitHubGraphQLError",
    "RateLimitExceededError",
    "GenerationError",
    # Models
    "GitHubStats",
    "ContributionDay",
    "StreakInfo",
    "LanguageStats",
    "RepoInfo",
    "CommitData",
    "ProductivityStats",
    "RepoActivity",
]
