"""Language statistics service."""

import asyncio
import logging
from collections.abc import Iterable

import httpx

from github_stats_factory.exceptions import StatsFactoryError
from github_stats_factory.models.repository import LanguageStats, Repository
from github_stats_factory.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)

# Used when the public colour table cannot be fetched
FALLBACK_LANGUAGE_COLORS: dict[str, str] = {
    "TypeScript": "#3178c6",
    "JavaScript": "#f1e05a",
    "Python": "#3572A5",
    "Go": "#00ADD8",
    "Java": "#b07219",
    "C#": "#178600",
    "C": "#555555",
    "C++": "#f34b7d",
    "Rust": "#dea584",
    "Ruby": "#701516",
    "PHP": "#4F5D95",
    "HTML": "#e34c26",
    "CSS": "#563d7c",
    "Shell": "#89e051",
    "Dart": "#00B4AB",
    "Solidity": "#AA6746",
}

DEFAULT_LANGUAGE_COLOR = "#858585"
OTHER_LANGUAGE_COLOR = "#64748b"


async def fetch_language_colors(
    url: str,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, str]:
    """Fetch the language -> hex colour table, falling back to a built-in one."""
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url)
            response.raise_for_status()
            data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Failed to fetch language colors, using fallback: %s", e)
        return dict(FALLBACK_LANGUAGE_COLORS)

    return {
        name: entry["color"]
        for name, entry in data.items()
        if isinstance(entry, dict) and entry.get("color")
    }


def aggregate_language_bytes(
    repo_languages: Iterable[dict[str, int]],
    colors: dict[str, str] | None = None,
) -> list[LanguageStats]:
    """Sum per-repository language bytes into a sorted breakdown.

    Percentages are of the grand total; a zero total yields 0% everywhere.
    """
    colors = colors or {}
    totals: dict[str, int] = {}
    for languages in repo_languages:
        for name, size in languages.items():
            totals[name] = totals.get(name, 0) + size

    total_bytes = sum(totals.values())

    stats = [
        LanguageStats(
            name=name,
            color=colors.get(name) or FALLBACK_LANGUAGE_COLORS.get(name, DEFAULT_LANGUAGE_COLOR),
            percentage=(size / total_bytes * 100) if total_bytes > 0 else 0.0,
            size=size,
        )
        for name, size in totals.items()
    ]
    stats.sort(key=lambda lang: (-lang.size, lang.name))
    return stats


def top_languages_with_other(
    languages: list[LanguageStats],
    limit: int = 8,
    threshold: float = 0.5,
) -> list[LanguageStats]:
    """Keep the ``limit`` largest languages and fold the rest into "Other".

    The "Other" entry is only added when the folded percentage exceeds
    ``threshold``; otherwise the tail is dropped.
    """
    ranked = sorted(languages, key=lambda lang: (-lang.size, lang.name))
    shown, rest = ranked[:limit], ranked[limit:]

    if rest:
        other_percentage = sum(lang.percentage for lang in rest)
        if other_percentage > threshold:
            shown.append(
                LanguageStats(
                    name="Other",
                    color=OTHER_LANGUAGE_COLOR,
                    percentage=other_percentage,
                    size=sum(lang.size for lang in rest),
                )
            )

    return shown


class LanguageService:
    """Fetches per-repository language bytes and builds the language breakdown."""

    def __init__(self, rest_client: GitHubRestClient, batch_size: int = 10):
        self.rest_client = rest_client
        self.batch_size = batch_size

    async def fetch_repo_languages(self, repos: list[Repository]) -> list[dict[str, int]]:
        """Fetch language bytes for each repository with a detected language.

        Repositories that fail to load contribute an empty mapping.
        """
        candidates = [repo for repo in repos if repo.language]
        logger.info("Fetching language breakdown for %d repositories", len(candidates))

        results: list[dict[str, int]] = []
        for i in range(0, len(candidates), self.batch_size):
            batch = candidates[i : i + self.batch_size]
            results.extend(
                await asyncio.gather(*(self._fetch_languages(repo) for repo in batch))
            )

        return results

    async def _fetch_languages(self, repo: Repository) -> dict[str, int]:
        """Fetch language breakdown for a single repository."""
        try:
            return await self.rest_client.get_repo_languages(repo.owner, repo.name)
        except (StatsFactoryError, httpx.HTTPError) as e:
            logger.warning("Could not fetch languages for %s: %s", repo.full_name, e)
            return {}

    async def calculate_language_stats(
        self,
        repos: list[Repository],
        colors: dict[str, str] | None = None,
    ) -> list[LanguageStats]:
        """Fetch and aggregate the language breakdown across repositories."""
        repo_languages = await self.fetch_repo_languages(repos)
        stats = aggregate_language_bytes(repo_languages, colors)

        for lang in stats[:15]:
            logger.debug("  %s: %.2f%% (%d bytes)", lang.name, lang.percentage, lang.size)

        return stats
