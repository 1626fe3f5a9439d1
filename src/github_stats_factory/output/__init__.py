"""Console output for GitHub Stats Factory."""

from github_stats_factory.output.console import Console

__all__ = [
    "Console",
]
