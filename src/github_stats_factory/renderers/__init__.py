"""SVG card renderers."""

from github_stats_factory.renderers.languages import render_languages
from github_stats_factory.renderers.overview import render_overview
from github_stats_factory.renderers.productivity import render_productivity

__all__ = [
    "render_overview",
    "render_languages",
    "render_productivity",
]
