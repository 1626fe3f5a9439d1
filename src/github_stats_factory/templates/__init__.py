"""README and HTML document renderers."""

from github_stats_factory.templates.html import render_html
from github_stats_factory.templates.readme import render_readme
from github_stats_factory.templates.social import social_links

__all__ = [
    "render_readme",
    "render_html",
    "social_links",
]
