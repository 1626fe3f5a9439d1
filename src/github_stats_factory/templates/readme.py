"""README.md document."""

import os
from pathlib import Path

from github_stats_factory import constants
from github_stats_factory.config import Config
from github_stats_factory.models.stats import GitHubStats
from github_stats_factory.templates.social import social_links
from github_stats_factory.utils.formatting import escape_xml

STATS_START = "<!-- STATS:START -->"
STATS_END = "<!-- STATS:END -->"

CARDS = (
    (constants.SVG_STATS_OVERVIEW, "GitHub Stats"),
    (constants.SVG_LANGUAGES, "Top Languages"),
    (constants.SVG_PRODUCTIVITY, "Productivity & Commit Semantics"),
)


def cards_href(generated_dir: Path, document: Path) -> str:
    """Path of the cards directory as seen from a document, in URL form."""
    return Path(os.path.relpath(generated_dir, document.parent)).as_posix()


def render_header(config: Config) -> str:
    return f"""<h1 align="center">Hi, I'm {escape_xml(config.display_name)}</h1>
<h3 align="center">{escape_xml(config.profile_tagline)}</h3>"""


def render_connect(config: Config) -> str:
    links = "\n".join(
        f"""  <a href="{escape_xml(link.url)}" target="_blank">
    <img align="center" src="{escape_xml(link.icon_url)}" alt="{escape_xml(link.name.lower())}" height="30" />
  </a>"""
        for link in social_links(config)
    )
    return f"""<h3 align="left">Connect with Me:</h3>
<p align="left">
{links}
</p>"""


def render_stats_section(generated_dir: str) -> str:
    """Card embeds between the STATS markers, relative to the README."""
    images = "\n\n".join(
        f"""<p>
  <img src="{escape_xml(generated_dir)}/{filename}" alt="{escape_xml(alt)}" width="100%" />
</p>"""
        for filename, alt in CARDS
    )
    return f"{STATS_START}\n{images}\n{STATS_END}"


def render_languages_section(stats: GitHubStats, limit: int = constants.TOP_LANGUAGES) -> str:
    languages = stats.languages[:limit]
    if not languages:
        return "<h3 align=\"left\">Languages:</h3>\n<p align=\"left\">No language data yet.</p>"
    items = "\n".join(
        f"- **{lang.name}** ({lang.percentage:.1f}%)" for lang in languages
    )
    return f'<h3 align="left">Languages:</h3>\n\n{items}'


def render_readme(stats: GitHubStats, config: Config) -> str:
    """Render the full README document."""
    sections = [
        render_header(config),
        render_connect(config),
        render_stats_section(cards_href(config.generated_dir, config.readme_path)),
        render_languages_section(stats, limit=config.top_languages),
    ]
    return "\n\n".join(sections) + "\n"
