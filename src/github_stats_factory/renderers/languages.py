"""Languages card: one labelled progress bar per language."""

from github_stats_factory import constants
from github_stats_factory.models.repository import LanguageStats
from github_stats_factory.models.stats import GitHubStats
from github_stats_factory.renderers.svg import fmt, header, svg_wrapper
from github_stats_factory.renderers.theme import THEME, font
from github_stats_factory.services.language_service import top_languages_with_other
from github_stats_factory.utils.formatting import escape_xml, format_lines_of_code

WIDTH = 800
BAR_HEIGHT = 12
ROW_HEIGHT = 52
MAX_BAR_WIDTH = 720
HEADER_HEIGHT = 80
BOTTOM_PADDING = 30

# Rough advance width of the bold label font
CHAR_WIDTH = 9


def card_height(rows: int) -> int:
    return HEADER_HEIGHT + rows * ROW_HEIGHT + BOTTOM_PADDING


def _row(lang: LanguageStats, index: int, y: int) -> tuple[str, str]:
    bar_width = fmt(lang.percentage / 100 * MAX_BAR_WIDTH)
    delay = f"{0.2 + index * 0.1:.1f}"
    lines = format_lines_of_code(lang.size)
    name = escape_xml(lang.name)

    style = f"""
        @keyframes slide-right-{index} {{
          from {{ width: 0; }}
          to {{ width: {bar_width}px; }}
        }}
        .bar-{index} {{
          animation: slide-right-{index} 1s cubic-bezier(0.2, 0, 0.2, 1) {delay}s forwards;
        }}
        .fade-{index} {{
          animation: fadeIn 0.5s ease-out {delay}s forwards;
          opacity: 0;
        }}"""

    markup = f"""
        <g transform="translate(40, {y})">
          <text x="0" y="0" class="lang-name fade-{index}">{name}</text>
          <text x="{len(lang.name) * CHAR_WIDTH + 10}" y="0" class="lang-lines fade-{index}">{lines} lines</text>
          <text x="{MAX_BAR_WIDTH}" y="0" text-anchor="end" class="lang-percent fade-{index}">{lang.percentage:.1f}%</text>
          <rect x="0" y="12" width="{MAX_BAR_WIDTH}" height="{BAR_HEIGHT}" rx="6" fill="{THEME['border']}" opacity="0.2"/>
          <rect x="0" y="12" width="0" height="{BAR_HEIGHT}" rx="6" fill="{escape_xml(lang.color)}" class="bar-{index}">
            <title>{name}: {lines} lines</title>
          </rect>
        </g>"""
    return style, markup


def render_languages(
    stats: GitHubStats,
    limit: int = constants.TOP_LANGUAGES,
    threshold: float = constants.OTHER_THRESHOLD,
) -> str:
    """Render the languages card, folding the long tail into "Other"."""
    languages = top_languages_with_other(stats.languages, limit=limit, threshold=threshold)

    styles = []
    rows = []
    for index, lang in enumerate(languages):
        style, markup = _row(lang, index, HEADER_HEIGHT + index * ROW_HEIGHT)
        styles.append(style)
        rows.append(markup)

    css = f"""
      .header {{ font: {font(600, 22)}; fill: {THEME['text']}; }}
      .lang-name {{ font: {font(600, 14)}; fill: {THEME['text']}; }}
      .lang-lines {{ font: {font(400, 13)}; fill: {THEME['text_secondary']}; }}
      .lang-percent {{ font: {font(600, 14)}; fill: {THEME['text']}; }}
      {''.join(styles)}
    """

    content = f"""
      <g class="fade-in">
        {header("Top Languages")}
      </g>
      {''.join(rows)}
    """
    return svg_wrapper(content, WIDTH, card_height(len(languages)), css)
