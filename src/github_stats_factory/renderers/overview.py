"""Overview card: headline numbers, stat tiles and a 12-week heatmap."""

from github_stats_factory import constants
from github_stats_factory.models.stats import GitHubStats
from github_stats_factory.renderers.svg import header, subheader, svg_wrapper
from github_stats_factory.renderers.theme import THEME, font, level_color
from github_stats_factory.utils.formatting import escape_xml, format_date, format_number

WIDTH = 800
HEIGHT = 500

# Tile grid
CARD_WIDTH = 170
CARD_HEIGHT = 75
CARD_GAP = 20
GRID_X = 40
GRID_Y = 150
GRID_COLUMNS = 4

# Heatmap
CELL_SIZE = 11
CELL_GAP = 3
HEATMAP_X = 40
HEATMAP_Y = 385

# Octicon paths, 16px grid
ICONS = {
    "commit": "M10.5 13.5a3.5 3.5 0 1 1-7 0 3.5 3.5 0 0 1 7 0Z M7 7v1.5M7 15.5V17M3.5 12H2M15.5 12H12",
    "pr": "M10 4a2 2 0 1 1-4 0 2 2 0 0 1 4 0ZM6 6v3.5a2.5 2.5 0 1 0 5 0V6M4 13.5a2.5 2.5 0 1 1 5 0 2.5 2.5 0 0 1-5 0Zm10-3a2.5 2.5 0 1 1-5 0 2.5 2.5 0 0 1 5 0Z",
    "review": "M8 1.5c-3.5 0-6.5 3-6.5 6.5s3 6.5 6.5 6.5 6.5-3 6.5-6.5-3-6.5-6.5-6.5ZM8 13a5 5 0 1 1 0-10 5 5 0 0 1 0 10Z M8 5a3 3 0 1 0 0 6 3 3 0 0 0 0-6Z",
    "issue": "M8 9.5a1.5 1.5 0 1 0 0-3 1.5 1.5 0 0 0 0 3Z M8 0a8 8 0 1 0 0 16A8 8 0 0 0 8 0ZM1.5 8a6.5 6.5 0 1 1 13 0 6.5 6.5 0 0 1-13 0Z",
    "repo": "M2 2.5A2.5 2.5 0 0 1 4.5 0h8.75a.75.75 0 0 1 .75.75v12.5a.75.75 0 0 1-.75.75h-2.5a.75.75 0 1 1 0-1.5h1.75v-2h-8a1 1 0 0 0-.714 1.7.75.75 0 0 1-1.072 1.05A2.495 2.495 0 0 1 2 11.5v-9Z",
    "star": "M8 .25a.75.75 0 0 1 .673.418l1.882 3.815 4.21.612a.75.75 0 0 1 .416 1.279l-3.046 2.97.719 4.192a.75.75 0 0 1-1.088.791L8 12.347l-3.766 1.98a.75.75 0 0 1-1.088-.79l.72-4.194L.818 6.374a.75.75 0 0 1 .416-1.28l4.21-.611L7.327.668A.75.75 0 0 1 8 .25Z",
    "fork": "M5 5.372v.878c0 .414.336.75.75.75h4.5a.75.75 0 0 0 .75-.75v-.878a2.25 2.25 0 1 1 1.5 0v.878a2.25 2.25 0 0 1-2.25 2.25h-1.5v2.128a2.251 2.251 0 1 1-1.5 0V8.5h-1.5A2.25 2.25 0 0 1 3.5 6.25v-.878a2.25 2.25 0 1 1 1.5 0Z",
    "user": "M10.561 8.073a6.005 6.005 0 0 1 3.432 5.142.75.75 0 1 1-1.498.07 4.5 4.5 0 0 0-8.99 0 .75.75 0 0 1-1.498-.07 6.004 6.004 0 0 1 3.431-5.142 3.999 3.999 0 1 1 5.123 0ZM10.5 5a2.5 2.5 0 1 0-5 0 2.5 2.5 0 0 0 5 0Z",
}


def _styles() -> str:
    return f"""
      .header {{ font: {font(600, 22)}; fill: {THEME['text']}; }}
      .subheader {{ font: {font(400, 13)}; fill: {THEME['text_secondary']}; }}
      .card-bg {{ fill: {THEME['border']}; opacity: 0.15; }}
      .card-label {{ font: {font(600, 12)}; fill: {THEME['text_secondary']}; text-transform: uppercase; letter-spacing: 0.5px; }}
      .card-value {{ font: {font(600, 20)}; fill: {THEME['text']}; }}
      .card-sub {{ font: {font(400, 11)}; fill: {THEME['text_secondary']}; }}
      .hero-val {{ font: {font(700, 32)}; fill: {THEME['accent']}; }}
      .hero-lbl {{ font: {font(400, 14)}; fill: {THEME['text_secondary']}; }}
      .heatmap-lbl {{ font: {font(600, 12)}; fill: {THEME['text']}; }}
      .slide-content {{
        animation: slideUp 0.6s cubic-bezier(0.2, 0, 0.2, 1) forwards;
        transform-origin: center;
      }}
      @keyframes slideUp {{
        from {{ opacity: 0; transform: translateY(10px); }}
        to {{ opacity: 1; transform: translateY(0); }}
      }}
    """


def _hero(stats: GitHubStats) -> str:
    streak = stats.streak
    return f"""
      <g transform="translate(40, 80)">
        <g class="slide-content" style="animation-delay: 0.1s">
          <g>
            <text x="0" y="0" class="hero-lbl">Total Contributions</text>
            <text x="0" y="35" class="hero-val">{format_number(streak.total_contributions)}</text>
          </g>
          <line x1="220" y1="0" x2="220" y2="45" stroke="{THEME['border']}" stroke-width="1" opacity="0.3"/>
          <g transform="translate(260, 0)">
            <text x="0" y="0" class="hero-lbl">Current Streak</text>
            <text x="0" y="35" class="hero-val" fill="url(#grad-streak)">{streak.current_streak} days</text>
            <text x="140" y="35" class="card-sub" dy="-5">Best: {streak.longest_streak}</text>
          </g>
        </g>
      </g>"""


def _tiles(stats: GitHubStats) -> list[dict]:
    pct = stats.contribution_percentages
    return [
        {"label": "Commits", "value": stats.total_commits, "icon": "commit", "sub": f"{pct.commits}%", "color": "#3b82f6"},
        {"label": "Pull Requests", "value": stats.total_prs, "icon": "pr", "sub": f"{pct.prs}%", "color": "#10b981"},
        {"label": "Code Reviews", "value": stats.total_reviews, "icon": "review", "sub": f"{pct.reviews}%", "color": "#8b5cf6"},
        {"label": "Issues", "value": stats.total_issues, "icon": "issue", "sub": f"{pct.issues}%", "color": "#f59e0b"},
        {"label": "Repositories", "value": stats.total_repos, "icon": "repo", "sub": "Owned", "color": "#ec4899"},
        {"label": "Stars Earned", "value": stats.total_stars, "icon": "star", "sub": "Total", "color": "#eab308"},
        {"label": "Forks", "value": stats.total_forks, "icon": "fork", "sub": "Total", "color": "#64748b"},
        {"label": "Followers", "value": stats.followers, "icon": "user", "sub": "Network", "color": "#06b6d4"},
    ]


def _grid(stats: GitHubStats) -> str:
    parts = []
    for i, tile in enumerate(_tiles(stats)):
        row, col = divmod(i, GRID_COLUMNS)
        x = GRID_X + col * (CARD_WIDTH + CARD_GAP)
        y = GRID_Y + row * (CARD_HEIGHT + CARD_GAP)
        parts.append(f"""
        <g transform="translate({x}, {y})">
          <g class="slide-content" style="animation-delay: {0.2 + i * 0.05:.2f}s">
            <rect width="{CARD_WIDTH}" height="{CARD_HEIGHT}" rx="8" class="card-bg" />
            <g transform="translate({CARD_WIDTH - 28}, 12) scale(1.2)">
              <path d="{ICONS[tile['icon']]}" fill="{tile['color']}" opacity="0.8"/>
            </g>
            <g transform="translate(16, 28)">
              <text y="0" class="card-label" fill="{tile['color']}">{escape_xml(tile['label'])}</text>
              <text y="24" class="card-value">{format_number(tile['value'])}</text>
              <text y="38" class="card-sub" opacity="0.7">{escape_xml(tile['sub'])}</text>
            </g>
          </g>
        </g>""")
    return "".join(parts)


def _heatmap_cells(stats: GitHubStats) -> str:
    recent = stats.contribution_graph[-constants.HEATMAP_DAYS :]
    cells = []
    for i, day in enumerate(recent):
        week, weekday = divmod(i, 7)
        x = HEATMAP_X + week * (CELL_SIZE + CELL_GAP)
        y = HEATMAP_Y + weekday * (CELL_SIZE + CELL_GAP)
        cells.append(
            f'<rect x="{x}" y="{y}" width="{CELL_SIZE}" height="{CELL_SIZE}" rx="2" '
            f'fill="{level_color(day.level)}" opacity="0.9">'
            f"<title>{day.date.isoformat()}: {day.count}</title></rect>"
        )
    return "".join(cells)


def _bottom(stats: GitHubStats) -> str:
    return f"""
      <g class="slide-content" style="animation-delay: 0.6s">
        <rect x="40" y="350" width="740" height="120" rx="8" class="card-bg" />
        <g>
          <text x="55" y="375" class="heatmap-lbl">Recent Activity (12 Weeks)</text>
          {_heatmap_cells(stats)}
        </g>
        <g transform="translate(550, 380)">
          <text x="0" y="0" class="card-label">Average</text>
          <text x="0" y="25" class="card-value">{stats.avg_commits_per_day} / day</text>
          <text x="0" y="60" class="card-label">Contributed To</text>
          <text x="0" y="85" class="card-value">{format_number(stats.contributed_to)} Repos</text>
        </g>
      </g>"""


def render_overview(stats: GitHubStats) -> str:
    """Render the overview card."""
    period = f"{format_date(stats.period_start)} - {format_date(stats.period_end)}"
    content = f"""
      <defs>
        <linearGradient id="grad-streak" x1="0%" y1="0%" x2="100%" y2="0%">
          <stop offset="0%" stop-color="#fbbf24" />
          <stop offset="100%" stop-color="#f59e0b" />
        </linearGradient>
      </defs>
      <g>
        {header("GitHub Overview")}
        {subheader(period)}
      </g>
      {_hero(stats)}
      {_grid(stats)}
      {_bottom(stats)}
    """
    return svg_wrapper(content, WIDTH, HEIGHT, _styles())
