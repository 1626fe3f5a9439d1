"""Productivity card: weekly cadence donut and a 24-hour commit clock."""

import math

from github_stats_factory.models.stats import GitHubStats
from github_stats_factory.renderers.svg import fmt, header, svg_wrapper
from github_stats_factory.renderers.theme import THEME, font
from github_stats_factory.utils.formatting import format_number, round_half_up

WIDTH = 800
HEIGHT = 380

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

# Sunday first, matching ProductivityStats.weekday_distribution
DAY_COLORS = (
    "#fb7185",
    "#f472b6",
    "#fbbf24",
    "#34d399",
    "#60a5fa",
    "#818cf8",
    "#a78bfa",
)

# Donut slices and legend run Monday -> Sunday
DONUT_ORDER = (1, 2, 3, 4, 5, 6, 0)

# Donut geometry
DONUT_CX = 240
DONUT_CY = 170
DONUT_R = 85
DONUT_WIDTH = 18

# Clock geometry
CLOCK_CX = 185
CLOCK_CY = 210
CLOCK_R = 60
CLOCK_MAX_BAR = 70
CLOCK_MIN_BAR = 4


def _styles() -> str:
    return f"""
      .header {{ font: {font(600, 20)}; fill: {THEME['text']}; }}
      .chart-label {{ font: {font(600, 12)}; fill: {THEME['text_secondary']}; }}
      .chart-value {{ font: {font(600, 24)}; fill: {THEME['text']}; }}
      .chart-sub {{ font: {font(400, 11)}; fill: {THEME['text_secondary']}; }}
      .legend-key {{ font: {font(600, 11)}; fill: {THEME['text']}; }}
      .legend-val {{ font: {font(400, 11)}; fill: {THEME['text_secondary']}; }}
      .bar-anim {{
        animation: scaleUp 1s cubic-bezier(0.4, 0, 0.2, 1) forwards;
        stroke-dasharray: 200;
        stroke-dashoffset: 200;
        transform-origin: center;
      }}
      .slice-anim {{
        animation: rotateIn 0.8s cubic-bezier(0.4, 0, 0.2, 1) forwards;
        transform-origin: {DONUT_CX}px {DONUT_CY}px;
      }}
      @keyframes scaleUp {{ to {{ stroke-dashoffset: 0; }} }}
      @keyframes rotateIn {{
        from {{ transform: scale(0.8) rotate(-10deg); opacity: 0; }}
        to {{ transform: scale(1) rotate(0deg); opacity: 1; }}
      }}
    """


def _polar(cx: float, cy: float, radius: float, angle: float) -> tuple[str, str]:
    return fmt(cx + radius * math.cos(angle)), fmt(cy + radius * math.sin(angle))


def _slice_path(start: float, end: float) -> str:
    """Annular sector between two angles (radians, clockwise from 3 o'clock)."""
    inner = DONUT_R - DONUT_WIDTH
    large_arc = 1 if end - start > math.pi else 0
    x1, y1 = _polar(DONUT_CX, DONUT_CY, inner, start)
    x2, y2 = _polar(DONUT_CX, DONUT_CY, DONUT_R, start)
    x3, y3 = _polar(DONUT_CX, DONUT_CY, DONUT_R, end)
    x4, y4 = _polar(DONUT_CX, DONUT_CY, inner, end)
    return (
        f"M {x1} {y1} L {x2} {y2} "
        f"A {DONUT_R} {DONUT_R} 0 {large_arc} 1 {x3} {y3} "
        f"L {x4} {y4} "
        f"A {inner} {inner} 0 {large_arc} 0 {x1} {y1} Z"
    )


def most_active_day(weekdays: list[int]) -> int:
    """Index (Sunday first) of the busiest weekday; the earliest wins ties."""
    return max(range(len(weekdays)), key=lambda i: (weekdays[i], -i))


def _weekly_cadence(stats: GitHubStats) -> str:
    weekdays = stats.productivity_stats.weekday_distribution
    total = sum(weekdays)

    if total == 0:
        return (
            f'<text x="{DONUT_CX}" y="{DONUT_CY}" text-anchor="middle" '
            f'class="chart-sub">No Data</text>'
        )

    slices = []
    angle = -math.pi / 2
    for i, day in enumerate(DONUT_ORDER):
        count = weekdays[day]
        if count == 0:
            continue
        title = f"<title>{DAY_NAMES[day]}: {format_number(count)}</title>"
        if count == total:
            # A single full-circle arc has identical end points and draws nothing
            slices.append(
                f'<circle cx="{DONUT_CX}" cy="{DONUT_CY}" r="{DONUT_R - DONUT_WIDTH / 2}" '
                f'fill="none" stroke="{DAY_COLORS[day]}" stroke-width="{DONUT_WIDTH}" '
                f'class="slice-anim">{title}</circle>'
            )
            break
        end = angle + count / total * 2 * math.pi
        slices.append(
            f'<path d="{_slice_path(angle, end)}" fill="{DAY_COLORS[day]}" '
            f'stroke="{THEME["bg"]}" stroke-width="2" class="slice-anim" '
            f'style="animation-delay: {i * 0.05:.2f}s">{title}</path>'
        )
        angle = end

    legend = []
    for i, day in enumerate(DONUT_ORDER):
        row, col = divmod(i, 2)
        percent = int(round_half_up(weekdays[day] / total * 100))
        legend.append(f"""
        <g transform="translate({30 + col * 125}, {280 + row * 20})">
          <rect width="10" height="10" rx="3" fill="{DAY_COLORS[day]}" />
          <text x="16" y="9" class="legend-key">{DAY_NAMES[day]}</text>
          <text x="105" y="9" text-anchor="end" class="legend-val">{percent}%</text>
        </g>""")

    period_days = (stats.period_end - stats.period_start).days or 1
    average = round_half_up(total / period_days, 1)
    busiest = most_active_day(weekdays)

    return f"""
      {''.join(slices)}
      <text x="{DONUT_CX}" y="{DONUT_CY - 5}" text-anchor="middle" class="chart-value">{format_number(total)}</text>
      <text x="{DONUT_CX}" y="{DONUT_CY + 15}" text-anchor="middle" class="chart-sub">Contributions</text>
      {''.join(legend)}
      <g transform="translate(30, 110)">
        <text class="chart-sub" y="0">Avg / Day</text>
        <text class="chart-value" y="25" font-size="20">{average:.1f}</text>
        <text class="chart-sub" y="60">Most Active</text>
        <text class="chart-value" y="85" font-size="20" fill="{DAY_COLORS[busiest]}">{DAY_NAMES[busiest]}</text>
      </g>"""


def _commit_clock(stats: GitHubStats) -> str:
    hours = stats.productivity_stats.hourly_distribution
    peak = max(hours) or 1

    spokes = []
    for hour, count in enumerate(hours):
        if count == 0:
            continue
        angle = hour / 24 * 2 * math.pi - math.pi / 2
        length = max(CLOCK_MIN_BAR, count / peak * CLOCK_MAX_BAR)
        x1, y1 = _polar(CLOCK_CX, CLOCK_CY, CLOCK_R, angle)
        x2, y2 = _polar(CLOCK_CX, CLOCK_CY, CLOCK_R + length, angle)
        gradient = "grad-day" if 6 <= hour <= 18 else "grad-night"
        spokes.append(
            f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" stroke="url(#{gradient})" '
            f'stroke-width="5" stroke-linecap="round" class="bar-anim" '
            f'style="animation-delay: {hour * 0.03:.2f}s"><title>{hour:02d}:00 UTC: {count}</title></line>'
        )

    outer = CLOCK_R + CLOCK_MAX_BAR
    labels = (
        ("12 AM", CLOCK_CX, CLOCK_CY - outer - 15),
        ("6 AM", CLOCK_CX + outer + 25, CLOCK_CY + 4),
        ("12 PM", CLOCK_CX, CLOCK_CY + outer + 20),
        ("6 PM", CLOCK_CX - outer - 25, CLOCK_CY + 4),
    )
    labels_svg = "".join(
        f'<text x="{x}" y="{y}" text-anchor="middle" class="chart-label">{text}</text>'
        for text, x, y in labels
    )

    return f"""
      <circle cx="{CLOCK_CX}" cy="{CLOCK_CY}" r="{CLOCK_R - 5}" fill="none" stroke="{THEME['border']}" stroke-width="1" opacity="0.2" />
      <circle cx="{CLOCK_CX}" cy="{CLOCK_CY}" r="{outer + 5}" fill="none" stroke="{THEME['border']}" stroke-width="1" opacity="0.1" stroke-dasharray="4 4"/>
      {''.join(spokes)}
      {labels_svg}
      <text x="{CLOCK_CX}" y="{CLOCK_CY - 5}" text-anchor="middle" class="chart-value" font-size="18">UTC</text>
      <text x="{CLOCK_CX}" y="{CLOCK_CY + 15}" text-anchor="middle" class="chart-sub">Timezone</text>"""


def render_productivity(stats: GitHubStats) -> str:
    """Render the productivity card."""
    content = f"""
      <defs>
        <linearGradient id="grad-day" x1="0%" y1="0%" x2="100%" y2="100%">
          <stop offset="0%" stop-color="#fbbf24" />
          <stop offset="100%" stop-color="#f59e0b" />
        </linearGradient>
        <linearGradient id="grad-night" x1="0%" y1="0%" x2="100%" y2="100%">
          <stop offset="0%" stop-color="#8b5cf6" />
          <stop offset="100%" stop-color="#6366f1" />
        </linearGradient>
      </defs>
      <g>
        {header("Productivity & Weekly Cadence")}
      </g>
      <g transform="translate(20, 0)">
        {_weekly_cadence(stats)}
      </g>
      <line x1="460" y1="70" x2="460" y2="340" stroke="{THEME['border']}" stroke-width="1" opacity="0.3" stroke-dasharray="4 4" />
      <g transform="translate(430, 0)">
        {_commit_clock(stats)}
      </g>
    """
    return svg_wrapper(content, WIDTH, HEIGHT, _styles())
