"""Shared SVG building blocks for the cards."""

from github_stats_factory.renderers.theme import ANIMATIONS, THEME
from github_stats_factory.utils.formatting import escape_xml


def svg_wrapper(content: str, width: int, height: int, styles: str = "") -> str:
    """Wrap card content in a themed, self-contained ``<svg>`` document."""
    return f"""<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" fill="none" xmlns="http://www.w3.org/2000/svg">
  <style>
    {styles}
    {ANIMATIONS}
  </style>

  <rect x="0.5" y="0.5" width="{width - 1}" height="{height - 1}" rx="4.5" fill="{THEME['bg']}" stroke="{THEME['border']}"/>

  {content}
</svg>"""


def header(text: str, x: int = 25, y: int = 35) -> str:
    return f'<text x="{x}" y="{y}" class="header">{escape_xml(text)}</text>'


def subheader(text: str, x: int = 25, y: int = 54) -> str:
    return f'<text x="{x}" y="{y}" class="subheader">{escape_xml(text)}</text>'


def fmt(value: float) -> str:
    """Render a coordinate with at most two decimals and no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
