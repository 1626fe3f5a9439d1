"""Dark GitHub theme shared by every card."""

THEME = {
    "bg": "#0d1117",
    "border": "#30363d",
    "text": "#c9d1d9",
    "text_secondary": "#8b949e",
    "accent": "#58a6ff",
}

# Heatmap cell colour per contribution level (0-4)
CONTRIBUTION_COLORS = (
    "#161b22",
    "#0e4429",
    "#006d32",
    "#26a641",
    "#39d353",
)

FONT_FAMILY = "'Segoe UI', Ubuntu, Sans-Serif"

ANIMATIONS = """
  @keyframes fadeIn {
    from { opacity: 0; }
    to { opacity: 1; }
  }

  .fade-in { animation: fadeIn 1.2s ease-out; }
"""


def level_color(level: int) -> str:
    """Heatmap colour for a contribution level, clamped to 0-4."""
    return CONTRIBUTION_COLORS[max(0, min(level, len(CONTRIBUTION_COLORS) - 1))]


def font(weight: int, size: int) -> str:
    """CSS ``font`` shorthand in the card typeface."""
    return f"{weight} {size}px {FONT_FAMILY}"
