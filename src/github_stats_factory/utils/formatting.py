"""Formatting helpers shared by the renderers and the console summary."""

import math
from datetime import date
from xml.sax.saxutils import escape

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}

# Average characters (bytes) per line of code, used for line estimates
BYTES_PER_LINE = 70


def escape_xml(text: str) -> str:
    """Escape XML/SVG special characters, quotes included."""
    return escape(str(text), _XML_ENTITIES)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a calculator: halves always go up (2.5 -> 3, 0.25 -> 0.3)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def format_number(num: int | float) -> str:
    """Format a number with thousands separators."""
    if isinstance(num, float) and not num.is_integer():
        return f"{num:,.1f}"
    return f"{int(num):,}"


def format_lines_of_code(size: int) -> str:
    """Estimate lines of code from a byte count (~70 bytes per line)."""
    lines = int(round_half_up(size / BYTES_PER_LINE))
    if lines >= 1_000_000:
        return f"{lines / 1_000_000:.1f}M"
    if lines >= 1000:
        return f"{round_half_up(lines / 1000):.0f}k"
    return format_number(lines)


def format_date(value: date) -> str:
    """Format a date as e.g. ``Jan 5, 2025``."""
    return f"{value.strftime('%b')} {value.day}, {value.year}"
