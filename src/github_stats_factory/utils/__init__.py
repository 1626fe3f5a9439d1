"""Utility modules for GitHub Stats Factory."""

from github_stats_factory.utils.formatting import (
    escape_xml,
    format_date,
    format_lines_of_code,
    format_number,
    round_half_up,
)
from github_stats_factory.utils.pagination import get_next_page_url, parse_link_header, with_query
from github_stats_factory.utils.rate_limiter import RateLimiter

__all__ = [
    "RateLimiter",
    "parse_link_header",
    "get_next_page_url",
    "with_query",
    "escape_xml",
    "format_date",
    "format_lines_of_code",
    "format_number",
    "round_half_up",
]
