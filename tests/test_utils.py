"""Tests for utility modules."""

from datetime import date

import pytest

from github_stats_factory.config import Config, parse_social_links
from github_stats_factory.exceptions import ConfigError
from github_stats_factory.utils.formatting import (
    escape_xml,
    format_date,
    format_lines_of_code,
    format_number,
    round_half_up,
)
from github_stats_factory.utils.pagination import (
    get_next_page_url,
    parse_link_header,
    with_query,
)


class TestParseLinkHeader:
    """Tests for Link header parsing."""

    def test_parse_single_link(self):
        """Test parsing a single link."""
        header = '<https://api.github.com/users?page=2>; rel="next"'
        links = parse_link_header(header)

        assert links["next"] == "https://api.github.com/users?page=2"

    def test_parse_multiple_links(self):
        """Test parsing multiple links."""
        header = (
            '<https://api.github.com/users?page=2>; rel="next", '
            '<https://api.github.com/users?page=5>; rel="last", '
            '<https://api.github.com/users?page=1>; rel="first"'
        )
        links = parse_link_header(header)

        assert links["next"] == "https://api.github.com/users?page=2"
        assert links["last"] == "https://api.github.com/users?page=5"
        assert links["first"] == "https://api.github.com/users?page=1"

    def test_parse_empty_header(self):
        """Test parsing empty header."""
        assert parse_link_header(None) == {}
        assert parse_link_header("") == {}

    def test_get_next_page_url(self):
        """Test extracting next page URL."""
        header = '<https://api.github.com/users?page=2>; rel="next"'
        assert get_next_page_url(header) == "https://api.github.com/users?page=2"

    def test_get_next_page_url_missing(self):
        """Test when no next page exists."""
        header = '<https://api.github.com/users?page=1>; rel="first"'
        assert get_next_page_url(header) is None


class TestWithQuery:
    """Tests for appending query parameters."""

    def test_simple_endpoint(self):
        """Test adding parameters to a bare endpoint."""
        assert with_query("/users", {"page": 2, "per_page": 100}) == "/users?page=2&per_page=100"

    def test_endpoint_with_existing_params(self):
        """Test adding parameters to an endpoint that already has a query."""
        url = with_query("/user/repos?sort=updated", {"page": 3})
        assert url == "/user/repos?sort=updated&page=3"

    def test_skips_none_values(self):
        """Test that None values are left out."""
        assert with_query("/commits", {"author": None, "since": None}) == "/commits"

    def test_encodes_values(self):
        """Test that reserved characters in values are percent-encoded."""
        url = with_query("/commits", {"author": "a&b=c", "since": "2024-03-15T00:00:00+00:00"})
        assert url == "/commits?author=a%26b%3Dc&since=2024-03-15T00%3A00%3A00%2B00%3A00"


class TestFormatting:
    """Tests for formatting helpers."""

    def test_escape_xml(self):
        """Test that markup characters and quotes are escaped."""
        assert escape_xml('<a href="x">Tom & Jerry\'s</a>') == (
            "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;"
        )

    @pytest.mark.parametrize(
        "value,digits,expected",
        [(2.5, 0, 3.0), (3.5, 0, 4.0), (0.25, 1, 0.3), (1.04, 1, 1.0), (0.0, 1, 0.0)],
    )
    def test_round_half_up(self, value, digits, expected):
        """Test that halves always round up."""
        assert round_half_up(value, digits) == pytest.approx(expected)

    def test_format_number(self):
        """Test thousands separators."""
        assert format_number(1234567) == "1,234,567"
        assert format_number(0) == "0"
        assert format_number(2.5) == "2.5"

    @pytest.mark.parametrize(
        "size,expected",
        [(700, "10"), (70_000, "1k"), (700_000, "10k"), (70_000_000, "1.0M")],
    )
    def test_format_lines_of_code(self, size, expected):
        """Test the bytes -> estimated lines formatting."""
        assert format_lines_of_code(size) == expected

    def test_format_date(self):
        """Test short month date formatting."""
        assert format_date(date(2025, 1, 5)) == "Jan 5, 2025"


class TestConfig:
    """Tests for configuration loading and validation."""

    def test_from_env(self, monkeypatch):
        """Test that environment variables populate the config."""
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_env")
        monkeypatch.delenv("GITHUB_STATS_TOKEN", raising=False)
        monkeypatch.setenv("GITHUB_USERNAME", "envuser")
        monkeypatch.setenv("GENERATED_DIR", "out")
        monkeypatch.setenv("SOCIAL_LINKS", "Blog=https://blog.test")

        config = Config.from_env()

        assert config.github_token == "ghp_env"
        assert config.github_username == "envuser"
        assert str(config.generated_dir) == "out"
        assert config.social_links[0].name == "Blog"

    def test_stats_token_preferred(self, monkeypatch):
        """Test that GITHUB_STATS_TOKEN wins over GITHUB_TOKEN."""
        monkeypatch.setenv("GITHUB_TOKEN", "ghp_generic")
        monkeypatch.setenv("GITHUB_STATS_TOKEN", "ghp_specific")

        assert Config.from_env().github_token == "ghp_specific"

    def test_validate_missing_token(self):
        """Test that a missing token fails validation with context."""
        config = Config(github_token=None, github_username="someone")

        with pytest.raises(ConfigError, match="GITHUB_TOKEN") as exc_info:
            config.validate()

        assert exc_info.value.context == {"username": "someone"}

    def test_validate_empty_username(self):
        """Test that a blank username fails validation."""
        with pytest.raises(ConfigError):
            Config(github_token="t", github_username="  ").validate()

    def test_display_name_falls_back_to_username(self):
        """Test that the display name defaults to the username."""
        assert Config(github_token="t", github_username="me").display_name == "me"

    def test_parse_social_links(self):
        """Test parsing Name=url pairs, skipping malformed entries."""
        links = parse_social_links("Blog=https://blog.test, Bad , Mail=mailto:a=b@test,=x")

        assert [link.name for link in links] == ["Blog", "Mail"]
        assert links[1].url == "mailto:a=b@test"

    def test_parse_social_links_empty(self):
        """Test that no value means no links."""
        assert parse_social_links(None) == []
