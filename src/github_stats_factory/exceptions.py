"""Exceptions for GitHub Stats Factory.

Exception Hierarchy:
    StatsFactoryError (base)
    ├── ConfigError (missing or invalid configuration, raised before any request)
    ├── GitHubAPIError (HTTP API errors with status codes)
    │   ├── GitHubRateLimitError (403/429 rate limit from API response)
    │   └── GitHubNotFoundError (404 not found)
    ├── GitHubGraphQLError (GraphQL API errors)
    ├── RateLimitExceededError (local rate limit tracking, before making request)
    └── GenerationError (rendering or reporting before stats were fetched)

Usage:
    - ConfigError: Reported with a usage hint by the CLI
    - GitHubRateLimitError: Raised when GitHub API returns a rate limit message
    - RateLimitExceededError: Raised by local RateLimiter when limits are exhausted
      (prevents making requests that would fail)
"""

from typing import Any

__all__ = [
    "StatsFactoryError",
    "ConfigError",
    "GitHubAPIError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
    "GitHubGraphQLError",
    "RateLimitExceededError",
    "GenerationError",
]


class StatsFactoryError(Exception):
    """Base exception for all GitHub Stats Factory errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ConfigError(StatsFactoryError):
    """Raised when configuration is missing or invalid."""

    pass


class GitHubAPIError(StatsFactoryError):
    """Base exception for GitHub API errors (HTTP responses with error status codes)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict | None = None,
    ):
        super().__init__(message, context={"status_code": status_code})
        self.status_code = status_code
        self.response_body = response_body


class GitHubRateLimitError(GitHubAPIError):
    """Raised when GitHub API returns a rate limit error.

    For preemptive rate limiting (before making requests), see RateLimitExceededError.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = 403,
        response_body: dict | None = None,
        reset_time: float | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)
        self.reset_time = reset_time


class GitHubNotFoundError(GitHubAPIError):
    """Raised when a GitHub resource is not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 404,
        response_body: dict | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)


class GitHubGraphQLError(StatsFactoryError):
    """Exception for GraphQL API errors."""

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []


class RateLimitExceededError(StatsFactoryError):
    """Raised by local rate limiter when limits are exhausted.

    Unlike GitHubRateLimitError, this does not involve an actual API call.
    """

    pass


class GenerationError(StatsFactoryError):
    """Raised when output is requested before stats have been fetched."""

    pass
