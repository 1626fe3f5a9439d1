"""GitHub REST API client."""

import logging
from datetime import datetime
from typing import Any, Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from github_stats_factory.config import Config
from github_stats_factory.exceptions import (
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubRateLimitError,
)
from github_stats_factory.utils.pagination import get_next_page_url, with_query
from github_stats_factory.utils.rate_limiter import REST, RateLimiter

logger = logging.getLogger(__name__)

USER_AGENT = "github-stats-factory/0.1.0"
API_VERSION = "2022-11-28"


class GitHubRestClient:
    """Async client for the handful of REST endpoints a report needs.

    Example usage:
        ```python
        async with GitHubRestClient(config) as client:
            repos = await client.get_authenticated_repos()
        ```

    Args:
        config: Application configuration (base URL, token, timeouts)
        rate_limiter: Budget shared with the GraphQL client
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
    """

    def __init__(
        self,
        config: Config,
        rate_limiter: Optional[RateLimiter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self.rate_limiter = rate_limiter or RateLimiter()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "GitHubRestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazily created HTTP client bound to the API base URL."""
        if self._client is None or self._client.is_closed:
            headers = {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": USER_AGENT,
            }
            if self.config.github_token:
                headers["Authorization"] = f"Bearer {self.config.github_token}"
            self._client = httpx.AsyncClient(
                base_url=self.config.github_api_url,
                headers=headers,
                timeout=self.config.request_timeout,
                transport=self._transport,
            )
        return self._client

    @retry(
        retry=retry_if_exception_type((httpx.TimeoutException, httpx.ConnectError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    async def _request(self, endpoint: str) -> httpx.Response:
        """GET an endpoint, spending one request of the REST budget.

        Transport failures are retried; error responses raise immediately.
        """
        await self.rate_limiter.acquire(REST)
        logger.debug("GET %s", endpoint)

        response = await self.client.get(endpoint)
        self.rate_limiter.record(REST, response.headers)
        _raise_for_status(response, endpoint)
        return response

    async def get(self, endpoint: str) -> Any:
        """GET a single resource and decode its JSON body."""
        response = await self._request(endpoint)
        if response.status_code == 204 or not response.content:
            return {}
        return response.json()

    async def get_paginated(
        self,
        endpoint: str,
        max_pages: Optional[int] = None,
        per_page: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """Collect every item of a list endpoint by following ``Link: rel="next"``.

        Args:
            endpoint: API endpoint, optionally with its own query string
            max_pages: Upper bound on pages fetched (None for all)
            per_page: Items per page (defaults to the configured page size)
        """
        per_page = per_page or self.config.default_per_page
        url: Optional[str] = with_query(endpoint, {"per_page": per_page, "page": 1})
        items: list[dict[str, Any]] = []
        pages = 0

        while url and (max_pages is None or pages < max_pages):
            response = await self._request(url)
            pages += 1
            data = response.json() if response.content else []

            if not isinstance(data, list):
                items.append(data)
                break

            items.extend(data)
            url = get_next_page_url(response.headers.get("Link"))

        return items

    async def get_user(self, username: str) -> dict[str, Any]:
        """Profile of a user (includes private repo counts for the token owner)."""
        return await self.get(f"/users/{username}")

    async def get_authenticated_repos(self) -> list[dict[str, Any]]:
        """Repositories owned by the token owner, private ones included."""
        return await self.get_paginated("/user/repos?affiliation=owner&sort=updated")

    async def get_user_repos(self, username: str) -> list[dict[str, Any]]:
        """A user's public repositories."""
        return await self.get_paginated(f"/users/{username}/repos?type=owner&sort=updated")

    async def get_repo_languages(self, owner: str, repo: str) -> dict[str, int]:
        """Language name to byte count for one repository."""
        return await self.get(f"/repos/{owner}/{repo}/languages")

    async def get_repo_commits(
        self,
        owner: str,
        repo: str,
        author: Optional[str] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
        max_pages: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """Commits of a repository, optionally filtered by author and window."""
        endpoint = with_query(
            f"/repos/{owner}/{repo}/commits",
            {"author": author, "since": _iso(since), "until": _iso(until)},
        )
        return await self.get_paginated(endpoint, max_pages=max_pages)


def _raise_for_status(response: httpx.Response, endpoint: str) -> None:
    """Map an error response onto the exception hierarchy."""
    status = response.status_code
    if status < 400:
        return

    if status == 404:
        raise GitHubNotFoundError(
            f"Resource not found: {endpoint}", response_body=_json_or_none(response)
        )

    body = _json_or_none(response) or {}
    message = body.get("message", "Unknown error")

    if status == 429 or (status == 403 and "rate limit" in message.lower()):
        reset = response.headers.get("x-ratelimit-reset")
        raise GitHubRateLimitError(
            "Rate limit exceeded",
            status_code=status,
            response_body=body,
            reset_time=float(reset) if reset else None,
        )
    if status == 403:
        raise GitHubAPIError(f"Forbidden: {message}", status_code=status, response_body=body)
    if status >= 500:
        raise GitHubAPIError(f"Server error: {status}", status_code=status)
    raise GitHubAPIError(f"API error: {message}", status_code=status, response_body=body)


def _iso(value: Optional[datetime]) -> Optional[str]:
    """Format a datetime the way the commits endpoint expects (``...Z``)."""
    if value is None:
        return None
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")


def _json_or_none(response: httpx.Response) -> Optional[dict]:
    """Decode a JSON error body, tolerating empty or non-JSON responses."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None
