"""GitHub GraphQL API client for the contribution calendar."""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from github_stats_factory.config import Config
from github_stats_factory.exceptions import GitHubGraphQLError
from github_stats_factory.services.github_rest_client import USER_AGENT
from github_stats_factory.utils.rate_limiter import GRAPHQL, RateLimiter

logger = logging.getLogger(__name__)

# Totals plus the day-by-day calendar for one window (at most a year)
CONTRIBUTIONS_QUERY = """
query($username: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $username) {
    contributionsCollection(from: $from, to: $to) {
      totalCommitContributions
      totalIssueContributions
      totalPullRequestContributions
      totalPullRequestReviewContributions
      totalRepositoryContributions
      totalRepositoriesWithContributedCommits
      restrictedContributionsCount
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
            contributionLevel
          }
        }
      }
    }
  }
}
"""


class GitHubGraphQLClient:
    """Async client for the GitHub GraphQL endpoint.

    Unlike the REST API, GraphQL refuses anonymous requests, so a token is
    required before the first query is sent.
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

    async def __aenter__(self) -> "GitHubGraphQLClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()

    def _client_for_request(self) -> httpx.AsyncClient:
        if not self.config.github_token:
            raise GitHubGraphQLError(
                "A GitHub token is required for the GraphQL API. "
                "Set GITHUB_TOKEN environment variable."
            )
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={
                    "Authorization": f"Bearer {self.config.github_token}",
                    "Content-Type": "application/json",
                    "User-Agent": USER_AGENT,
                },
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
    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        client = self._client_for_request()
        await self.rate_limiter.acquire(GRAPHQL)
        response = await client.post(self.config.github_graphql_url, json=payload)
        self.rate_limiter.record(GRAPHQL, response.headers)
        return response

    async def execute(
        self,
        query: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Run a query and return its ``data`` object.

        Raises:
            GitHubGraphQLError: On a non-200 response or a non-empty ``errors`` array
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = await self._post(payload)
        if response.status_code != 200:
            raise GitHubGraphQLError(
                f"GraphQL request failed with status {response.status_code}: {response.text}"
            )

        result = response.json()
        errors = result.get("errors")
        if errors:
            messages = "; ".join(e.get("message", "Unknown error") for e in errors)
            raise GitHubGraphQLError(f"GraphQL errors: {messages}", errors=errors)

        return result.get("data") or {}

    async def get_contributions(
        self,
        username: str,
        from_datetime: datetime,
        to_datetime: datetime,
    ) -> dict[str, Any]:
        """Fetch the raw ``contributionsCollection`` of a user for a window.

        Raises:
            GitHubGraphQLError: If the query fails or the user does not exist
        """
        variables = {
            "username": username,
            "from": _to_graphql_datetime(from_datetime),
            "to": _to_graphql_datetime(to_datetime),
        }
        logger.debug("Querying contributions from %s to %s", variables["from"], variables["to"])

        data = await self.execute(CONTRIBUTIONS_QUERY, variables)
        user = data.get("user")
        if not user:
            raise GitHubGraphQLError(f"User not found: {username}")
        return user["contributionsCollection"]


def _to_graphql_datetime(value: datetime) -> str:
    """Render a datetime as the UTC ``YYYY-MM-DDTHH:MM:SSZ`` GitHub expects."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%SZ")
