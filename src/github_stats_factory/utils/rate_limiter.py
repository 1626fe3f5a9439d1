"""Client-side request budgets for the GitHub REST and GraphQL APIs.

One report run makes a few hundred requests at most, so the budgets only
exist to fail fast with a readable message once GitHub has told us the
hourly allowance is spent.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Mapping

from github_stats_factory.exceptions import RateLimitExceededError

logger = logging.getLogger(__name__)

REST = "REST"
GRAPHQL = "GraphQL"

# Authenticated allowance per hour for both APIs
DEFAULT_HOURLY_LIMIT = 5000

# Remaining-request count below which a warning is logged
LOW_REMAINING_THRESHOLD = 10


def format_time_remaining(seconds: float) -> str:
    """Format a countdown as e.g. ``45 seconds``, ``1 min 30 sec`` or ``2 hours``."""
    seconds = int(seconds)
    if seconds <= 0:
        return "now"

    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)

    def plural(n: int, unit: str) -> str:
        return f"{n} {unit}{'' if n == 1 else 's'}"

    if hours:
        return f"{hours} hr {minutes} min" if minutes else plural(hours, "hour")
    if minutes:
        return f"{minutes} min {secs} sec" if secs else plural(minutes, "minute")
    return plural(secs, "second")


def format_reset_time(reset_timestamp: float) -> str:
    """Format a reset timestamp as a UTC wall-clock time."""
    return datetime.fromtimestamp(reset_timestamp, timezone.utc).strftime("%H:%M:%S UTC")


@dataclass
class ApiBudget:
    """Requests left for one API until its window resets."""

    name: str
    limit: int = DEFAULT_HOURLY_LIMIT
    remaining: int = DEFAULT_HOURLY_LIMIT
    reset_at: float = field(default_factory=lambda: time.time() + 3600)  # Unix timestamp

    @property
    def seconds_until_reset(self) -> float:
        return max(0.0, self.reset_at - time.time())

    def apply_headers(self, headers: Mapping[str, str]) -> None:
        """Adopt the x-ratelimit-* values GitHub reported, when present."""
        if "x-ratelimit-limit" in headers:
            self.limit = int(headers["x-ratelimit-limit"])
        if "x-ratelimit-remaining" in headers:
            self.remaining = int(headers["x-ratelimit-remaining"])
        if "x-ratelimit-reset" in headers:
            self.reset_at = float(headers["x-ratelimit-reset"])


@dataclass
class RateLimiter:
    """Budgets shared by the REST and GraphQL clients of a single run."""

    budgets: dict[str, ApiBudget] = field(
        default_factory=lambda: {REST: ApiBudget(REST), GRAPHQL: ApiBudget(GRAPHQL)}
    )
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    @property
    def rest(self) -> ApiBudget:
        return self.budgets[REST]

    @property
    def graphql(self) -> ApiBudget:
        return self.budgets[GRAPHQL]

    async def acquire(self, api: str, cost: int = 1) -> None:
        """Spend ``cost`` requests of an API's budget.

        Raises:
            RateLimitExceededError: If the budget is spent and the window
                has not reset yet
        """
        budget = self.budgets[api]
        async with self._lock:
            wait = budget.seconds_until_reset
            if budget.remaining < cost and wait > 0:
                raise RateLimitExceededError(
                    f"{api} rate limit exceeded. Resets in "
                    f"{format_time_remaining(wait)} (at {format_reset_time(budget.reset_at)})",
                    context={"api": api, "reset_time": budget.reset_at},
                )

            budget.remaining -= cost
            if budget.remaining < LOW_REMAINING_THRESHOLD:
                logger.warning(
                    "Only %d/%d %s API requests remaining", budget.remaining, budget.limit, api
                )

    def record(self, api: str, headers: Mapping[str, str]) -> None:
        """Sync an API's budget with the headers of a response."""
        self.budgets[api].apply_headers(headers)

    def get_status(self) -> dict[str, dict[str, float]]:
        """Snapshot of every budget, keyed by API name."""
        return {
            name: {
                "remaining": budget.remaining,
                "limit": budget.limit,
                "reset_in": round(budget.seconds_until_reset),
            }
            for name, budget in self.budgets.items()
        }
