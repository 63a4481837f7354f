"""Thread Fetcher — retrieves a Reddit thread as JSON and returns its parsed listing as text.

Invariants:
    - Exactly one GET per fetch(), with the configured User-Agent header
    - Every failure (network, timeout, non-2xx, bad JSON, schema mismatch) raises FetchError
      with the original exception as cause
    - Returned text is the parsed listing re-serialized (unknown fields dropped)

Design Decisions:
    - Shared httpx.AsyncClient injected by the app lifespan; fetcher never closes it
    - Browser-like User-Agent: Reddit rejects default client identifiers
"""

import logging

import httpx
from pydantic import ValidationError

from disaster_sms.core.errors import ErrorContext, FetchError
from disaster_sms.core.thread_url import normalize_thread_url
from disaster_sms.schemas.thread import (
    count_things, parse_listings, serialize_listings,
)

logger = logging.getLogger(__name__)


class ThreadFetcher:
    """Fetches and parses discussion threads."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        user_agent: str = "Disaster Comms Agent/1.0",
        timeout_seconds: float = 30.0,
    ):
        self.http = http
        self.user_agent = user_agent
        self.timeout_seconds = timeout_seconds

    async def fetch(self, url: str) -> str:
        """Return the serialized thread listing for url. Raises FetchError."""
        request_url = normalize_thread_url(url)
        logger.info("Fetching thread", extra={"url": request_url})
        ctx = ErrorContext(tool_name="get_reddit_post", url=request_url)

        try:
            response = await self.http.get(
                request_url,
                headers={
                    "User-Agent": self.user_agent,
                    "Accept": "application/json",
                },
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            listings = parse_listings(response.json())
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.warning(
                "Thread fetch failed: %s", e, extra={"url": request_url},
            )
            raise FetchError(
                "Failed to get reddit post", cause=e, context=ctx,
            ) from e

        logger.info(
            "Thread parsed: %s", count_things(listings),
            extra={"url": request_url},
        )
        return serialize_listings(listings)
