"""SMS Transports — hand one message to the notification relay, or log it in dry-run mode.

Invariants:
    - HttpSmsTransport issues exactly one GET per send(), message text in `value1`
    - Any HTTP failure or non-2xx response raises SmsTransportError
    - DryRunSmsTransport never performs IO beyond logging

Design Decisions:
    - Protocol over ABC: dispatcher and tests depend on shape, not inheritance
"""

import json
import logging
from typing import Protocol

import httpx

from disaster_sms.core.errors import SmsTransportError

logger = logging.getLogger(__name__)


class SmsTransport(Protocol):
    """Anything that can send one SMS body."""
    async def send(self, message: str) -> None: ...


class HttpSmsTransport:
    """Sends SMS through the relay with a GET request."""

    def __init__(
        self, http: httpx.AsyncClient, response_url: str,
        timeout_seconds: float = 30.0,
    ):
        self.http = http
        self.response_url = response_url
        self.timeout_seconds = timeout_seconds

    async def send(self, message: str) -> None:
        if not self.response_url:
            raise SmsTransportError("SMS_RESPONSE_URL is not configured")
        try:
            response = await self.http.get(
                self.response_url,
                params={"value1": message},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise SmsTransportError(f"SMS relay request failed: {e}") from e
        logger.info("Response SMS sent")


class DryRunSmsTransport:
    """Logs the message instead of sending it."""

    def __init__(self):
        self.sent: list[str] = []

    async def send(self, message: str) -> None:
        self.sent.append(message)
        logger.info("Sent SMS: %s", json.dumps(message), extra={"dry_run": True})
