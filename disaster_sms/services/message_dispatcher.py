"""Message Dispatcher — sends a numbered SMS batch in order, one message at a time.

Invariants:
    - n messages in → exactly n transport attempts, suffixed " (k/n)", in list order
    - A failed send is logged and skipped; later messages are still attempted
    - pacing_ms delay between consecutive sends (not after the last one)
    - Returned `sent` counts attempts, not confirmed deliveries

Design Decisions:
    - Length/count limits enforced by ToolDispatch validation, not re-checked here
"""

import asyncio
import logging

from disaster_sms.core.errors import SmsTransportError
from disaster_sms.core.sms_segments import number_segments
from disaster_sms.infrastructure.sms_transport import SmsTransport

logger = logging.getLogger(__name__)


class MessageDispatcher:
    """Sends SMS segments sequentially through a transport."""

    def __init__(self, transport: SmsTransport, pacing_ms: int = 500):
        self.transport = transport
        self.pacing_ms = pacing_ms

    async def dispatch(self, messages: list[str]) -> dict:
        segments = number_segments(messages)

        for segment in segments:
            if segment.index > 1 and self.pacing_ms:
                await asyncio.sleep(self.pacing_ms / 1000)
            try:
                await self.transport.send(segment.text)
            except SmsTransportError as e:
                logger.error(
                    "SMS send failed: %s", e.message,
                    extra={"segment": segment.index, "error_code": e.code},
                )

        logger.info("SMS batch dispatched", extra={"sent": len(segments)})
        return {"sent": len(segments)}
