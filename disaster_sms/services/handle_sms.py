"""SMS Handlers — send_sms.

Invariants:
    - send_sms never raises for per-message transport failures (dispatcher absorbs them)
"""

from disaster_sms.schemas.tool_inputs import SendSmsInput
from disaster_sms.services.message_dispatcher import MessageDispatcher


class SmsHandlers:
    """Outbound SMS tool handler."""

    def __init__(self, dispatcher: MessageDispatcher):
        self.dispatcher = dispatcher

    async def send_sms(self, params: SendSmsInput) -> dict:
        result = await self.dispatcher.dispatch(params.messages)
        return {"status": "ok", "sent": result["sent"]}
