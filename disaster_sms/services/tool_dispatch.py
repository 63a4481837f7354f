"""Tool Dispatch — explicit routing from tool_name to input model and handler.

Invariants:
    - Every tool->handler mapping is visible in one dict; no getattr, no auto-discovery
    - Input validated against the tool's pydantic model before the handler runs
    - Unknown tools return UNKNOWN_TOOL, invalid input returns VALIDATION_ERROR
    - SmsAgentError raised by a handler becomes a tool result; execute() never raises it

Design Decisions:
    - Validation limits (SMS length/count) come from Settings via validation context
"""

import logging

from pydantic import ValidationError

from disaster_sms.config import Settings
from disaster_sms.core.domain_types import ToolName
from disaster_sms.core.errors import SmsAgentError, ToolValidationError
from disaster_sms.infrastructure.thread_fetcher import ThreadFetcher
from disaster_sms.schemas.tool_inputs import GetRedditPostInput, SendSmsInput
from disaster_sms.services.handle_sms import SmsHandlers
from disaster_sms.services.handle_thread import ThreadHandlers
from disaster_sms.services.message_dispatcher import MessageDispatcher

logger = logging.getLogger(__name__)


def format_validation_error(e: ValidationError) -> str:
    """Flatten pydantic errors into one line the model can act on."""
    parts = []
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "input"
        parts.append(f"{loc}: {err['msg']}")
    return "Invalid tool input. " + "; ".join(parts)


class ToolDispatch:
    """Routes tool_name -> (input model, handler). Explicit registration."""

    def __init__(
        self,
        fetcher: ThreadFetcher,
        dispatcher: MessageDispatcher,
        settings: Settings,
    ):
        thread = ThreadHandlers(fetcher)
        sms = SmsHandlers(dispatcher)

        self._validation_context = {
            "max_length": settings.sms_max_length,
            "max_messages": settings.sms_max_messages,
        }
        self._handlers = {
            ToolName.GET_REDDIT_POST.value: (GetRedditPostInput, thread.get_reddit_post),
            ToolName.SEND_SMS.value: (SendSmsInput, sms.send_sms),
        }

    @property
    def tool_names(self) -> set[str]:
        return set(self._handlers)

    async def execute(self, tool_name: str, input_data: dict) -> dict:
        """Validate input, run the handler, return a result dict."""
        entry = self._handlers.get(tool_name)
        if entry is None:
            logger.warning(
                "Unknown tool requested", extra={"tool_name": tool_name},
            )
            return {
                "status": "error",
                "error_code": "UNKNOWN_TOOL",
                "message": f"Tool '{tool_name}' does not exist.",
            }

        input_model, handler = entry
        try:
            params = input_model.model_validate(
                input_data, context=self._validation_context,
            )
        except ValidationError as e:
            error = ToolValidationError(format_validation_error(e), tool_name)
            logger.warning(
                "Tool input rejected: %s", error.message,
                extra={"tool_name": tool_name, "error_code": error.code},
            )
            return error.to_tool_result()

        try:
            return await handler(params)
        except SmsAgentError as e:
            logger.warning(
                "Tool error: %s", e.message,
                extra={"tool_name": tool_name, "error_code": e.code},
            )
            return e.to_tool_result()
