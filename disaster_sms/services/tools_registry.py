"""Tools Registry — the tool list exposed to the model.

Invariants:
    - Exactly two tools: get_reddit_post and send_sms
    - Tool names match the ToolName enum and the keys of ToolDispatch
"""

from disaster_sms.config import Settings
from disaster_sms.services.define_sms_tools import build_send_sms_tool
from disaster_sms.services.define_thread_tools import GET_REDDIT_POST_TOOL


def get_tools(settings: Settings) -> list[dict]:
    """Tool schemas for one agent run."""
    return [
        GET_REDDIT_POST_TOOL,
        build_send_sms_tool(
            max_length=settings.sms_max_length,
            max_messages=settings.sms_max_messages,
        ),
    ]
