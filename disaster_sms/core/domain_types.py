"""Domain Types — enums that replace raw strings across the codebase.

Invariants:
    - Tool names are a closed set; dispatch keys come from ToolName only
    - ThingKind has exactly three variants (post, comment, continuation marker)
    - RunOutcome values are all non-error outcomes of a run

Design Decisions:
    - str Enums: serialize to JSON and compare equal to the wire strings
"""

from enum import Enum


class ToolName(str, Enum):
    """Tools exposed to the model."""
    GET_REDDIT_POST = "get_reddit_post"
    SEND_SMS = "send_sms"


class ThingKind(str, Enum):
    """Reddit listing child tags."""
    POST = "t3"
    COMMENT = "t1"
    MORE = "more"


class RunOutcome(str, Enum):
    """Terminal outcome of a successful agent run."""
    DISPATCHED = "dispatched"
    EXHAUSTED = "exhausted"
    FINISHED = "finished"


class StopReason(str, Enum):
    """Anthropic stop reasons the runner distinguishes."""
    TOOL_USE = "tool_use"
    END_TURN = "end_turn"
    MAX_TOKENS = "max_tokens"
