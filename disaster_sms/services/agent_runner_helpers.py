"""Agent Runner Helpers — pure response introspection and tool_result block builders.

Invariants:
    - All functions are pure (no IO, no mutation of their arguments)
    - tool_result blocks carry is_error=True exactly when the result status is "error"
    - Successful thread content is passed through as raw text, other results as JSON
"""

import json
from typing import Any


def tool_use_blocks(response: Any) -> list[Any]:
    return [
        b for b in response.content
        if getattr(b, "type", None) == "tool_use"
    ]


def serialize_content(response: Any) -> list[dict]:
    return [b.model_dump(exclude_none=True) for b in response.content]


def tool_result_block(tool_use_id: str, result: dict) -> dict:
    """Build the tool_result content block for one executed tool call."""
    is_error = result.get("status") == "error"
    if not is_error and isinstance(result.get("content"), str):
        content = result["content"]
    else:
        content = json.dumps(result, ensure_ascii=False)
    block = {
        "type": "tool_result",
        "tool_use_id": tool_use_id,
        "content": content,
    }
    if is_error:
        block["is_error"] = True
    return block


def already_dispatched_result() -> dict:
    return {
        "status": "error",
        "error_code": "ALREADY_DISPATCHED",
        "message": "SMS already sent for this query. Stop now.",
    }


def unexpected_tool_error_result(tool_name: str) -> dict:
    return {
        "status": "error",
        "error_code": "TOOL_EXECUTION_ERROR",
        "message": f"Internal error executing {tool_name}",
    }
