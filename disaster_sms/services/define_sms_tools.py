"""SMS Tool Schema — Anthropic Tool Use format for the outbound SMS tool.

Invariants:
    - send_sms.messages: 1..max_messages strings, each <= max_length characters
    - Limits in the schema match the limits ToolDispatch validates against
"""


def build_send_sms_tool(max_length: int = 125, max_messages: int = 9) -> dict:
    """send_sms schema for the configured SMS limits."""
    return {
        "name": "send_sms",
        "description": "Send one or more SMS response messages to the user.",
        "input_schema": {
            "type": "object",
            "properties": {
                "messages": {
                    "type": "array",
                    "items": {"type": "string", "maxLength": max_length},
                    "minItems": 1,
                    "maxItems": max_messages,
                    "description": (
                        f"Up to {max_messages} SMS message bodies, "
                        f"each max {max_length} characters"
                    ),
                },
            },
            "required": ["messages"],
        },
    }
