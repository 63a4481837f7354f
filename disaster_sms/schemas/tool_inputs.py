"""Tool Input Schemas — validate model-supplied tool parameters before any handler runs.

Invariants:
    - get_reddit_post.url is a non-empty http(s) URL
    - send_sms.messages holds 1..max_messages non-blank strings, each <= max_length chars
    - Limits come from validation context (settings), defaulting to 9 messages x 125 chars

Design Decisions:
    - Limits passed via model_validate(context=...) so one model serves every deployment
"""

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from disaster_sms.core.sms_segments import MAX_SEGMENTS

DEFAULT_SMS_MAX_LENGTH = 125


class GetRedditPostInput(BaseModel):
    url: str = Field(min_length=1)

    @field_validator("url")
    @classmethod
    def check_scheme(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("https://", "http://")):
            raise ValueError("url must start with https://")
        return v


class SendSmsInput(BaseModel):
    messages: list[str] = Field(min_length=1)

    @field_validator("messages")
    @classmethod
    def check_limits(cls, v: list[str], info: ValidationInfo) -> list[str]:
        ctx = info.context or {}
        max_messages = ctx.get("max_messages", MAX_SEGMENTS)
        max_length = ctx.get("max_length", DEFAULT_SMS_MAX_LENGTH)
        if len(v) > max_messages:
            raise ValueError(
                f"at most {max_messages} messages allowed, got {len(v)}",
            )
        for i, message in enumerate(v, start=1):
            if not message.strip():
                raise ValueError(f"message {i} is empty")
            if len(message) > max_length:
                raise ValueError(
                    f"message {i} is {len(message)} characters, "
                    f"max is {max_length}",
                )
        return v
