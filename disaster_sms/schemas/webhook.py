"""Webhook Schemas — inbound SMS query payload."""

from pydantic import BaseModel


class WebhookPayload(BaseModel):
    """Body of an inbound SMS webhook call."""
    query: str
