"""Disaster SMS API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly; health before the catch-all webhook route
    - Global error handlers map SmsAgentError → plain-text responses
    - Shared httpx and Anthropic clients created on startup, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from disaster_sms.api.error_handlers import register_error_handlers
from disaster_sms.api.routes import health, webhook
from disaster_sms.config import get_settings
from disaster_sms.infrastructure.anthropic_client import ResilientAnthropicClient
from disaster_sms.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.http_client = httpx.AsyncClient(
        timeout=settings.http_timeout_seconds, follow_redirects=True,
    )
    app.state.anthropic_client = ResilientAnthropicClient(
        api_key=settings.anthropic_api_key,
        max_retries=settings.anthropic_max_retries,
        base_delay_ms=settings.anthropic_base_delay_ms,
        max_delay_ms=settings.anthropic_max_delay_ms,
        timeout_seconds=settings.anthropic_timeout_seconds,
    )
    logger.info("Server started on port %d", settings.port)
    yield
    await app.state.http_client.aclose()
    await app.state.anthropic_client.close()
    logger.info("Server shutting down")


app = FastAPI(
    title="Disaster SMS Agent", version="1.0.0", lifespan=lifespan,
)

# Health first: the webhook route matches every path
app.include_router(health.router)
app.include_router(webhook.router)

register_error_handlers(app)
