"""Error Handlers — global exception handlers for the webhook API.

Invariants:
    - SmsAgentError → plain-text message with the error's http_status
    - Exception (catch-all) → 500 "Internal error", never leaks internal details

Design Decisions:
    - Two-layer handler: domain (SmsAgentError), catch-all (Exception)
    - 4xx logged as warnings, 5xx as errors
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from disaster_sms.core.errors import SmsAgentError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SmsAgentError)
    async def domain_error_handler(request: Request, exc: SmsAgentError):
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(
            level, "Request failed: %s", exc.message,
            extra={"error_code": exc.code},
        )
        return PlainTextResponse(
            exc.to_response(), status_code=exc.http_status,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc,
            exc_info=True,
        )
        return PlainTextResponse(
            "Internal error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
