"""SMS Webhook — authenticates, decodes, and answers one inbound SMS query.

Invariants:
    - Secret check runs before the method check (401 before 405)
      for every HTTP verb, HEAD and OPTIONS included
    - Body must be JSON {"query": str}: bad JSON → 400 decode error, wrong shape → 400 parse error
    - Header `Dry-Run: true` selects the dry-run SMS transport
    - 200 "Ok" for every completed run (dispatched, exhausted or finished)
    - AgentError after bounded retries → 500 with the error message

Design Decisions:
    - Catch-all path: the secret is any substring of the URL, usually the path itself
    - Body decoded by hand (not a pydantic body parameter) to keep decode and
      shape failures distinct
"""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from disaster_sms.api.dependencies import RunnerFactory, get_runner_factory
from disaster_sms.config import Settings, get_settings
from disaster_sms.core.errors import (
    MethodNotAllowedError, RequestDecodeError, RequestParseError,
    UnauthorizedError,
)
from disaster_sms.schemas.webhook import WebhookPayload
from disaster_sms.services.agent_retry import run_with_retries

logger = logging.getLogger(__name__)
router = APIRouter(tags=["webhook"])

_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


async def _decode_payload(request: Request) -> WebhookPayload:
    try:
        body = await request.json()
    except ValueError as e:
        raise RequestDecodeError(str(e)) from e
    try:
        return WebhookPayload.model_validate(body)
    except ValidationError as e:
        raise RequestParseError(str(e)) from e


@router.api_route("/{path:path}", methods=_METHODS)
async def receive_sms(
    request: Request,
    build_runner: RunnerFactory = Depends(get_runner_factory),
    settings: Settings = Depends(get_settings),
):
    logger.info("Receiving message")

    if settings.webhook_secret not in str(request.url):
        raise UnauthorizedError()
    if request.method != "POST":
        raise MethodNotAllowedError(request.method)

    payload = await _decode_payload(request)
    logger.info("Received SMS request %s", json.dumps(payload.query))

    dry_run = request.headers.get("Dry-Run", "false") == "true"
    runner = build_runner(dry_run)
    result = await run_with_retries(
        runner, payload.query, settings.agent_run_retries,
    )

    logger.info(
        "Webhook completed",
        extra={"outcome": result.outcome.value, "dry_run": dry_run},
    )
    return PlainTextResponse("Ok")
