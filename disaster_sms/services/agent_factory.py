"""Agent Factory — wires one AgentRunner per request from shared clients and settings.

Invariants:
    - Dry run swaps only the SMS transport; fetch and model calls are real
    - Shared clients (httpx, Anthropic) are passed in, never created here
"""

import httpx

from disaster_sms.config import Settings
from disaster_sms.infrastructure.anthropic_client import ResilientAnthropicClient
from disaster_sms.infrastructure.sms_transport import (
    DryRunSmsTransport, HttpSmsTransport, SmsTransport,
)
from disaster_sms.infrastructure.thread_fetcher import ThreadFetcher
from disaster_sms.services.agent_runner import AgentRunner
from disaster_sms.services.message_dispatcher import MessageDispatcher
from disaster_sms.services.tool_dispatch import ToolDispatch


def build_sms_transport(
    settings: Settings, http: httpx.AsyncClient, dry_run: bool,
) -> SmsTransport:
    if dry_run:
        return DryRunSmsTransport()
    return HttpSmsTransport(
        http, settings.sms_response_url, settings.http_timeout_seconds,
    )


def build_agent_runner(
    settings: Settings,
    http: httpx.AsyncClient,
    anthropic_client: ResilientAnthropicClient,
    dry_run: bool = False,
) -> AgentRunner:
    fetcher = ThreadFetcher(
        http, settings.user_agent, settings.http_timeout_seconds,
    )
    dispatcher = MessageDispatcher(
        build_sms_transport(settings, http, dry_run), settings.sms_pacing_ms,
    )
    return AgentRunner(
        anthropic_client, ToolDispatch(fetcher, dispatcher, settings), settings,
    )
