"""Service test fixtures — fake fetcher/transport and an AgentRunner builder.

Invariants:
    - Mock at the Anthropic boundary (MockAnthropicClient), real ToolDispatch,
      real MessageDispatcher, fake fetch and SMS transports
"""

import pytest

from disaster_sms.services.agent_runner import AgentRunner
from disaster_sms.services.message_dispatcher import MessageDispatcher
from disaster_sms.services.tool_dispatch import ToolDispatch

from tests.fakes import CapturingTransport, FakeFetcher


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def transport():
    return CapturingTransport()


@pytest.fixture
def tool_dispatch(settings, fake_fetcher, transport):
    dispatcher = MessageDispatcher(transport, settings.sms_pacing_ms)
    return ToolDispatch(fake_fetcher, dispatcher, settings)


@pytest.fixture
def make_runner(settings, tool_dispatch):
    """Build an AgentRunner around a MockAnthropicClient."""
    def _make(client, **overrides):
        s = settings.model_copy(update=overrides) if overrides else settings
        return AgentRunner(client, tool_dispatch, s)
    return _make
