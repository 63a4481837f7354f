"""Root conftest — shared test configuration."""

import os

import pytest

# Ensure tests don't accidentally use real API keys or relays
os.environ.setdefault("ANTHROPIC_API_KEY", "sk-ant-test-fake-key")
os.environ.setdefault("WEBHOOK_SECRET", "test-secret")
os.environ.setdefault("SMS_RESPONSE_URL", "https://relay.test/trigger")

from disaster_sms.config import Settings  # noqa: E402


@pytest.fixture
def settings():
    """Deterministic settings: no SMS pacing, default limits."""
    return Settings(
        _env_file=None,
        webhook_secret="test-secret",
        anthropic_api_key="sk-ant-test-fake-key",
        sms_response_url="https://relay.test/trigger",
        sms_pacing_ms=0,
        agent_max_turns=10,
        agent_run_retries=2,
    )
