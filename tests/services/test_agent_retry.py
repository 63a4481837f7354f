"""Agent Retry — tests for bounded whole-run retry at the webhook boundary.

Tests cover:
    - Success on first attempt → single run
    - AgentError retried up to `retries` extra times, then re-raised
    - AgentError with dispatched=True is never retried
"""

import pytest

from disaster_sms.core.domain_types import RunOutcome
from disaster_sms.core.errors import AgentError
from disaster_sms.services.agent_retry import run_with_retries


class _ScriptedRunner:
    """run() pops the next scripted outcome: an exception to raise or a value to return."""

    def __init__(self, script):
        self.script = list(script)
        self.queries = []

    async def run(self, query):
        self.queries.append(query)
        outcome = self.script.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


async def test_success_first_attempt():
    runner = _ScriptedRunner([RunOutcome.DISPATCHED])
    assert await run_with_retries(runner, "q", retries=2) == RunOutcome.DISPATCHED
    assert runner.queries == ["q"]


async def test_retries_then_succeeds():
    runner = _ScriptedRunner([
        AgentError("model down"),
        AgentError("model down"),
        RunOutcome.EXHAUSTED,
    ])
    assert await run_with_retries(runner, "q", retries=2) == RunOutcome.EXHAUSTED
    assert len(runner.queries) == 3


async def test_gives_up_after_retries():
    runner = _ScriptedRunner([AgentError(f"fail {i}") for i in range(3)])
    with pytest.raises(AgentError, match="fail 2"):
        await run_with_retries(runner, "q", retries=2)
    assert len(runner.queries) == 3


async def test_zero_retries_runs_once():
    runner = _ScriptedRunner([AgentError("fail")])
    with pytest.raises(AgentError):
        await run_with_retries(runner, "q", retries=0)
    assert len(runner.queries) == 1


async def test_no_retry_after_dispatch():
    runner = _ScriptedRunner([
        AgentError("failed after send", dispatched=True),
        RunOutcome.DISPATCHED,
    ])
    with pytest.raises(AgentError):
        await run_with_retries(runner, "q", retries=2)
    assert len(runner.queries) == 1
