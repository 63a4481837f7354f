"""API Dependencies — per-request construction of the agent runner.

Invariants:
    - Shared clients live on app.state (created by the lifespan)
    - Tests override get_runner_factory instead of touching app.state
"""

from collections.abc import Callable

from fastapi import Request

from disaster_sms.config import get_settings
from disaster_sms.services.agent_factory import build_agent_runner
from disaster_sms.services.agent_runner import AgentRunner

RunnerFactory = Callable[[bool], AgentRunner]


def get_runner_factory(request: Request) -> RunnerFactory:
    """Return a callable building an AgentRunner for the given dry-run flag."""
    settings = get_settings()
    state = request.app.state

    def build(dry_run: bool) -> AgentRunner:
        return build_agent_runner(
            settings, state.http_client, state.anthropic_client, dry_run,
        )

    return build
