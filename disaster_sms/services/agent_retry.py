"""Agent Retry — bounded retry of a whole agent run at the webhook boundary.

Invariants:
    - At most 1 + retries calls to runner.run() per inbound request
    - Each attempt starts a fresh ConversationSession (run() owns its session)
    - An AgentError with dispatched=True is re-raised without retry

Design Decisions:
    - Duplicate SMS is possible only if a prior attempt reached the relay; the
      dispatched flag closes that window for failures the runner can observe
"""

import logging

from disaster_sms.core.errors import AgentError
from disaster_sms.services.agent_runner import AgentRunner, RunResult

logger = logging.getLogger(__name__)


async def run_with_retries(
    runner: AgentRunner, query: str, retries: int = 2,
) -> RunResult:
    attempt = 0
    while True:
        try:
            return await runner.run(query)
        except AgentError as e:
            if e.dispatched:
                logger.error(
                    "Agent run failed after sending SMS, not retrying: %s",
                    e.message, extra={"attempt": attempt + 1},
                )
                raise
            if attempt >= retries:
                raise
            attempt += 1
            logger.warning(
                "Agent run failed, retrying (%d/%d): %s",
                attempt, retries, e.message, extra={"attempt": attempt + 1},
            )
