"""Agent Runner — bounded tool-calling loop that answers one SMS query.

Invariants:
    - One ConversationSession per run(), created here and returned in RunResult
    - At most max_turns model calls; state transitions via core.agent_state.next_state only
    - A successful send_sms ends the run after the current turn's tool calls
    - A second send_sms in the same turn gets ALREADY_DISPATCHED instead of sending
    - Tool errors never crash the loop; model failures raise AgentError
    - Tool schema names equal ToolDispatch.tool_names, checked at construction

Design Decisions:
    - Tools of one response execute sequentially in block order
    - Continuation nudge appended after the tool results of every turn
"""

import logging
from dataclasses import dataclass

from disaster_sms.config import Settings
from disaster_sms.core.agent_state import (
    ConversationSession, RunPhase, ToolOutcome, failed_state, next_state,
)
from disaster_sms.core.domain_types import RunOutcome, ToolName
from disaster_sms.core.errors import AgentError, AnthropicAPIError, ErrorContext
from disaster_sms.infrastructure.anthropic_client import ResilientAnthropicClient
from disaster_sms.services.agent_runner_helpers import (
    already_dispatched_result, serialize_content, tool_result_block,
    tool_use_blocks, unexpected_tool_error_result,
)
from disaster_sms.services.system_prompt import (
    CONTINUE_PROMPT, build_system_prompt, build_user_message,
)
from disaster_sms.services.tool_dispatch import ToolDispatch
from disaster_sms.services.tools_registry import get_tools

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    outcome: RunOutcome
    turns: int
    sent: int
    session: ConversationSession


class AgentRunner:
    """Drives model turns and tool execution until dispatch, exhaustion or finish."""

    def __init__(
        self,
        anthropic_client: ResilientAnthropicClient,
        dispatch: ToolDispatch,
        settings: Settings,
    ):
        self.client = anthropic_client
        self.dispatch = dispatch
        self.model = settings.agent_model
        self.max_turns = settings.agent_max_turns
        self.max_tokens = settings.agent_max_tokens
        self.tools = get_tools(settings)
        mismatched = {t["name"] for t in self.tools} ^ dispatch.tool_names
        if mismatched:
            raise ValueError(
                f"Tool schemas and handlers disagree: {sorted(mismatched)}",
            )
        self.system = build_system_prompt(
            settings.latest_megathread_url,
            max_length=settings.sms_max_length,
            max_messages=settings.sms_max_messages,
        )

    async def run(self, user_query: str) -> RunResult:
        """Answer one query. Raises AgentError if the model client fails."""
        logger.info("Agent starting")
        session = ConversationSession(
            query=user_query,
            system=self.system,
            messages=[build_user_message(user_query)],
        )

        try:
            await self._turn_loop(session)
        except AnthropicAPIError as e:
            session.state = failed_state(session.state)
            logger.error(
                "Model call failed: %s", e.message,
                extra={"turn": session.turn, "error_code": e.code},
            )
            raise AgentError(
                e.message, dispatched=session.dispatched,
                context=ErrorContext(turn=session.turn),
            ) from e
        except Exception as e:
            session.state = failed_state(session.state)
            logger.error(
                "Unexpected error in agent runner: %s", e,
                extra={"turn": session.turn}, exc_info=True,
            )
            raise AgentError(
                f"Unexpected agent failure: {e}", dispatched=session.dispatched,
                context=ErrorContext(turn=session.turn),
            ) from e

        result = RunResult(
            outcome=session.state.outcome,
            turns=session.turn,
            sent=session.sent,
            session=session,
        )
        logger.info(
            "Agent completed",
            extra={
                "outcome": result.outcome.value,
                "turn": result.turns,
                "sent": result.sent,
            },
        )
        return result

    async def _turn_loop(self, session: ConversationSession) -> None:
        while session.state.is_running:
            response = await self.client.create_message(
                model=self.model,
                max_tokens=self.max_tokens,
                system=session.system,
                tools=self.tools,
                messages=session.messages,
                context=ErrorContext(turn=session.turn),
            )
            session.messages.append(
                {"role": "assistant", "content": serialize_content(response)},
            )

            outcomes: list[ToolOutcome] = []
            blocks = tool_use_blocks(response)
            if blocks:
                tool_results, outcomes = await self._execute_tool_blocks(
                    session, blocks,
                )
                tool_results.append({"type": "text", "text": CONTINUE_PROMPT})
                session.messages.append({"role": "user", "content": tool_results})

            session.state = next_state(
                session.state, response.stop_reason, outcomes, self.max_turns,
            )

        if session.state.phase == RunPhase.EXHAUSTED:
            logger.warning(
                "Tool-call loop hit max turns", extra={"turn": session.turn},
            )
        elif session.state.phase == RunPhase.FINISHED:
            logger.warning(
                "Model finished without sending SMS",
                extra={"turn": session.turn},
            )

    async def _execute_tool_blocks(
        self, session: ConversationSession, blocks: list,
    ) -> tuple[list[dict], list[ToolOutcome]]:
        """Execute tool_use blocks in order. Returns (tool_result blocks, outcomes)."""
        tool_results = []
        outcomes = []

        for block in blocks:
            already_sent = any(
                o.name == ToolName.SEND_SMS and o.ok for o in outcomes
            )
            if block.name == ToolName.SEND_SMS and already_sent:
                result = already_dispatched_result()
            else:
                result = await self._execute_tool_safe(
                    block.name, block.input, session.turn,
                )
            ok = result.get("status") == "ok"
            if ok and block.name == ToolName.SEND_SMS:
                session.sent += result.get("sent", 0)
            outcomes.append(ToolOutcome(block.name, ok))
            tool_results.append(tool_result_block(block.id, result))

        return tool_results, outcomes

    async def _execute_tool_safe(
        self, tool_name: str, tool_input: dict, turn: int,
    ) -> dict:
        """Execute tool with error boundary — never raises."""
        logger.info(
            "Tool call", extra={"tool_name": tool_name, "turn": turn},
        )
        try:
            return await self.dispatch.execute(tool_name, tool_input)
        except Exception as e:
            logger.error(
                "Unexpected error in tool '%s': %s", tool_name, e,
                extra={"tool_name": tool_name, "turn": turn}, exc_info=True,
            )
            return unexpected_tool_error_result(tool_name)
