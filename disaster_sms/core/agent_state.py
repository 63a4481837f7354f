"""Agent State — explicit state machine for one bounded SMS conversation.

Invariants:
    - A run starts in RUNNING at turn 1 and only ever moves forward
    - A successful send_sms in a turn moves to DISPATCHED, whatever the stop reason
    - turn never exceeds max_turns; RUNNING at max_turns with tool_use moves to EXHAUSTED
    - next_state is PURE: same inputs, same output, no mutation
    - ConversationSession is created per run and never shared between runs

Design Decisions:
    - Dispatch observed (not the model's own stop) ends the run: at most one SMS batch
    - A send_sms call that failed validation does not count as a dispatch,
      the model gets the error and may retry within the turn budget
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

from disaster_sms.core.domain_types import RunOutcome, StopReason, ToolName


class RunPhase(str, Enum):
    """Lifecycle phases of an agent run."""
    RUNNING = "running"
    DISPATCHED = "dispatched"
    EXHAUSTED = "exhausted"
    FINISHED = "finished"
    FAILED = "failed"


_OUTCOMES = {
    RunPhase.DISPATCHED: RunOutcome.DISPATCHED,
    RunPhase.EXHAUSTED: RunOutcome.EXHAUSTED,
    RunPhase.FINISHED: RunOutcome.FINISHED,
}


@dataclass(frozen=True)
class AgentState:
    """Phase plus the turn it was reached on."""
    phase: RunPhase
    turn: int

    @property
    def is_running(self) -> bool:
        return self.phase == RunPhase.RUNNING

    @property
    def outcome(self) -> RunOutcome:
        """RunOutcome for a terminal, non-failed state."""
        try:
            return _OUTCOMES[self.phase]
        except KeyError:
            raise ValueError(f"State {self.phase.value} has no run outcome") from None


@dataclass(frozen=True)
class ToolOutcome:
    """What the transition function needs to know about one executed tool call."""
    name: str
    ok: bool


def initial_state() -> AgentState:
    return AgentState(RunPhase.RUNNING, 1)


def next_state(
    state: AgentState,
    stop_reason: str | None,
    tool_outcomes: Iterable[ToolOutcome],
    max_turns: int,
) -> AgentState:
    """Transition after one model response and its tool executions."""
    if not state.is_running:
        raise ValueError(f"Cannot advance from terminal state {state.phase.value}")

    if any(o.name == ToolName.SEND_SMS and o.ok for o in tool_outcomes):
        return AgentState(RunPhase.DISPATCHED, state.turn)

    if stop_reason == StopReason.TOOL_USE:
        if state.turn < max_turns:
            return AgentState(RunPhase.RUNNING, state.turn + 1)
        return AgentState(RunPhase.EXHAUSTED, state.turn)

    return AgentState(RunPhase.FINISHED, state.turn)


def failed_state(state: AgentState) -> AgentState:
    return AgentState(RunPhase.FAILED, state.turn)


@dataclass
class ConversationSession:
    """Per-run conversation: system prompt, message list, state, SMS count."""

    query: str
    system: str
    messages: list[dict] = field(default_factory=list)
    state: AgentState = field(default_factory=initial_state)
    sent: int = 0

    @property
    def turn(self) -> int:
        return self.state.turn

    @property
    def dispatched(self) -> bool:
        return self.sent > 0
