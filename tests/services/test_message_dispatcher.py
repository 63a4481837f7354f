"""Message Dispatcher — tests for ordered, numbered, fault-isolated SMS batches.

Tests cover:
    - n messages → n attempts suffixed (k/n), in order
    - A failing send does not stop later sends
    - Pacing sleeps between sends only
    - Dry-run transport records instead of sending
"""

import pytest

from disaster_sms.infrastructure.sms_transport import DryRunSmsTransport
from disaster_sms.services.message_dispatcher import MessageDispatcher

from tests.fakes import CapturingTransport


@pytest.mark.parametrize("n", [1, 2, 5, 9])
async def test_sends_n_numbered_messages_in_order(n):
    transport = CapturingTransport()
    dispatcher = MessageDispatcher(transport, pacing_ms=0)
    messages = [f"msg {k}" for k in range(1, n + 1)]

    result = await dispatcher.dispatch(messages)

    assert result == {"sent": n}
    assert transport.attempts == [
        f"msg {k} ({k}/{n})" for k in range(1, n + 1)
    ]


async def test_failed_send_does_not_abort_batch(caplog):
    transport = CapturingTransport(fail_on={2})
    dispatcher = MessageDispatcher(transport, pacing_ms=0)

    result = await dispatcher.dispatch(["a", "b", "c"])

    assert result == {"sent": 3}
    assert transport.attempts == ["a (1/3)", "b (2/3)", "c (3/3)"]
    assert transport.sent == ["a (1/3)", "c (3/3)"]
    assert any("SMS send failed" in r.getMessage() for r in caplog.records)


async def test_every_send_failing_still_attempts_all():
    transport = CapturingTransport(fail_on={1, 2})
    dispatcher = MessageDispatcher(transport, pacing_ms=0)

    result = await dispatcher.dispatch(["a", "b"])

    assert result == {"sent": 2}
    assert transport.sent == []


async def test_pacing_between_sends_only(monkeypatch):
    sleeps = []

    async def fake_sleep(seconds):
        sleeps.append(seconds)

    monkeypatch.setattr(
        "disaster_sms.services.message_dispatcher.asyncio.sleep", fake_sleep,
    )
    dispatcher = MessageDispatcher(CapturingTransport(), pacing_ms=500)

    await dispatcher.dispatch(["a", "b", "c"])

    assert sleeps == [0.5, 0.5]


async def test_empty_batch_rejected():
    dispatcher = MessageDispatcher(CapturingTransport(), pacing_ms=0)
    with pytest.raises(ValueError):
        await dispatcher.dispatch([])


async def test_dry_run_transport_records_messages():
    transport = DryRunSmsTransport()
    dispatcher = MessageDispatcher(transport, pacing_ms=0)

    result = await dispatcher.dispatch(["Roads closed."])

    assert result == {"sent": 1}
    assert transport.sent == ["Roads closed. (1/1)"]
