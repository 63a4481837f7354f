"""SMS segment numbering tests."""

import dataclasses

import pytest

from disaster_sms.core.sms_segments import OutboundMessage, number_segments


def test_single_segment_marker():
    [segment] = number_segments(["I-40 closed"])
    assert segment.text == "I-40 closed (1/1)"


def test_order_and_markers():
    segments = number_segments(["a", "b", "c"])
    assert [s.text for s in segments] == ["a (1/3)", "b (2/3)", "c (3/3)"]
    assert all(s.total == 3 for s in segments)


@pytest.mark.parametrize("count", [0, 10])
def test_batch_size_bounds(count):
    with pytest.raises(ValueError):
        number_segments(["x"] * count)


def test_segments_are_immutable():
    segment = OutboundMessage(body="a", index=1, total=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        segment.body = "b"
