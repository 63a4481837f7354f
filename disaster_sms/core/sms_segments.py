"""SMS Segments — immutable outbound message segments with position markers.

Invariants:
    - 1 <= total <= MAX_SEGMENTS for every numbered batch
    - Segment order equals input order; markers are 1-indexed " (i/total)"
    - OutboundMessage is frozen once constructed
"""

from dataclasses import dataclass

MAX_SEGMENTS = 9


@dataclass(frozen=True)
class OutboundMessage:
    body: str
    index: int
    total: int

    @property
    def text(self) -> str:
        """Body with the position marker appended."""
        return f"{self.body} ({self.index}/{self.total})"


def number_segments(messages: list[str]) -> list[OutboundMessage]:
    """Wrap message bodies as numbered segments. Raises ValueError on an empty or oversized batch."""
    total = len(messages)
    if not 1 <= total <= MAX_SEGMENTS:
        raise ValueError(
            f"SMS batch must hold 1-{MAX_SEGMENTS} messages, got {total}",
        )
    return [
        OutboundMessage(body=body, index=i, total=total)
        for i, body in enumerate(messages, start=1)
    ]
