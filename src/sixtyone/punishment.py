from __future__ import annotations

from dataclasses import field

from pydantic.dataclasses import dataclass

PUNISHMENT_SEQUENCE: tuple[str, ...] = ("10", "10", "9", "9", "8", "8", "2", "2")
# Submitting this label hands every previously submitted card back.
RESET_LABEL = "2"


@dataclass
class PunishmentQueue:
    """Cyclic ledger of punishment cards.

    Each submission appends the next label of the cycle. A "2" clears the
    visible queue straight after it is appended. The cursor keeps cycling
    regardless of resets.
    """

    queue: list[str] = field(default_factory=list)
    cursor: int = 0

    def __post_init__(self):
        assert 0 <= self.cursor < len(PUNISHMENT_SEQUENCE)

    @property
    def next_label(self) -> str:
        return PUNISHMENT_SEQUENCE[self.cursor]

    def submit(self) -> None:
        label = self.next_label
        self.queue.append(label)
        if label == RESET_LABEL:
            self.queue.clear()
        self.cursor = (self.cursor + 1) % len(PUNISHMENT_SEQUENCE)
