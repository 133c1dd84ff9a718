from typing import Deque, Iterator
from collections import deque
from enum import Enum, auto


class Intent(Enum):
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()
    ROTATE_STOP = auto()
    THRUST_START = auto()
    THRUST_STOP = auto()
    FIRE = auto()
    FIRE_RELEASE = auto()


class IntentQueue:
    """Hand-off between the host's input events and the next frame.

    The host only ever pushes and the frame only ever drains, so intents are
    applied in arrival order at the start of a tick.
    """

    def __init__(self) -> None:
        self._pending: Deque[Intent] = deque()

    def push(self, intent: Intent) -> None:
        self._pending.append(intent)

    def drain(self) -> Iterator[Intent]:
        while self._pending:
            yield self._pending.popleft()

    def clear(self) -> None:
        self._pending.clear()

    def __len__(self) -> int:
        return len(self._pending)
