"""
Direction channel between an input-capturing thread and the tick loop.

One producer (the key reader) sends directions; one consumer (the tick loop)
drains the channel once per tick and decides which input to act on.
The engine itself is never touched from the producer thread.
"""

import queue
from typing import List, Optional

from domain.constants import Direction


class DirectionChannel:
    """Single-producer / single-consumer queue of Direction values."""

    def __init__(self):
        self._queue: "queue.Queue[Direction]" = queue.Queue()

    def send(self, direction: Direction) -> None:
        self._queue.put(direction)

    def drain(self) -> List[Direction]:
        """Empty the channel and return every direction sent since the previous drain, oldest first."""
        directions = []
        while True:
            try:
                directions.append(self._queue.get_nowait())
            except queue.Empty:
                return directions

    def drain_latest(self) -> Optional[Direction]:
        """
        Empty the channel and return the last direction sent, or None if
        nothing was sent since the previous drain.
        """
        directions = self.drain()
        return directions[-1] if directions else None

    def __len__(self):
        return self._queue.qsize()
