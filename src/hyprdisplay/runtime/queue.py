"""EventQueue - the session's single event queue

Producers (key reader, signal handlers, effect tasks, timer) enqueue from
the event loop; the session is the only consumer, so events are handled
strictly one at a time in arrival order.

Policy:
- bounded (QUEUE_MAX_SIZE)
- high watermark logged at debug level
- on overflow the oldest unprotected event is dropped
- effect results are protected and never dropped
"""

import asyncio
from collections import deque

from ..config import (
    METRICS_ENABLED,
    PROTECTED_EVENTS,
    QUEUE_HIGH_WATERMARK,
    QUEUE_MAX_SIZE,
)
from ..telemetry import get_logger, metrics
from .events import Event

logger = get_logger(__name__)


class EventQueue:
    """Bounded FIFO with an awaitable ``get``.

    Attributes:
        max_size: capacity
        high_watermark: fill ratio (0-1) that triggers a debug log
    """

    def __init__(
        self,
        max_size: int = QUEUE_MAX_SIZE,
        high_watermark: float = QUEUE_HIGH_WATERMARK,
    ):
        self._max_size = max_size
        self._high_watermark = high_watermark
        self._queue: deque[Event] = deque()
        self._ready = asyncio.Event()

    def enqueue(self, event: Event) -> bool:
        """Append an event.

        Returns:
            False only when the queue is full of protected events and an
            unprotected *event* was refused.
        """
        if len(self._queue) >= self._max_size and not self._drop_oldest_unprotected():
            if event.kind not in PROTECTED_EVENTS:
                logger.warning(f"[Queue] Refused {event.kind} event (queue full)")
                if METRICS_ENABLED:
                    metrics.inc("queue.dropped", {"kind": event.kind})
                return False

        self._queue.append(event)
        self._ready.set()

        depth = len(self._queue)
        if METRICS_ENABLED:
            metrics.gauge("queue.depth", depth)
        if depth >= self._max_size * self._high_watermark:
            logger.debug(
                f"[Queue] High watermark: {depth}/{self._max_size} "
                f"({depth / self._max_size * 100:.0f}%)"
            )
        return True

    def _drop_oldest_unprotected(self) -> bool:
        for i, queued in enumerate(self._queue):
            if queued.kind not in PROTECTED_EVENTS:
                del self._queue[i]
                logger.warning(f"[Queue] Dropped oldest {queued.kind} event (queue full)")
                if METRICS_ENABLED:
                    metrics.inc("queue.dropped", {"kind": queued.kind})
                return True
        return False

    def dequeue(self) -> Event | None:
        """Pop the oldest event, or None when empty."""
        if not self._queue:
            return None
        return self._pop()

    async def get(self) -> Event:
        """Wait for and pop the next event."""
        while not self._queue:
            await self._ready.wait()
        return self._pop()

    def _pop(self) -> Event:
        event = self._queue.popleft()
        if not self._queue:
            self._ready.clear()
        if METRICS_ENABLED:
            metrics.gauge("queue.depth", len(self._queue))
        return event

    def __len__(self) -> int:
        return len(self._queue)
