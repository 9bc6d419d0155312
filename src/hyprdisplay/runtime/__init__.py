"""Runtime module

- events: KeyEvent, ResizeEvent, EffectResultEvent, MessageExpiredEvent
- queue: EventQueue (single consumer)
- session: Session event loop and live display
"""

from .events import Event, EffectResultEvent, KeyEvent, MessageExpiredEvent, ResizeEvent
from .queue import EventQueue
from .session import Session

__all__ = [
    "Event",
    "KeyEvent",
    "ResizeEvent",
    "EffectResultEvent",
    "MessageExpiredEvent",
    "EventQueue",
    "Session",
]
