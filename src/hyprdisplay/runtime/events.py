"""Session events

Everything that changes the session arrives as one of these, through the
single EventQueue.
"""

from dataclasses import dataclass
from typing import ClassVar

from ..effects import EffectResult


@dataclass(frozen=True)
class KeyEvent:
    """A decoded key press"""

    kind: ClassVar[str] = "key"
    key: str


@dataclass(frozen=True)
class ResizeEvent:
    """New terminal size"""

    kind: ClassVar[str] = "resize"
    width: int
    height: int


@dataclass(frozen=True)
class EffectResultEvent:
    """A finished apply/copy effect"""

    kind: ClassVar[str] = "effect_result"
    result: EffectResult


@dataclass(frozen=True)
class MessageExpiredEvent:
    """The status message with *message_id* has been shown long enough"""

    kind: ClassVar[str] = "message_expired"
    message_id: int


Event = KeyEvent | ResizeEvent | EffectResultEvent | MessageExpiredEvent
