"""InputStateMachine - key presses to layout mutations

The mode lives on the layout (Browsing / Moving):

| mode     | key         | effect                         |
|----------|-------------|--------------------------------|
| Browsing | up / down   | cursor -1 / +1 (clamped)       |
| Browsing | left / right| nothing                        |
| Moving   | up / down   | selected y -step / +step       |
| Moving   | left / right| selected x -step / +step       |
| *        | select      | Browsing <-> Moving(cursor)    |
| *        | apply       | Outcome APPLY with command     |
| *        | copy        | Outcome COPY with command      |
| *        | quit        | Outcome QUIT                   |

Side effects are not run here; the caller acts on the returned Outcome.
"""

from dataclasses import dataclass
from enum import Enum

from ..commands import generate_command
from ..config import METRICS_ENABLED, MOVE_STEP
from ..layout.models import MonitorLayout, Moving
from ..telemetry import get_logger, metrics
from .keys import Action, KeyMap

logger = get_logger(__name__)


class OutcomeKind(Enum):
    NONE = "none"
    APPLY = "apply"
    COPY = "copy"
    QUIT = "quit"


@dataclass(frozen=True)
class Outcome:
    """Result of handling one key

    Attributes:
        kind: what the session should do next
        command: command string for APPLY / COPY
        changed: whether the layout was mutated
    """

    kind: OutcomeKind = OutcomeKind.NONE
    command: str = ""
    changed: bool = False


NOTHING = Outcome()


class InputStateMachine:
    """Maps key names to MonitorLayout mutations."""

    def __init__(self, layout: MonitorLayout, keymap: KeyMap | None = None, step: int = MOVE_STEP):
        self.layout = layout
        self.keymap = keymap or KeyMap()
        self._step = step

    @property
    def moving(self) -> bool:
        return isinstance(self.layout.mode, Moving)

    def handle_key(self, key: str) -> Outcome:
        """Process one key.

        Args:
            key: decoded key name ("up", "k", "enter", ...)

        Returns:
            Outcome describing any follow-up the session must perform
        """
        action = self.keymap.action_for(key)
        if action is None:
            logger.debug(f"[Input] Unbound key: {key!r}")
            return NOTHING

        if METRICS_ENABLED:
            metrics.inc("input.action", {"action": action.value})

        if action == Action.QUIT:
            return Outcome(OutcomeKind.QUIT)
        if action == Action.APPLY:
            return Outcome(OutcomeKind.APPLY, command=generate_command(self.layout))
        if action == Action.COPY:
            return Outcome(OutcomeKind.COPY, command=generate_command(self.layout))
        if not self.layout:
            return NOTHING
        before = self._snapshot()
        if action == Action.SELECT:
            self.layout.toggle_selection_at_cursor()
        else:
            self._handle_direction(action)
        return Outcome(changed=self._snapshot() != before)

    def _snapshot(self) -> tuple:
        return (self.layout.cursor, self.layout.mode, self.layout.monitors)

    def _handle_direction(self, action: Action) -> None:
        if self.moving:
            dx, dy = {
                Action.UP: (0, -self._step),
                Action.DOWN: (0, self._step),
                Action.LEFT: (-self._step, 0),
                Action.RIGHT: (self._step, 0),
            }[action]
            self.layout.move_selected(dx, dy)
        elif action == Action.UP:
            self.layout.move_cursor(-1)
        elif action == Action.DOWN:
            self.layout.move_cursor(1)
