"""Key bindings

Each Action has a KeyBinding with its key names and help text. Key names
are the ones produced by ``input.reader.decode_keys``.
"""

from dataclasses import dataclass
from enum import Enum


class Action(Enum):
    """What a key press asks for"""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SELECT = "select"
    APPLY = "apply"
    COPY = "copy"
    QUIT = "quit"

    @property
    def is_direction(self) -> bool:
        return self in {Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT}


@dataclass(frozen=True)
class KeyBinding:
    """Keys bound to one action, plus the help entry shown for it"""

    action: Action
    keys: tuple[str, ...]
    help_key: str
    help_desc: str

    def matches(self, key: str) -> bool:
        return key in self.keys

    @property
    def help(self) -> str:
        return f"{self.help_key} {self.help_desc}"


DEFAULT_BINDINGS: tuple[KeyBinding, ...] = (
    KeyBinding(Action.UP, ("up", "k"), "↑/k", "move up"),
    KeyBinding(Action.DOWN, ("down", "j"), "↓/j", "move down"),
    KeyBinding(Action.LEFT, ("left", "h"), "←/h", "move left"),
    KeyBinding(Action.RIGHT, ("right", "l"), "→/l", "move right"),
    KeyBinding(Action.SELECT, ("enter", "space"), "enter/space", "select monitor"),
    KeyBinding(Action.APPLY, ("a",), "a", "apply configuration"),
    KeyBinding(Action.COPY, ("c",), "c", "copy to clipboard"),
    KeyBinding(Action.QUIT, ("q", "ctrl+c"), "q/ctrl+c", "quit"),
)

HELP_SEPARATOR = " • "
HELP_ELLIPSIS = " …"


class KeyMap:
    """Lookup from key names to actions, and help text rendering."""

    def __init__(self, bindings: tuple[KeyBinding, ...] = DEFAULT_BINDINGS):
        self._bindings = bindings
        self._by_key: dict[str, Action] = {}
        for binding in bindings:
            for key in binding.keys:
                self._by_key.setdefault(key, binding.action)

    @property
    def bindings(self) -> tuple[KeyBinding, ...]:
        return self._bindings

    def action_for(self, key: str) -> Action | None:
        return self._by_key.get(key)

    def short_help(self, width: int = 0) -> str:
        """One-line help.

        Entries are dropped from the end, and replaced by an ellipsis, when
        the line would exceed *width*. A width of 0 means unlimited.
        """
        line = ""
        for binding in self._bindings:
            candidate = binding.help if not line else line + HELP_SEPARATOR + binding.help
            if width > 0 and len(candidate) > width:
                if line and len(line) + len(HELP_ELLIPSIS) <= width:
                    line += HELP_ELLIPSIS
                return line
            line = candidate
        return line

    def full_help(self) -> list[list[KeyBinding]]:
        """Bindings in columns: movement keys, then commands."""
        movement = [b for b in self._bindings if b.action.is_direction]
        commands = [b for b in self._bindings if not b.action.is_direction]
        return [movement, commands]
