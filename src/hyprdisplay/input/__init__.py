"""Input module

- keys: actions, key bindings and help text
- state_machine: key -> layout mutation / Outcome
- reader: raw terminal input -> key names
"""

from .keys import DEFAULT_BINDINGS, Action, KeyBinding, KeyMap
from .reader import KeyReader, decode_keys
from .state_machine import InputStateMachine, Outcome, OutcomeKind

__all__ = [
    # Keys
    "Action",
    "KeyBinding",
    "KeyMap",
    "DEFAULT_BINDINGS",
    # State machine
    "InputStateMachine",
    "Outcome",
    "OutcomeKind",
    # Reader
    "KeyReader",
    "decode_keys",
]
