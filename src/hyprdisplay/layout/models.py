"""Monitor layout model

DTOs and the editable layout:
- Monitor: name, position, size (frozen; moves produce a new record)
- Browsing / Moving: editing mode
- MonitorLayout: monitors + cursor + mode, the single source of truth
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from ..telemetry import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Monitor:
    """A physical display output"""

    name: str
    x: int
    y: int
    width: int
    height: int

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def moved(self, dx: int, dy: int) -> "Monitor":
        """Return a copy translated by (dx, dy)."""
        return replace(self, x=self.x + dx, y=self.y + dy)


@dataclass(frozen=True)
class Browsing:
    """No monitor selected: direction keys move the cursor."""


@dataclass(frozen=True)
class Moving:
    """The monitor at *index* is selected: direction keys move it."""

    index: int


Mode = Browsing | Moving

BROWSING = Browsing()


class MonitorLayout:
    """Ordered monitors with a cursor and an editing mode.

    Order is discovery order and only matters for iteration and display.
    The selected monitor is always the one under the cursor: entering
    ``Moving`` pins it, and the cursor does not move until the mode returns
    to ``Browsing``.
    """

    def __init__(self, monitors: Iterable[Monitor] = ()):
        self._monitors: list[Monitor] = list(monitors)
        self._cursor = 0
        self._mode: Mode = BROWSING

    # === Read access ===

    @property
    def monitors(self) -> list[Monitor]:
        return list(self._monitors)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def active(self) -> Monitor | None:
        """Monitor under the cursor, None for an empty layout."""
        if not self._monitors:
            return None
        return self._monitors[self._cursor]

    @property
    def selected_index(self) -> int | None:
        if isinstance(self._mode, Moving):
            return self._mode.index
        return None

    def is_selected(self, index: int) -> bool:
        return self.selected_index == index

    def __len__(self) -> int:
        return len(self._monitors)

    def __iter__(self) -> Iterator[Monitor]:
        return iter(self._monitors)

    def __getitem__(self, index: int) -> Monitor:
        return self._monitors[index]

    # === Mutations ===

    def move_selected(self, dx: int, dy: int) -> None:
        """Translate the selected monitor. No-op while browsing."""
        index = self.selected_index
        if index is None:
            return
        self._monitors[index] = self._monitors[index].moved(dx, dy)
        logger.debug(
            f"[Layout] {self._monitors[index].name} -> {self._monitors[index].position}"
        )

    def toggle_selection_at_cursor(self) -> None:
        """Switch between Browsing and Moving(cursor)."""
        if not self._monitors:
            return
        if isinstance(self._mode, Moving):
            self._mode = BROWSING
        else:
            self._mode = Moving(self._cursor)
        logger.debug(f"[Layout] Mode: {self._mode}")

    def move_cursor(self, delta: int) -> None:
        """Move the cursor by *delta*, clamped to the ends (no wraparound).

        Ignored while a monitor is selected.
        """
        if not self._monitors or isinstance(self._mode, Moving):
            return
        self._cursor = max(0, min(len(self._monitors) - 1, self._cursor + delta))
