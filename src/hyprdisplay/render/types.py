"""Render data types

Shared by projection, rasterizer and frame renderer.
"""

from dataclasses import dataclass, field

from ..config import GLYPH_EMPTY


@dataclass(frozen=True)
class Viewport:
    """Terminal size in character cells"""

    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Bounds:
    """Bounding box in display-server coordinates (max exclusive)"""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def span_x(self) -> int:
        return self.max_x - self.min_x

    @property
    def span_y(self) -> int:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class Rect:
    """Cell rectangle; end coordinates are exclusive"""

    start_x: int
    start_y: int
    end_x: int
    end_y: int

    @property
    def width(self) -> int:
        return max(0, self.end_x - self.start_x)

    @property
    def height(self) -> int:
        return max(0, self.end_y - self.start_y)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def clip(self, width: int, height: int) -> "Rect":
        """Intersect with the grid [0, width) x [0, height)."""
        return Rect(
            start_x=min(max(self.start_x, 0), width),
            start_y=min(max(self.start_y, 0), height),
            end_x=min(max(self.end_x, 0), width),
            end_y=min(max(self.end_y, 0), height),
        )


@dataclass
class Grid:
    """Character grid

    Attributes:
        width: columns
        height: rows
        cells: row-major characters
        footprints: clipped rectangle painted for each monitor, by layout index
    """

    width: int
    height: int
    cells: list[list[str]] = field(default_factory=list)
    footprints: dict[int, Rect] = field(default_factory=dict)

    def __post_init__(self):
        if not self.cells:
            self.cells = [[GLYPH_EMPTY] * self.width for _ in range(self.height)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set(self, x: int, y: int, char: str) -> None:
        """Write one cell; out-of-range writes are dropped."""
        if self.in_bounds(x, y):
            self.cells[y][x] = char

    def get(self, x: int, y: int) -> str:
        return self.cells[y][x]

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.cells]
