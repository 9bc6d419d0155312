"""Projection from display-server coordinates to character cells.

The bounding box always contains the origin (0, 0), and the same box drives
both the scale factor and the cell placement, so monitors at negative
coordinates shrink the scale instead of falling outside the grid.
"""

from collections.abc import Iterable

from ..config import (
    CELL_UNITS_X,
    CELL_UNITS_Y,
    GRID_PAD_X,
    GRID_PAD_Y,
    MIN_GRID_HEIGHT,
    MIN_GRID_WIDTH,
    MIN_SCALE,
    SCALE_FACTOR_X,
    SCALE_FACTOR_Y,
)
from ..layout.models import Monitor
from .types import Bounds, Rect, Viewport


def compute_bounds(monitors: Iterable[Monitor]) -> Bounds:
    """Bounding box of all monitors, seeded with the origin."""
    min_x = min_y = max_x = max_y = 0
    for mon in monitors:
        min_x = min(min_x, mon.x)
        min_y = min(min_y, mon.y)
        max_x = max(max_x, mon.x + mon.width)
        max_y = max(max_y, mon.y + mon.height)
    return Bounds(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)


def calculate_scale(bounds: Bounds, viewport: Viewport) -> float:
    """Scale so the diagram fits the viewport, never below MIN_SCALE.

    Only part of the viewport is targeted (SCALE_FACTOR_X / _Y) so the
    monitor list and help text fit underneath.
    """
    if bounds.span_x <= 0 or bounds.span_y <= 0:
        return MIN_SCALE

    scale_x = viewport.width / bounds.span_x * SCALE_FACTOR_X
    scale_y = viewport.height / bounds.span_y * SCALE_FACTOR_Y
    return max(min(scale_x, scale_y), MIN_SCALE)


def grid_size(bounds: Bounds, scale: float) -> tuple[int, int]:
    """Grid (width, height) in cells, padded and floored to the minimum."""
    width = int(bounds.span_x * scale / CELL_UNITS_X) + GRID_PAD_X
    height = int(bounds.span_y * scale / CELL_UNITS_Y) + GRID_PAD_Y
    return max(width, MIN_GRID_WIDTH), max(height, MIN_GRID_HEIGHT)


def project_monitor(monitor: Monitor, bounds: Bounds, scale: float) -> Rect:
    """Unclipped cell rectangle of a monitor."""
    start_x = int((monitor.x - bounds.min_x) * scale / CELL_UNITS_X)
    start_y = int((monitor.y - bounds.min_y) * scale / CELL_UNITS_Y)
    return Rect(
        start_x=start_x,
        start_y=start_y,
        end_x=start_x + int(monitor.width * scale / CELL_UNITS_X),
        end_y=start_y + int(monitor.height * scale / CELL_UNITS_Y),
    )
