"""Rasterizer: stamps monitor footprints into a character grid.

Monitors are painted in layout order, so a later monitor overwrites an
earlier one where they overlap. Glyph precedence per monitor is
selected > active (cursor) > plain.
"""

from ..config import GLYPH_ACTIVE, GLYPH_MONITOR, GLYPH_SELECTED, LEGEND
from ..layout.models import MonitorLayout
from .projection import calculate_scale, compute_bounds, grid_size, project_monitor
from .types import Grid, Viewport


def glyph_for(layout: MonitorLayout, index: int) -> str:
    if layout.is_selected(index):
        return GLYPH_SELECTED
    if index == layout.cursor:
        return GLYPH_ACTIVE
    return GLYPH_MONITOR


def rasterize(layout: MonitorLayout, viewport: Viewport) -> Grid:
    """Build the grid for the current layout and viewport."""
    bounds = compute_bounds(layout)
    scale = calculate_scale(bounds, viewport)
    width, height = grid_size(bounds, scale)
    grid = Grid(width=width, height=height)

    for index, mon in enumerate(layout):
        rect = project_monitor(mon, bounds, scale).clip(width, height)
        grid.footprints[index] = rect
        if rect.is_empty:
            continue

        char = glyph_for(layout, index)
        for y in range(rect.start_y, rect.end_y):
            for x in range(rect.start_x, rect.end_x):
                grid.cells[y][x] = char

        # Name on the middle row, one cell in from the left edge
        if rect.width > len(mon.name) + 2:
            name_y = (rect.start_y + rect.end_y) // 2
            name_x = rect.start_x + 1
            for i, c in enumerate(mon.name):
                if name_x + i < rect.end_x:
                    grid.set(name_x + i, name_y, c)

    return grid


def render_grid(grid: Grid) -> str:
    """Box-drawn grid followed by the legend."""
    lines = ["Display Layout:", "┌" + "─" * grid.width + "┐"]
    lines.extend(f"│{row}│" for row in grid.rows())
    lines.append("└" + "─" * grid.width + "┘")
    lines.append("")
    lines.append(LEGEND)
    return "\n".join(lines) + "\n"


def render_diagram(layout: MonitorLayout, viewport: Viewport) -> str:
    return render_grid(rasterize(layout, viewport))
