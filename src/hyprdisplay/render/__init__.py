"""Render module

- types: Viewport, Bounds, Rect, Grid
- projection: bounding box, scale and grid sizing
- raster: glyph stamping and the bordered diagram
- frame: full frame string
- renderer: Rich Text for the live display
"""

from .frame import render_frame
from .projection import calculate_scale, compute_bounds, grid_size, project_monitor
from .raster import glyph_for, rasterize, render_diagram, render_grid
from .renderer import FrameRenderer
from .types import Bounds, Grid, Rect, Viewport

__all__ = [
    "Viewport",
    "Bounds",
    "Rect",
    "Grid",
    "compute_bounds",
    "calculate_scale",
    "grid_size",
    "project_monitor",
    "glyph_for",
    "rasterize",
    "render_grid",
    "render_diagram",
    "render_frame",
    "FrameRenderer",
]
