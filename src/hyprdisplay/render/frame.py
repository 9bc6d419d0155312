"""Frame renderer: the whole screen as one string, rebuilt on every event."""

from ..layout.models import MonitorLayout
from .raster import render_diagram
from .types import Viewport

TITLE = "Hyprland Display Manager"
GOODBYE = "Goodbye!\n"

PREFIX_SELECTED = "* "
PREFIX_ACTIVE = "→ "
PREFIX_NONE = "  "


def monitor_line(layout: MonitorLayout, index: int) -> str:
    mon = layout[index]
    prefix = PREFIX_NONE
    if index == layout.cursor:
        prefix = PREFIX_ACTIVE
    if layout.is_selected(index):
        prefix = PREFIX_SELECTED
    return (
        f"{prefix}{mon.name}: Position({mon.x},{mon.y}) "
        f"Size({mon.width}×{mon.height})"
    )


def render_frame(
    layout: MonitorLayout,
    viewport: Viewport,
    help_text: str,
    message: str | None = None,
    quitting: bool = False,
) -> str:
    """Compose title, diagram, monitor list, status message and help.

    Args:
        layout: monitors, cursor and mode
        viewport: terminal size, used for scaling the diagram
        help_text: key help footer
        message: latest status message (apply/copy result), if any
        quitting: render the farewell frame instead
    """
    if quitting:
        return GOODBYE

    parts = [TITLE, "", render_diagram(layout, viewport), "", "Monitors:"]
    parts.extend(monitor_line(layout, i) for i in range(len(layout)))
    parts.append("")
    if message:
        parts.append(message)
        parts.append("")
    parts.append(help_text)
    return "\n".join(parts)
