"""hyprctl command generation.

One ``hyprctl keyword monitor`` subcommand per monitor, chained with ``&&``.
Only names and positions are used, so the string is stable across
selection and cursor changes.
"""

from collections.abc import Iterable

from .config import COMMAND_SEPARATOR, MONITOR_MODE, MONITOR_SCALE
from .layout.models import Monitor


def monitor_rule(monitor: Monitor) -> str:
    """Hyprland monitor rule, e.g. ``DP-2,highres,1920,0,1``."""
    return f"{monitor.name},{MONITOR_MODE},{monitor.x},{monitor.y},{MONITOR_SCALE}"


def monitor_command(monitor: Monitor) -> str:
    return f"hyprctl keyword monitor '{monitor_rule(monitor)}'"


def generate_command(monitors: Iterable[Monitor]) -> str:
    """Build the full command string for a layout (empty for no monitors)."""
    return COMMAND_SEPARATOR.join(monitor_command(m) for m in monitors)
