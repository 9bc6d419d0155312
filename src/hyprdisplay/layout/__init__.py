"""Layout module

- models: Monitor, editing modes, MonitorLayout
- query: hyprctl discovery with default fallback
"""

from .models import BROWSING, Browsing, Mode, Monitor, MonitorLayout, Moving
from .query import HyprctlClient, HyprMonitor, default_monitors, parse_monitors, query_monitors

__all__ = [
    # Models
    "Monitor",
    "MonitorLayout",
    "Mode",
    "Browsing",
    "Moving",
    "BROWSING",
    # Query
    "HyprMonitor",
    "HyprctlClient",
    "default_monitors",
    "parse_monitors",
    "query_monitors",
]
