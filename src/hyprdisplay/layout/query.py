"""Monitor discovery via ``hyprctl monitors -j``.

Any failure (hyprctl missing, non-zero exit, bad JSON, invalid records,
empty list) falls back to the built-in three-monitor layout.
"""

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from ..config import DEFAULT_MONITORS, METRICS_ENABLED, QUERY_COMMAND
from ..core.process import run_command
from ..telemetry import get_logger, metrics
from .models import Monitor

logger = get_logger(__name__)


class HyprMonitor(BaseModel):
    """One record of ``hyprctl monitors -j`` (unlisted keys are ignored)."""

    name: str
    description: str = ""
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    x: int
    y: int

    def to_monitor(self) -> Monitor:
        return Monitor(name=self.name, x=self.x, y=self.y, width=self.width, height=self.height)


_MONITOR_LIST = TypeAdapter(list[HyprMonitor])


def default_monitors() -> list[Monitor]:
    """The fallback layout: eDP-1, DP-2 and DP-4 side by side."""
    return [Monitor(**entry) for entry in DEFAULT_MONITORS]  # type: ignore[arg-type]


def parse_monitors(raw: str) -> list[Monitor]:
    """Parse hyprctl JSON output.

    Raises:
        ValidationError: on malformed JSON or records
    """
    return [hm.to_monitor() for hm in _MONITOR_LIST.validate_json(raw)]


class HyprctlClient:
    """Reads monitor state from hyprctl."""

    def __init__(self, command: list[str] | None = None):
        self._command = list(command or QUERY_COMMAND)

    async def list_monitors(self) -> list[Monitor] | None:
        """Query connected monitors.

        Returns:
            Monitors in hyprctl order, or None when the query failed.
        """
        result = await run_command(self._command)
        if not result.ok:
            logger.warning(f"[Query] hyprctl failed: {result.error.strip() or result.returncode}")
            return None

        try:
            return parse_monitors(result.output)
        except ValidationError as e:
            logger.warning(f"[Query] Invalid hyprctl output: {e.error_count()} error(s)")
            return None


async def query_monitors(client: HyprctlClient | None = None) -> list[Monitor]:
    """Return the discovered monitors, or the default layout on any failure."""
    client = client or HyprctlClient()
    monitors = await client.list_monitors()

    if not monitors:
        logger.info("[Query] Using default monitor layout")
        if METRICS_ENABLED:
            metrics.inc("query.fallback")
        return default_monitors()

    logger.info(f"[Query] Found {len(monitors)} monitor(s): {', '.join(m.name for m in monitors)}")
    return monitors
