"""hyprdisplay entry point

Discovers monitors, runs the interactive session, and maps the outcome to
an exit code: 0 on quit, 1 when the terminal session fails.
"""

import asyncio
import sys

from rich.console import Console

from . import config
from .layout.models import MonitorLayout
from .layout.query import query_monitors
from .render.frame import GOODBYE
from .runtime.session import Session
from .telemetry import get_logger, metrics, setup_logging

logger = get_logger(__name__)


async def start_session(console: Console) -> None:
    """Query monitors and run the editor until quit."""
    monitors = await query_monitors()
    session = Session(MonitorLayout(monitors), console=console)
    await session.run()
    logger.debug(f"[App] Counters: {metrics.get_all_counters()}")


def main() -> int:
    """Console script entry."""
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)
    console = Console()

    try:
        asyncio.run(start_session(console))
    except KeyboardInterrupt:
        logger.info("[App] Interrupted")
    except Exception as e:
        logger.exception("[App] Fatal error")
        Console(stderr=True).print(f"hyprdisplay: {e}", style="red", markup=False, highlight=False)
        return 1

    console.print(GOODBYE, end="", markup=False, highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
