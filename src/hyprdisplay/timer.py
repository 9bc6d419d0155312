"""Timer - delayed callbacks on the session's event loop

Used to expire status messages: the callback only enqueues an event, so the
layout is still touched by the session alone.

Usage:
    timer = Timer()
    timer.register_delay("status_message", 8.0, lambda: queue.enqueue(...))
    timer.cancel_delay("status_message")

    task = asyncio.create_task(timer.run())
    timer.stop()
"""

import asyncio
import inspect
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import Any

from .config import METRICS_ENABLED, TIMER_TICK_INTERVAL
from .telemetry import get_logger, metrics

logger = get_logger(__name__)

TimerCallback = Callable[[], Any | Coroutine[Any, Any, Any]]


@dataclass
class DelayTask:
    """One-shot task"""

    name: str
    delay: float  # seconds
    callback: TimerCallback
    trigger_at: float = 0.0  # event loop time
    cancelled: bool = False


class Timer:
    """Runs delayed callbacks on each tick.

    - A task registered under an existing name replaces it
    - A failing callback is logged and does not affect other tasks
    """

    def __init__(self, tick_interval: float | None = None):
        self._tick_interval = tick_interval or TIMER_TICK_INTERVAL
        self._delay_tasks: dict[str, DelayTask] = {}
        self._running = False

    @property
    def is_running(self) -> bool:
        return self._running

    def register_delay(self, name: str, delay: float, callback: TimerCallback) -> None:
        """Schedule *callback* to run *delay* seconds from now."""
        now = asyncio.get_running_loop().time()
        if name in self._delay_tasks:
            logger.debug(f"[Timer] Overwriting delay task: {name}")

        self._delay_tasks[name] = DelayTask(
            name=name,
            delay=delay,
            callback=callback,
            trigger_at=now + delay,
        )
        logger.debug(f"[Timer] Registered delay task: {name} ({delay}s)")

    def cancel_delay(self, name: str) -> bool:
        task = self._delay_tasks.pop(name, None)
        if task is None:
            return False
        task.cancelled = True
        logger.debug(f"[Timer] Cancelled delay task: {name}")
        return True

    async def run(self) -> None:
        """Tick until stop() is called."""
        if self.is_running:
            logger.warning("[Timer] Already running")
            return

        self._running = True
        logger.debug(f"[Timer] Started (tick={self._tick_interval}s)")
        try:
            while self._running:
                await self._tick()
                await asyncio.sleep(self._tick_interval)
        except asyncio.CancelledError:
            logger.debug("[Timer] Cancelled")
        finally:
            self._running = False
            self._delay_tasks.clear()

    def stop(self) -> None:
        """Stop ticking and drop pending tasks."""
        if not self.is_running:
            return
        self._running = False
        for name in list(self._delay_tasks):
            self.cancel_delay(name)
        logger.debug("[Timer] Stopped")

    async def _tick(self) -> None:
        now = asyncio.get_running_loop().time()
        for name, task in list(self._delay_tasks.items()):
            if task.cancelled or now < task.trigger_at:
                continue
            self._delay_tasks.pop(name, None)
            await self._execute_callback(name, task.callback)

    async def _execute_callback(self, name: str, callback: TimerCallback) -> None:
        try:
            result = callback()
            if inspect.iscoroutine(result):
                await result
        except Exception as e:
            logger.error(f"[Timer] Task '{name}' failed: {e}")
            if METRICS_ENABLED:
                metrics.inc("timer.errors", {"task": name})

