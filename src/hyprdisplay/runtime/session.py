"""Session - the interactive editing loop

Owns the layout, input state machine, viewport and status message. Events
are taken from the EventQueue one at a time; each is applied, then the
whole frame is redrawn. Effects run as background tasks and report back by
enqueueing an EffectResultEvent.
"""

import asyncio
import signal
from collections.abc import Callable, Coroutine
from typing import Any

from rich.console import Console
from rich.live import Live
from rich.text import Text

from ..config import METRICS_ENABLED, STATUS_MESSAGE_SECONDS
from ..effects import EffectResult, apply_configuration, copy_to_clipboard
from ..input.keys import KeyMap
from ..input.reader import KeyReader, OnKeyCallback
from ..input.state_machine import InputStateMachine, OutcomeKind
from ..layout.models import MonitorLayout
from ..render.frame import render_frame
from ..render.renderer import FrameRenderer
from ..render.types import Viewport
from ..telemetry import get_logger, metrics
from ..timer import Timer
from .events import (
    EffectResultEvent,
    Event,
    KeyEvent,
    MessageExpiredEvent,
    ResizeEvent,
)
from .queue import EventQueue

logger = get_logger(__name__)

ReaderFactory = Callable[[OnKeyCallback], KeyReader]

_MESSAGE_TIMER = "status_message"


class Session:
    """Single-consumer event loop around a MonitorLayout.

    Attributes:
        layout: the monitors being edited
        machine: key handling for the layout
        viewport: last known terminal size
        message: current status message, if any
        quitting: set once a quit key was handled
    """

    def __init__(
        self,
        layout: MonitorLayout,
        console: Console | None = None,
        queue: EventQueue | None = None,
        timer: Timer | None = None,
        keymap: KeyMap | None = None,
        reader_factory: ReaderFactory = KeyReader,
        message_seconds: float = STATUS_MESSAGE_SECONDS,
    ):
        self.layout = layout
        self.machine = InputStateMachine(layout, keymap)
        self.console = console or Console()
        self.queue = queue if queue is not None else EventQueue()
        self.timer = timer or Timer()
        self.viewport = Viewport()
        self.message: str | None = None
        self.quitting = False

        self._reader_factory = reader_factory
        self._message_seconds = message_seconds
        self._message_id = 0
        self._renderer = FrameRenderer()
        self._effects: set[asyncio.Task] = set()

    # === Frame ===

    def frame(self) -> str:
        help_text = self.machine.keymap.short_help(self.viewport.width)
        return render_frame(
            self.layout,
            self.viewport,
            help_text,
            message=self.message,
            quitting=self.quitting,
        )

    def renderable(self) -> Text:
        return self._renderer.to_text(self.frame())

    # === Event handling ===

    def handle_event(self, event: Event) -> bool:
        """Apply one event to the session state.

        Returns:
            True if the frame changed and must be redrawn
        """
        if METRICS_ENABLED:
            metrics.inc("events.processed", {"kind": event.kind})

        if isinstance(event, KeyEvent):
            return self._handle_key(event.key)
        if isinstance(event, ResizeEvent):
            self.viewport = Viewport(event.width, event.height)
            return True
        if isinstance(event, EffectResultEvent):
            self.set_message(event.result.message)
            return True
        if isinstance(event, MessageExpiredEvent) and event.message_id == self._message_id:
            self.message = None
            return True
        return False

    def _handle_key(self, key: str) -> bool:
        outcome = self.machine.handle_key(key)

        if outcome.kind == OutcomeKind.QUIT:
            logger.info("[Session] Quit requested")
            self.quitting = True
            return True
        if outcome.kind == OutcomeKind.APPLY:
            self.set_message(f"Applying configuration:\n{outcome.command}")
            self.dispatch(apply_configuration(outcome.command))
            return True
        if outcome.kind == OutcomeKind.COPY:
            self.dispatch(copy_to_clipboard(outcome.command))
        return outcome.changed

    def set_message(self, message: str) -> None:
        """Show *message* until replaced or expired."""
        self._message_id += 1
        self.message = message
        if self._message_seconds <= 0:
            return

        message_id = self._message_id
        try:
            self.timer.register_delay(
                _MESSAGE_TIMER,
                self._message_seconds,
                lambda: self.queue.enqueue(MessageExpiredEvent(message_id)),
            )
        except RuntimeError:
            # No running loop (synchronous use): the message just stays
            logger.debug("[Session] No event loop, message will not expire")

    # === Effects ===

    def dispatch(self, effect: Coroutine[Any, Any, EffectResult]) -> asyncio.Task:
        """Run *effect* in the background; its result comes back as an event."""
        task = asyncio.get_running_loop().create_task(self._run_effect(effect))
        self._effects.add(task)
        task.add_done_callback(self._effects.discard)
        return task

    async def _run_effect(self, effect: Coroutine[Any, Any, EffectResult]) -> None:
        try:
            result = await effect
        except Exception as e:
            logger.exception("[Session] Effect crashed")
            result = EffectResult("effect", False, f"Error: {e}")
        self.queue.enqueue(EffectResultEvent(result))

    @property
    def pending_effects(self) -> int:
        return len(self._effects)

    # === Producers ===

    def on_key(self, key: str) -> None:
        self.queue.enqueue(KeyEvent(key))

    def on_resize(self) -> None:
        size = self.console.size
        self.queue.enqueue(ResizeEvent(size.width, size.height))

    # === Main loop ===

    async def process_events(self, on_frame: Callable[[], None] | None = None) -> None:
        """Consume events until quitting, calling *on_frame* after each change."""
        while not self.quitting:
            event = await self.queue.get()
            if self.handle_event(event) and on_frame:
                on_frame()

    async def run(self) -> None:
        """Take over the terminal and edit until the operator quits.

        In-flight effects are not awaited on quit.

        Raises:
            RuntimeError: the terminal session could not be set up
        """
        loop = asyncio.get_running_loop()
        reader = self._reader_factory(self.on_key)
        timer_task: asyncio.Task | None = None

        try:
            reader.start(loop)
            loop.add_signal_handler(signal.SIGWINCH, self.on_resize)
            loop.add_signal_handler(signal.SIGINT, self.on_key, "ctrl+c")
            timer_task = asyncio.create_task(self.timer.run())
            self.on_resize()
            logger.info(f"[Session] Started with {len(self.layout)} monitor(s)")

            with Live(
                self.renderable(),
                console=self.console,
                screen=True,
                auto_refresh=False,
                redirect_stdout=False,
                redirect_stderr=False,
            ) as live:
                await self.process_events(
                    lambda: live.update(self.renderable(), refresh=True)
                )
        finally:
            loop.remove_signal_handler(signal.SIGWINCH)
            loop.remove_signal_handler(signal.SIGINT)
            reader.stop()
            self.timer.stop()
            if timer_task is not None:
                timer_task.cancel()
            logger.info("[Session] Stopped")
