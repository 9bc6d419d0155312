"""Effects: apply a command string to Hyprland, or copy it to the clipboard.

Both return an EffectResult whose message is shown in the frame. Neither
raises; failures become error messages. No retries.
"""

from dataclasses import dataclass

from .config import APPLY_SHELL, CLIPBOARD_COMMANDS, METRICS_ENABLED
from .core.process import run_command
from .telemetry import get_logger, metrics

logger = get_logger(__name__)


@dataclass(frozen=True)
class EffectResult:
    """Outcome of an effect

    Attributes:
        effect: "apply" or "copy"
        ok: whether it succeeded
        message: text rendered in the status area
    """

    effect: str
    ok: bool
    message: str


def _record(effect: str, ok: bool) -> None:
    if METRICS_ENABLED:
        metrics.inc(f"effect.{effect}.{'ok' if ok else 'fail'}")


async def apply_configuration(command: str) -> EffectResult:
    """Run the command string through the shell, capturing combined output."""
    if not command:
        return EffectResult("apply", False, "Error applying configuration: no monitors")

    result = await run_command([*APPLY_SHELL, command], merge_stderr=True)
    _record("apply", result.ok)

    if not result.ok:
        reason = result.error or f"exit status {result.returncode}"
        logger.error(f"[Apply] Failed: {reason}")
        return EffectResult(
            "apply", False, f"Error applying configuration: {reason}\n{result.output.rstrip()}"
        )

    logger.info("[Apply] Configuration applied")
    return EffectResult("apply", True, "Configuration applied successfully!")


async def copy_to_clipboard(text: str) -> EffectResult:
    """Try each clipboard tool in order; show the text if none works."""
    for tool, argv in CLIPBOARD_COMMANDS:
        result = await run_command(argv, input_text=text, capture_output=False)
        if result.ok:
            _record("copy", True)
            logger.info(f"[Copy] Copied with {tool}")
            return EffectResult("copy", True, f"Configuration copied to clipboard using {tool}!")
        logger.debug(f"[Copy] {tool} unavailable")

    _record("copy", False)
    logger.warning("[Copy] No clipboard tool worked")
    return EffectResult(
        "copy", False, f"Could not copy to clipboard. Here's your configuration:\n{text}"
    )
