"""Subprocess runner shared by the monitor query and the effects."""

import asyncio
from dataclasses import dataclass

from ..config import LOG_MAX_CMD_LEN
from ..telemetry import get_logger, truncate_command

logger = get_logger(__name__)


@dataclass
class CommandResult:
    """Outcome of one subprocess invocation.

    Attributes:
        argv: the command that ran
        returncode: exit status, None if the process could not be started
        output: stdout (with stderr merged in when requested)
        error: stderr text, or the start-up error message
    """

    argv: list[str]
    returncode: int | None
    output: str = ""
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


async def run_command(
    argv: list[str],
    input_text: str | None = None,
    merge_stderr: bool = False,
    capture_output: bool = True,
) -> CommandResult:
    """Execute a command without raising.

    Args:
        argv: program and arguments
        input_text: text written to the process' stdin, if any
        merge_stderr: fold stderr into ``output`` (combined output)
        capture_output: pipe stdout and stderr; when False both go to
            /dev/null and the result carries no text

    Returns:
        CommandResult; ``returncode`` is None when the program is missing
        or could not be spawned.
    """
    shown = truncate_command(" ".join(argv), LOG_MAX_CMD_LEN)
    if not capture_output:
        stdout_target = stderr_target = asyncio.subprocess.DEVNULL
    else:
        stdout_target = asyncio.subprocess.PIPE
        stderr_target = asyncio.subprocess.STDOUT if merge_stderr else asyncio.subprocess.PIPE

    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdin=asyncio.subprocess.PIPE if input_text is not None else asyncio.subprocess.DEVNULL,
            stdout=stdout_target,
            stderr=stderr_target,
        )
        stdout, stderr = await proc.communicate(
            input_text.encode() if input_text is not None else None
        )
    except OSError as e:
        logger.warning(f"[Process] Could not run {shown}: {e}")
        return CommandResult(argv=argv, returncode=None, error=str(e))

    output = stdout.decode(errors="replace") if stdout else ""
    error = stderr.decode(errors="replace") if stderr else ""

    if proc.returncode != 0:
        logger.warning(f"[Process] Command failed ({proc.returncode}): {shown}: {error.strip()}")
    else:
        logger.debug(f"[Process] Command ok: {shown}")

    return CommandResult(argv=argv, returncode=proc.returncode, output=output, error=error)
