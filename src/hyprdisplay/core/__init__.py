"""Core helpers shared across hyprdisplay modules."""

from .process import CommandResult, run_command

__all__ = ["CommandResult", "run_command"]
