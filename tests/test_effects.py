"""Tests for apply / clipboard effects."""

import asyncio
import os
import stat
from unittest.mock import AsyncMock, call, patch

import pytest

from hyprdisplay.core.process import CommandResult
from hyprdisplay.effects import apply_configuration, copy_to_clipboard
from hyprdisplay.telemetry import metrics

COMMAND = "hyprctl keyword monitor 'eDP-1,highres,0,0,1'"


def _result(argv, returncode=0, output="", error="") -> CommandResult:
    return CommandResult(argv=argv, returncode=returncode, output=output, error=error)


class TestApplyConfiguration:
    """Tests for apply_configuration."""

    @pytest.mark.asyncio
    async def test_success(self):
        with patch(
            "hyprdisplay.effects.run_command",
            new_callable=AsyncMock,
            return_value=_result(["bash"], output="ok\n"),
        ) as mock_run:
            result = await apply_configuration(COMMAND)

        mock_run.assert_awaited_once_with(["bash", "-c", COMMAND], merge_stderr=True)
        assert result.ok
        assert result.effect == "apply"
        assert result.message == "Configuration applied successfully!"
        assert metrics.get_counter("effect.apply.ok") == 1

    @pytest.mark.asyncio
    async def test_failure_includes_output(self):
        with patch(
            "hyprdisplay.effects.run_command",
            new_callable=AsyncMock,
            return_value=_result(["bash"], returncode=1, output="invalid monitor rule\n"),
        ):
            result = await apply_configuration(COMMAND)

        assert not result.ok
        assert result.message.startswith("Error applying configuration: exit status 1")
        assert "invalid monitor rule" in result.message
        assert metrics.get_counter("effect.apply.fail") == 1

    @pytest.mark.asyncio
    async def test_shell_missing(self):
        with patch(
            "hyprdisplay.effects.run_command",
            new_callable=AsyncMock,
            return_value=_result(["bash"], returncode=None, error="No such file or directory"),
        ):
            result = await apply_configuration(COMMAND)

        assert "No such file or directory" in result.message

    @pytest.mark.asyncio
    async def test_empty_command(self):
        with patch("hyprdisplay.effects.run_command", new_callable=AsyncMock) as mock_run:
            result = await apply_configuration("")

        mock_run.assert_not_awaited()
        assert not result.ok


class TestCopyToClipboard:
    """Tests for copy_to_clipboard."""

    @pytest.mark.asyncio
    async def test_first_backend(self):
        with patch(
            "hyprdisplay.effects.run_command",
            new_callable=AsyncMock,
            return_value=_result(["xclip"]),
        ) as mock_run:
            result = await copy_to_clipboard(COMMAND)

        mock_run.assert_awaited_once_with(
            ["xclip", "-selection", "clipboard"], input_text=COMMAND, capture_output=False
        )
        assert result.ok
        assert result.message == "Configuration copied to clipboard using xclip!"

    @pytest.mark.asyncio
    async def test_fallback_backend(self):
        with patch(
            "hyprdisplay.effects.run_command",
            new_callable=AsyncMock,
            side_effect=[_result(["xclip"], returncode=None), _result(["wl-copy"])],
        ) as mock_run:
            result = await copy_to_clipboard(COMMAND)

        assert mock_run.await_args_list == [
            call(["xclip", "-selection", "clipboard"], input_text=COMMAND, capture_output=False),
            call(["wl-copy"], input_text=COMMAND, capture_output=False),
        ]
        assert result.message == "Configuration copied to clipboard using wl-copy!"
        assert metrics.get_counter("effect.copy.ok") == 1

    @pytest.mark.asyncio
    async def test_no_backend_shows_command(self):
        with patch(
            "hyprdisplay.effects.run_command",
            new_callable=AsyncMock,
            side_effect=[_result(["xclip"], returncode=1), _result(["wl-copy"], returncode=None)],
        ):
            result = await copy_to_clipboard(COMMAND)

        assert not result.ok
        assert result.message == (
            "Could not copy to clipboard. Here's your configuration:\n" + COMMAND
        )
        assert metrics.get_counter("effect.copy.fail") == 1

    @pytest.mark.asyncio
    async def test_returns_while_forked_child_holds_selection(self, tmp_path, monkeypatch):
        """xclip and wl-copy fork a child that outlives them."""
        script = tmp_path / "xclip"
        script.write_text("#!/bin/sh\ncat >/dev/null\nsleep 5 &\nexit 0\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        monkeypatch.setenv("PATH", f"{tmp_path}{os.pathsep}{os.environ.get('PATH', '')}")

        result = await asyncio.wait_for(copy_to_clipboard(COMMAND), timeout=3.0)

        assert result.ok
        assert result.message == "Configuration copied to clipboard using xclip!"
