"""Tests for InputStateMachine."""

import pytest

from hyprdisplay.commands import generate_command
from hyprdisplay.input.state_machine import InputStateMachine, OutcomeKind
from hyprdisplay.layout.models import BROWSING, Moving
from hyprdisplay.telemetry import metrics


@pytest.fixture
def machine(default_layout) -> InputStateMachine:
    return InputStateMachine(default_layout)


def _positions(machine: InputStateMachine) -> list[tuple[int, int]]:
    return [m.position for m in machine.layout]


class TestBrowsing:
    """Direction keys while nothing is selected."""

    def test_up_down_move_cursor(self, machine):
        machine.handle_key("down")
        machine.handle_key("j")
        assert machine.layout.cursor == 2

        machine.handle_key("up")
        assert machine.layout.cursor == 1
        machine.handle_key("k")
        machine.handle_key("k")
        assert machine.layout.cursor == 0

    def test_left_right_do_nothing(self, machine):
        before = _positions(machine)

        outcome = machine.handle_key("left")
        machine.handle_key("l")

        assert not outcome.changed
        assert machine.layout.cursor == 0
        assert _positions(machine) == before

    def test_unbound_key(self, machine):
        outcome = machine.handle_key("x")
        assert outcome.kind == OutcomeKind.NONE
        assert not outcome.changed

    def test_clamped_cursor_reports_no_change(self, machine):
        assert not machine.handle_key("up").changed
        assert machine.layout.cursor == 0

        assert machine.handle_key("down").changed
        machine.handle_key("down")
        assert not machine.handle_key("down").changed
        assert machine.layout.cursor == 2

    def test_select_and_move_report_change(self, machine):
        assert machine.handle_key("enter").changed
        assert machine.handle_key("left").changed
        assert machine.handle_key("enter").changed


class TestMoving:
    """Direction keys while a monitor is selected."""

    def test_select_toggles_mode(self, machine):
        machine.handle_key("enter")
        assert machine.layout.mode == Moving(0)
        assert machine.moving

        machine.handle_key("space")
        assert machine.layout.mode == BROWSING

    def test_directions_translate_by_step(self, machine):
        machine.handle_key("enter")

        machine.handle_key("up")
        assert machine.layout[0].position == (0, -10)
        machine.handle_key("down")
        machine.handle_key("down")
        assert machine.layout[0].position == (0, 10)
        machine.handle_key("left")
        assert machine.layout[0].position == (-10, 10)
        machine.handle_key("right")
        machine.handle_key("right")
        assert machine.layout[0].position == (10, 10)

    def test_cursor_never_moves(self, machine):
        machine.handle_key("down")
        machine.handle_key("enter")

        for key in ["up", "up", "down", "k", "j", "up"]:
            machine.handle_key(key)
            assert machine.layout.cursor == 1

    def test_custom_step(self, default_layout):
        machine = InputStateMachine(default_layout, step=100)
        machine.handle_key("enter")
        machine.handle_key("right")
        assert machine.layout[0].position == (100, 0)

    def test_second_monitor_right_three_times(self, machine):
        machine.handle_key("down")
        machine.handle_key("enter")
        for _ in range(3):
            machine.handle_key("right")

        assert _positions(machine) == [(0, 0), (1950, 0), (3840, 0)]


class TestCommands:
    """Apply / copy / quit outcomes."""

    def test_apply(self, machine):
        outcome = machine.handle_key("a")
        assert outcome.kind == OutcomeKind.APPLY
        assert outcome.command == generate_command(machine.layout)

    def test_apply_keeps_mode(self, machine):
        machine.handle_key("enter")
        machine.handle_key("a")
        assert machine.layout.mode == Moving(0)

    def test_copy_reflects_edits(self, machine):
        machine.handle_key("enter")
        machine.handle_key("left")
        outcome = machine.handle_key("c")

        assert outcome.kind == OutcomeKind.COPY
        assert "'eDP-1,highres,-10,0,1'" in outcome.command

    @pytest.mark.parametrize("key", ["q", "ctrl+c"])
    def test_quit(self, machine, key):
        assert machine.handle_key(key).kind == OutcomeKind.QUIT

    def test_metrics(self, machine):
        machine.handle_key("down")
        machine.handle_key("j")
        assert metrics.get_counter("input.action", {"action": "down"}) == 2


class TestEmptyLayout:
    def test_keys_are_noops(self, empty_layout):
        machine = InputStateMachine(empty_layout)
        for key in ["up", "down", "enter", "left", "right"]:
            assert not machine.handle_key(key).changed
        assert empty_layout.cursor == 0

    def test_apply_gives_empty_command(self, empty_layout):
        outcome = InputStateMachine(empty_layout).handle_key("a")
        assert outcome.kind == OutcomeKind.APPLY
        assert outcome.command == ""
