"""Tests for the monitor layout model."""

import dataclasses
import random

import pytest

from hyprdisplay.layout.models import BROWSING, Monitor, MonitorLayout, Moving


class TestMonitor:
    """Tests for Monitor."""

    def test_position_and_size(self):
        mon = Monitor("DP-1", -100, 50, 2560, 1440)
        assert mon.position == (-100, 50)
        assert mon.size == (2560, 1440)

    def test_moved_returns_new_record(self):
        mon = Monitor("DP-1", 0, 0, 1920, 1080)
        moved = mon.moved(10, -20)

        assert moved.position == (10, -20)
        assert moved.size == (1920, 1080)
        assert mon.position == (0, 0)

    def test_frozen(self):
        mon = Monitor("DP-1", 0, 0, 1920, 1080)
        with pytest.raises(dataclasses.FrozenInstanceError):
            mon.width = 10  # type: ignore[misc]


class TestCursor:
    """Cursor navigation."""

    def test_starts_at_zero(self, default_layout):
        assert default_layout.cursor == 0
        assert default_layout.active.name == "eDP-1"

    def test_move_down_and_up(self, default_layout):
        default_layout.move_cursor(1)
        assert default_layout.cursor == 1
        default_layout.move_cursor(-1)
        assert default_layout.cursor == 0

    def test_clamped_at_ends(self, default_layout):
        default_layout.move_cursor(-1)
        assert default_layout.cursor == 0

        for _ in range(5):
            default_layout.move_cursor(1)
        assert default_layout.cursor == 2

    def test_random_walk_stays_in_range(self, default_layout):
        rng = random.Random(7)
        for _ in range(200):
            default_layout.move_cursor(rng.choice([-1, 1]))
            assert 0 <= default_layout.cursor <= len(default_layout) - 1

    def test_empty_layout_is_noop(self, empty_layout):
        empty_layout.move_cursor(1)
        empty_layout.move_cursor(-1)
        empty_layout.toggle_selection_at_cursor()
        empty_layout.move_selected(10, 10)

        assert empty_layout.cursor == 0
        assert empty_layout.mode == BROWSING
        assert empty_layout.active is None
        assert len(empty_layout) == 0

    def test_cursor_frozen_while_moving(self, default_layout):
        default_layout.move_cursor(1)
        default_layout.toggle_selection_at_cursor()

        default_layout.move_cursor(1)
        default_layout.move_cursor(-1)

        assert default_layout.cursor == 1
        assert default_layout.mode == Moving(1)


class TestSelection:
    """Selection toggling and movement."""

    def test_toggle(self, default_layout):
        assert default_layout.selected_index is None

        default_layout.toggle_selection_at_cursor()
        assert default_layout.mode == Moving(0)
        assert default_layout.is_selected(0)
        assert not default_layout.is_selected(1)

        default_layout.toggle_selection_at_cursor()
        assert default_layout.mode == BROWSING
        assert not default_layout.is_selected(0)

    def test_move_selected_only_while_moving(self, default_layout):
        default_layout.move_selected(10, 10)
        assert [m.position for m in default_layout] == [(0, 0), (1920, 0), (3840, 0)]

        default_layout.toggle_selection_at_cursor()
        default_layout.move_selected(-30, 20)
        assert default_layout[0].position == (-30, 20)
        assert default_layout[1].position == (1920, 0)

    def test_move_selected_keeps_size(self, default_layout):
        default_layout.move_cursor(1)
        default_layout.move_cursor(1)
        default_layout.toggle_selection_at_cursor()
        default_layout.move_selected(500, -500)

        assert default_layout[2].size == (2560, 1440)

    def test_move_selected_commutes(self):
        a = MonitorLayout([Monitor("A", 0, 0, 100, 100)])
        b = MonitorLayout([Monitor("A", 0, 0, 100, 100)])
        a.toggle_selection_at_cursor()
        b.toggle_selection_at_cursor()

        a.move_selected(10, -40)
        a.move_selected(-70, 30)
        b.move_selected(-70, 30)
        b.move_selected(10, -40)

        assert a[0].position == b[0].position == (-60, -10)

    def test_monitors_returns_copy(self, default_layout):
        monitors = default_layout.monitors
        monitors.clear()
        assert len(default_layout) == 3
