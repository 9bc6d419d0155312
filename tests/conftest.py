"""Pytest configuration"""

import pytest

from hyprdisplay.layout.models import Monitor, MonitorLayout
from hyprdisplay.layout.query import default_monitors
from hyprdisplay.telemetry import metrics


@pytest.fixture(autouse=True)
def reset_metrics():
    """Reset metrics around every test"""
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def default_layout() -> MonitorLayout:
    """eDP-1, DP-2, DP-4 side by side"""
    return MonitorLayout(default_monitors())


@pytest.fixture
def empty_layout() -> MonitorLayout:
    return MonitorLayout()


@pytest.fixture
def single_layout() -> MonitorLayout:
    return MonitorLayout([Monitor("HDMI-A-1", 0, 0, 1920, 1080)])
