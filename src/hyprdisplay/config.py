"""hyprdisplay configuration

Settings are grouped as:
- Editing: movement step
- Projection: scale factors, grid divisors and padding
- Glyphs: diagram characters
- Commands: hyprctl / clipboard invocations
- Runtime: queue, timer, status messages
- Logging and metrics
"""

import os

# === Editing ===
MOVE_STEP = 10  # display-server units per key press

# === Projection ===
SCALE_FACTOR_X = 0.5  # share of the terminal width used by the diagram
SCALE_FACTOR_Y = 0.3  # leaves room for the monitor list and help below
MIN_SCALE = 0.1
CELL_UNITS_X = 20  # real units per character cell, horizontal
CELL_UNITS_Y = 40  # real units per character cell, vertical (cells are tall)
GRID_PAD_X = 10
GRID_PAD_Y = 5
MIN_GRID_WIDTH = 20
MIN_GRID_HEIGHT = 10

# === Glyphs ===
GLYPH_EMPTY = " "
GLYPH_MONITOR = "░"
GLYPH_ACTIVE = "▓"
GLYPH_SELECTED = "█"
LEGEND = (
    f"Legend: {GLYPH_MONITOR} = Monitor  "
    f"{GLYPH_ACTIVE} = Active Monitor  "
    f"{GLYPH_SELECTED} = Selected for Movement"
)

# === Commands ===
QUERY_COMMAND = ["hyprctl", "monitors", "-j"]
MONITOR_MODE = "highres"  # resolution descriptor passed to hyprctl
MONITOR_SCALE = "1"
COMMAND_SEPARATOR = " && "
APPLY_SHELL = ["bash", "-c"]
CLIPBOARD_COMMANDS: list[tuple[str, list[str]]] = [
    ("xclip", ["xclip", "-selection", "clipboard"]),
    ("wl-copy", ["wl-copy"]),
]

# Used when hyprctl is missing or returns nothing usable
DEFAULT_MONITORS: list[dict[str, object]] = [
    {"name": "eDP-1", "x": 0, "y": 0, "width": 1920, "height": 1080},
    {"name": "DP-2", "x": 1920, "y": 0, "width": 1920, "height": 1080},
    {"name": "DP-4", "x": 3840, "y": 0, "width": 2560, "height": 1440},
]

# === Runtime ===
QUEUE_MAX_SIZE = 256
QUEUE_HIGH_WATERMARK = 0.75
PROTECTED_EVENTS = {"effect_result"}  # never dropped on overflow
TIMER_TICK_INTERVAL = 0.25  # seconds
STATUS_MESSAGE_SECONDS = 8.0  # 0 keeps messages until replaced

# === Logging ===
LOG_LEVEL = os.environ.get("HYPRDISPLAY_LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get(
    "HYPRDISPLAY_LOG_FILE",
    os.path.join(os.path.expanduser("~"), ".cache", "hyprdisplay", "hyprdisplay.log"),
)
LOG_MAX_CMD_LEN = 120  # command strings are truncated in log lines

# === Metrics ===
METRICS_ENABLED = True
