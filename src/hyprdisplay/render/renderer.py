"""Frame string to Rich Text, with glyph and status colouring."""

import re

from rich.style import Style
from rich.text import Text

from ..config import GLYPH_ACTIVE, GLYPH_MONITOR, GLYPH_SELECTED
from .frame import TITLE

GLYPH_STYLES = {
    GLYPH_MONITOR: Style(color="bright_black"),
    GLYPH_ACTIVE: Style(color="cyan"),
    GLYPH_SELECTED: Style(color="green", bold=True),
}

TITLE_STYLE = Style(bold=True)
ERROR_STYLE = Style(color="red")
SUCCESS_STYLE = Style(color="green")

_ERROR_RE = r"(?m)^(Error applying configuration|Could not copy to clipboard).*$"
_SUCCESS_RE = r"(?m)^Configuration (applied|copied).*$"


class FrameRenderer:
    """Wraps frame strings for display in a Rich console."""

    def __init__(self, colors: bool = True):
        self.colors = colors

    def to_text(self, frame: str) -> Text:
        """Build a non-wrapping Text; long lines are cropped by the console."""
        text = Text(frame, no_wrap=True, overflow="crop")
        if not self.colors:
            return text

        for glyph, style in GLYPH_STYLES.items():
            text.highlight_regex(re.escape(glyph) + "+", style=style)
        text.highlight_regex(f"(?m)^{re.escape(TITLE)}$", style=TITLE_STYLE)
        text.highlight_regex(_ERROR_RE, style=ERROR_STYLE)
        text.highlight_regex(_SUCCESS_RE, style=SUCCESS_STYLE)
        return text
