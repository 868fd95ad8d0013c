"""
Terminal Styling

The slide renderer never writes escape sequences itself. It asks a style
object to apply a named emphasis to a span of text; `AnsiStyle` encodes
that as SGR control sequences and `PlainStyle` leaves the text untouched.
"""

import sys
from typing import IO, Optional, Protocol

# SGR sequences
RESET = '\x1b[0m'
BOLD_UNDERLINE = '\x1b[1;4m'
DIM = '\x1b[0;2m'
BOLD = '\x1b[0;1m'
ITALIC = '\x1b[0;3m'

COLOR_MODES = ('auto', 'always', 'never')


class Style(Protocol):
    """Emphasis applied by the renderer to spans of slide text."""

    enabled: bool

    def title(self, text: str) -> str: ...

    def rule(self, text: str) -> str: ...

    def subheading(self, text: str) -> str: ...

    def quote_border(self, text: str) -> str: ...

    def quote_text(self, text: str) -> str: ...

    def list_marker(self, text: str) -> str: ...


class PlainStyle:
    """Style that applies no emphasis at all."""

    enabled = False

    def title(self, text: str) -> str:
        """Emphasis for level 0/1 headers."""
        return text

    def rule(self, text: str) -> str:
        """Low emphasis for sub-heading rules."""
        return text

    def subheading(self, text: str) -> str:
        """Emphasis for the text between sub-heading rules."""
        return text

    def quote_border(self, text: str) -> str:
        return text

    def quote_text(self, text: str) -> str:
        return text

    def list_marker(self, text: str) -> str:
        return text


class AnsiStyle(PlainStyle):
    """Style backed by ANSI SGR sequences."""

    enabled = True

    def title(self, text: str) -> str:
        return f"{BOLD_UNDERLINE}{text}{RESET}"

    def rule(self, text: str) -> str:
        return f"{DIM}{text}{RESET}"

    def subheading(self, text: str) -> str:
        return f"{ITALIC}{text}{RESET}"

    def quote_border(self, text: str) -> str:
        return f"{DIM}{text}{RESET}"

    def quote_text(self, text: str) -> str:
        return f"{BOLD}{text}{RESET}"

    def list_marker(self, text: str) -> str:
        return f"{DIM}{text}{RESET}"


def get_style(color_mode: str = 'auto', stream: Optional[IO[str]] = None) -> Style:
    """Pick a style for the given color mode.

    Args:
        color_mode: 'always', 'never', or 'auto' (color only on a TTY)
        stream: Output stream checked in 'auto' mode (default: stdout)

    Returns:
        AnsiStyle or PlainStyle instance

    Raises:
        ValueError: If color_mode is not a known mode
    """
    if color_mode not in COLOR_MODES:
        raise ValueError(f"Unknown color mode: {color_mode}. Use one of {', '.join(COLOR_MODES)}")

    if color_mode == 'always':
        return AnsiStyle()
    if color_mode == 'never':
        return PlainStyle()

    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, 'isatty', None)
    if isatty is not None and isatty():
        return AnsiStyle()
    return PlainStyle()
