"""
Slide Body Rendering

Formats individual pieces into printable body lines: centered headers,
sub-headings, bulleted and numbered list items, and boxed quotes.
"""

from typing import Callable, List, Sequence

from .style import Style
from .text_utils import center_padding, wrap_text

# Box drawing glyphs
LINE_H = '─'
LINE_V = '│'
LINE_TL = '┌'
LINE_TR = '┐'
LINE_BL = '└'
LINE_BR = '┘'

QUOTE_INDENT = 2
QUOTE_MARGIN = 2
QUOTE_MIN_WIDTH = 4

LIST_INDENT = 4
LIST_LEFT_MARGIN = 2
UL_SYMBOLS = ('*', '-', '.')

SUBHEADING_RULE = '--'
# "-- " + text + " --"
SUBHEADING_MARGIN = 2 * (len(SUBHEADING_RULE) + 1)


def render_title(text: str, width: int, style: Style) -> str:
    """Center header text in width columns and apply title emphasis."""
    return center_padding(len(text), width) + style.title(text)


def render_subheading(text: str, width: int, style: Style) -> str:
    """Center a sub-heading flanked by a short rule on each side.

    The result starts with a newline so the sub-heading is set off from the
    body text above it.
    """
    padding = center_padding(len(text), width - SUBHEADING_MARGIN)
    return (
        '\n' + padding
        + style.rule(f"{SUBHEADING_RULE} ")
        + style.subheading(text)
        + style.rule(f" {SUBHEADING_RULE}")
    )


def render_quote_box(lines: Sequence[str], style: Style) -> List[str]:
    """Draw a bordered box around quote lines.

    Args:
        lines: Quote text lines
        style: Style used for the border and the quoted text

    Returns:
        Box lines, top border first
    """
    longest = max([len(line) for line in lines] + [QUOTE_MIN_WIDTH])
    indent = ' ' * QUOTE_INDENT
    margin = ' ' * QUOTE_MARGIN

    box = []
    for line in lines:
        padded = line.ljust(longest)
        box.append(
            style.quote_border(f"{indent}{LINE_V}")
            + style.quote_text(f"{margin}{padded}{margin}")
            + style.quote_border(LINE_V)
        )

    middle = LINE_H * (longest + 2 * QUOTE_MARGIN)
    box.insert(0, style.quote_border(f"{indent}{LINE_TL}{middle}{LINE_TR}"))
    box.append(style.quote_border(f"{indent}{LINE_BL}{middle}{LINE_BR}"))
    return box


def _render_list_text(text: str, marker: str, depth: int, width: int,
                      mark: Callable[[str], str]) -> str:
    """Wrap list text and hang continuation lines under the first line's text."""
    indent = ' ' * (LIST_INDENT * depth)
    prefix_width = LIST_LEFT_MARGIN + len(indent) + len(marker) + 1
    wrapped = wrap_text(text, width - prefix_width).split('\n')

    first = ' ' * LIST_LEFT_MARGIN + mark(f"{indent}{marker}") + f" {wrapped[0]}"
    hanging = ' ' * prefix_width
    return '\n'.join([first] + [hanging + line for line in wrapped[1:]])


def render_bullet_item(text: str, depth: int, width: int) -> str:
    """Render an unordered list item; the glyph cycles with depth."""
    symbol = UL_SYMBOLS[depth % len(UL_SYMBOLS)]
    return _render_list_text(text, symbol, depth, width, str)


def render_numbered_item(text: str, ordinal: str, depth: int, width: int, style: Style) -> str:
    """Render an ordered list item with a dimmed "<ordinal>." marker."""
    return _render_list_text(text, f"{ordinal}.", depth, width, style.list_marker)
