"""
Text Layout Utilities

Low-level helpers for laying out slide text in fixed-width columns.
"""

import re
from typing import List

# SGR control sequences (e.g. "\x1b[0;2m")
SGR_PATTERN = re.compile(r'\x1b\[[0-9;]*m')

LETTER_ORDINALS = ('a', 'b', 'c', 'd')
ROMAN_ORDINALS = ('i', 'ii', 'iii', 'iv')
UNKNOWN_ORDINAL = '?'


def strip_styles(text: str) -> str:
    """Remove SGR control sequences from text.

    Args:
        text: Possibly styled text

    Returns:
        Text as it appears on screen
    """
    if not text:
        return ""
    return SGR_PATTERN.sub('', text)


def visible_length(text: str) -> int:
    """Number of characters text occupies once styles are stripped."""
    return len(strip_styles(text))


def wrap_text(text: str, width: int) -> str:
    """Greedy word-wrap of text to a column width.

    Words are separated by whitespace runs. A word longer than the width is
    kept whole on its own line.

    Args:
        text: Input text
        width: Target column width

    Returns:
        Newline-joined wrapped text ("" for empty input)
    """
    lines: List[str] = []
    current = ''

    for word in text.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word

    if current:
        lines.append(current)

    return '\n'.join(lines)


def center_padding(text_length: int, width: int) -> str:
    """Left padding that centers text of the given length in width columns."""
    return ' ' * max((width - text_length) // 2, 0)


def format_ordinal(number: int, depth: int) -> str:
    """Render a 1-based list counter for a nesting depth.

    Depth cycles through decimal, lowercase letters and lowercase roman
    numerals. Letters and numerals only cover the first four items; larger
    counts render as "?".

    Args:
        number: 1-based item number
        depth: List nesting depth

    Returns:
        Ordinal text without trailing punctuation
    """
    style = depth % 3
    if style == 1:
        table = LETTER_ORDINALS
    elif style == 2:
        table = ROMAN_ORDINALS
    else:
        return str(number)

    if 1 <= number <= len(table):
        return table[number - 1]
    return UNKNOWN_ORDINAL
