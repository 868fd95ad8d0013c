"""
Slide Builder

Groups parsed pieces into slides. Level 0 headers become standalone title
slides, level 1 headers open a new slide, and everything else is rendered
into the body of the slide that is currently open.

Ordered list counters are kept per depth for the whole document: they are
not reset at slide boundaries or when a list at another depth interrupts.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .parser import Header, ListItem, Paragraph, Piece, Quote
from .render import (
    render_bullet_item,
    render_numbered_item,
    render_quote_box,
    render_subheading,
    render_title,
)
from .style import PlainStyle, Style
from .text_utils import format_ordinal, wrap_text

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80


@dataclass(frozen=True)
class TitleSlide:
    """A standalone slide showing only its header."""
    header: str

    def to_dict(self) -> dict:
        return {'type': 'title', 'header': self.header}


@dataclass(frozen=True)
class NormalSlide:
    """A slide with a header and pre-formatted body lines."""
    header: str
    body: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {'type': 'normal', 'header': self.header, 'body': list(self.body)}


Slide = Union[TitleSlide, NormalSlide]


def build_slides(
    pieces: Sequence[Piece],
    width: int = DEFAULT_WIDTH,
    style: Optional[Style] = None,
) -> List[Slide]:
    """Build slides from parsed pieces.

    Args:
        pieces: Pieces in document order
        width: Presentation width in columns
        style: Style used for emphasis (default: no styling)

    Returns:
        Slides in presentation order

    Raises:
        ValueError: If width is not positive
    """
    if width <= 0:
        raise ValueError(f"Width must be positive, got {width}")
    if style is None:
        style = PlainStyle()

    slides: List[Slide] = []
    # Open slide: (header, body)
    current: Optional[Tuple[str, List[str]]] = None
    counters: Dict[int, int] = {}

    def finish() -> None:
        nonlocal current
        if current is not None:
            header, body = current
            slides.append(NormalSlide(header, tuple(body)))
        current = None

    def append(lines: List[str]) -> None:
        nonlocal current
        if current is None:
            current = ('', [])
        current[1].extend(lines)

    for piece in pieces:
        kind = piece.kind

        if isinstance(kind, Header) and kind.level == 0:
            finish()
            slides.append(TitleSlide(render_title(' '.join(piece.lines), width, style)))

        elif isinstance(kind, Header) and kind.level == 1:
            finish()
            current = (render_title(' '.join(piece.lines), width, style), [])

        elif isinstance(kind, Header):
            append([render_subheading(line, width, style) for line in piece.lines])

        elif isinstance(kind, Paragraph):
            append([wrap_text(line, width) for line in piece.lines])

        elif isinstance(kind, Quote):
            append(render_quote_box(piece.lines, style))

        elif isinstance(kind, ListItem) and not kind.ordered:
            append([render_bullet_item(' '.join(piece.lines), kind.depth, width)])

        elif isinstance(kind, ListItem):
            number = counters.get(kind.depth, 0) + 1
            counters[kind.depth] = number
            ordinal = format_ordinal(number, kind.depth)
            append([render_numbered_item(' '.join(piece.lines), ordinal, kind.depth, width, style)])

        else:
            raise TypeError(f"Unknown piece kind: {kind!r}")

    finish()

    logger.debug("Built %d slides from %d pieces", len(slides), len(pieces))
    return slides
