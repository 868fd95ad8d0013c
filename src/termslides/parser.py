"""
Document Parser

Classifies the lines of a markup document into pieces: headers,
paragraphs, list items and quotes. Each line is handled once; at most one
paragraph or quote is open at a time and is emitted when a blank line or a
different construct closes it.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

INDENT_SIZE = 4
ORDERED_MARKER = re.compile(r'^[0-9]+\.$')


# ============================================================
# PIECE MODEL
# ============================================================

@dataclass(frozen=True)
class Paragraph:
    pass


@dataclass(frozen=True)
class Header:
    level: int


@dataclass(frozen=True)
class ListItem:
    ordered: bool
    depth: int


@dataclass(frozen=True)
class Quote:
    pass


PieceKind = Union[Paragraph, Header, ListItem, Quote]


@dataclass(frozen=True)
class Piece:
    """A classified unit of the source document."""
    kind: PieceKind
    lines: Tuple[str, ...]

    def to_dict(self) -> dict:
        """JSON-serializable form, used by the dump command."""
        data = {'kind': type(self.kind).__name__.lower(), 'lines': list(self.lines)}
        if isinstance(self.kind, Header):
            data['level'] = self.kind.level
        elif isinstance(self.kind, ListItem):
            data['ordered'] = self.kind.ordered
            data['depth'] = self.kind.depth
        return data


# ============================================================
# LINE CLASSIFICATION
# ============================================================

def get_list_depth(line: str) -> int:
    """Nesting depth of a list line from its leading spaces."""
    return (len(line) - len(line.lstrip(' '))) // INDENT_SIZE


def is_ordered_marker(word: str) -> bool:
    """Check if a token is an ordered list marker like "12."."""
    return bool(ORDERED_MARKER.match(word))


def parse_document(text: str) -> List[Piece]:
    """Parse document text into an ordered list of pieces.

    Args:
        text: Full document text

    Returns:
        Pieces in document order
    """
    pieces: List[Piece] = []
    # Open paragraph or quote: (kind, lines)
    current: Optional[Tuple[PieceKind, List[str]]] = None

    def close() -> None:
        nonlocal current
        if current is not None:
            kind, lines = current
            pieces.append(Piece(kind, tuple(lines)))
        current = None

    # Only "\n" and "\r\n" end a line; other separators stay inside it
    for line in text.split('\n'):
        if line.endswith('\r'):
            line = line[:-1]
        words = line.split()

        # Blank line
        if not words:
            close()
            continue

        word = words[0]
        rest = ' '.join(words[1:])

        # Header
        if all(ch == '#' for ch in word):
            close()
            pieces.append(Piece(Header(level=len(word) - 1), (rest,)))
            continue

        # Quote
        if word == '>':
            if current is not None and isinstance(current[0], Quote):
                current[1].append(rest)
            else:
                close()
                current = (Quote(), [rest])
            continue

        # Lists
        if word == '-' or is_ordered_marker(word):
            close()
            kind = ListItem(ordered=word != '-', depth=get_list_depth(line))
            pieces.append(Piece(kind, (rest,)))
            continue

        # Paragraph
        if current is not None and isinstance(current[0], Paragraph):
            current[1].append(line)
        else:
            close()
            current = (Paragraph(), [line])

    close()

    logger.debug("Parsed %d pieces", len(pieces))
    return pieces
