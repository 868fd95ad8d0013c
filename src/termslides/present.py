"""
Slide Presentation

Reads a markup document from disk, turns it into slides and prints them
one after another, each framed by a separator rule.
"""

import sys
from pathlib import Path
from typing import Any, Callable, Dict, IO, List, Optional, Sequence, Tuple, Union

from .config import PresentationConfig
from .parser import Piece, parse_document
from .slides import NormalSlide, Slide, TitleSlide, build_slides
from .style import Style


def load_document(path: Union[str, Path]) -> str:
    """Read a UTF-8 markup document.

    Raises:
        FileNotFoundError: If the document doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Document not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def make_slides(text: str, config: PresentationConfig, style: Optional[Style] = None) -> List[Slide]:
    """Parse document text and build slides at the configured width."""
    return build_slides(parse_document(text), config.width, style)


def format_slide(slide: Slide) -> str:
    """Printable text of a slide: header, then body lines."""
    if isinstance(slide, TitleSlide):
        return slide.header
    return '\n'.join([slide.header] + list(slide.body))


def format_separators(config: PresentationConfig) -> Tuple[str, str]:
    """Opening and closing rules; blank lines go outside the rules."""
    rule = config.separator.render()
    if config.separator.blank_lines:
        return f"\n{rule}", f"{rule}\n"
    return rule, rule


def print_slides(
    slides: Sequence[Slide],
    config: PresentationConfig,
    out: Optional[IO[str]] = None,
    wait: Callable[[str], Any] = input,
) -> int:
    """Print slides framed by separator rules.

    Args:
        slides: Slides to print
        config: Presentation configuration (separator, step mode)
        out: Output stream (default: stdout)
        wait: Prompt function called between slides in step mode

    Returns:
        Number of slides printed
    """
    out = out if out is not None else sys.stdout
    opening, closing = format_separators(config)

    for index, slide in enumerate(slides):
        if config.step and index > 0:
            out.flush()
            wait(f"[{index}/{len(slides)}] Enter for next slide ")

        print(opening, file=out)
        print(format_slide(slide), file=out)
        print(closing, file=out)

    return len(slides)


def get_slides_json(slides: Sequence[Slide]) -> Dict[str, Any]:
    """Convert slides to JSON-serializable format."""
    return {
        'total_slides': len(slides),
        'title_slides': sum(1 for s in slides if isinstance(s, TitleSlide)),
        'normal_slides': sum(1 for s in slides if isinstance(s, NormalSlide)),
        'slides': [s.to_dict() for s in slides],
    }


def get_pieces_json(pieces: Sequence[Piece]) -> Dict[str, Any]:
    """Convert parsed pieces to JSON-serializable format."""
    return {
        'total_pieces': len(pieces),
        'pieces': [p.to_dict() for p in pieces],
    }
