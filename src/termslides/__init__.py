"""
termslides

Turns structured notes written in a lightweight markup dialect (headings,
paragraphs, lists, quotes) into slides for sequential terminal presentation.
"""

__version__ = "0.1.0"

from .config import (
    PresentationConfig,
    load_config,
    save_config,
    create_default_config,
)

from .parser import (
    Piece,
    Paragraph,
    Header,
    ListItem,
    Quote,
    parse_document,
)

from .slides import (
    TitleSlide,
    NormalSlide,
    build_slides,
)

from .style import (
    Style,
    AnsiStyle,
    PlainStyle,
    get_style,
)

from .present import (
    load_document,
    make_slides,
    print_slides,
)

__all__ = [
    # Config
    'PresentationConfig',
    'load_config',
    'save_config',
    'create_default_config',
    # Parsing
    'Piece',
    'Paragraph',
    'Header',
    'ListItem',
    'Quote',
    'parse_document',
    # Slides
    'TitleSlide',
    'NormalSlide',
    'build_slides',
    # Styling
    'Style',
    'AnsiStyle',
    'PlainStyle',
    'get_style',
    # Presentation
    'load_document',
    'make_slides',
    'print_slides',
]
