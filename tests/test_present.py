"""Tests for loading documents and printing slides."""

import io
import json

import pytest

from termslides.config import create_default_config
from termslides.present import (
    format_separators,
    format_slide,
    get_pieces_json,
    get_slides_json,
    load_document,
    make_slides,
    print_slides,
)
from termslides.parser import parse_document
from termslides.slides import NormalSlide, TitleSlide
from termslides.style import AnsiStyle, PlainStyle, get_style


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def test_load_document(tmp_path):
    """Test reading a UTF-8 document."""
    path = tmp_path / 'talk.md'
    path.write_text("# Café\n", encoding='utf-8')
    assert load_document(path) == "# Café\n"


def test_load_document_missing(tmp_path):
    """Test that a missing document raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_document(tmp_path / 'nope.md')


def test_format_slide():
    """Test printable slide text."""
    assert format_slide(TitleSlide("T")) == "T"
    assert format_slide(NormalSlide("H", ("a", "b"))) == "H\na\nb"
    assert format_slide(NormalSlide("H")) == "H"


def test_format_separators():
    """Test separator rules with and without blank lines."""
    rule = "-" * 20
    assert format_separators(create_default_config()) == ("\n" + rule, rule + "\n")
    config = create_default_config(separator={'char': '=', 'length': 3, 'blank_lines': False})
    assert format_separators(config) == ("===", "===")


def test_print_slides():
    """Test that each slide is framed by separators."""
    config = create_default_config(separator={'char': '-', 'length': 3, 'blank_lines': False})
    out = io.StringIO()
    count = print_slides([TitleSlide("T"), NormalSlide("H", ("body",))], config, out=out)

    assert count == 2
    assert out.getvalue() == "---\nT\n---\n---\nH\nbody\n---\n"


def test_print_slides_blank_lines_outside_rules():
    """Test that the header follows the opening rule directly."""
    out = io.StringIO()
    print_slides([NormalSlide("H", ("body",))], create_default_config(), out=out)

    rule = "-" * 20
    assert out.getvalue() == f"\n{rule}\nH\nbody\n{rule}\n\n"


def test_print_slides_step_mode_waits_between_slides():
    """Test that step mode prompts before every slide but the first."""
    config = create_default_config(step=True)
    prompts = []
    print_slides([TitleSlide("A"), TitleSlide("B"), TitleSlide("C")], config,
                 out=io.StringIO(), wait=prompts.append)
    assert len(prompts) == 2
    assert prompts[0].startswith("[1/3]")


def test_make_slides_uses_configured_width():
    """Test that the configured width reaches the builder."""
    slides = make_slides("## Hi", create_default_config(width=20))
    assert slides == [NormalSlide(' ' * 9 + "Hi")]


def test_get_style():
    """Test color mode selection."""
    assert isinstance(get_style('always'), AnsiStyle)
    assert not isinstance(get_style('never'), AnsiStyle)
    assert isinstance(get_style('auto', FakeTTY()), AnsiStyle)
    assert not isinstance(get_style('auto', io.StringIO()), AnsiStyle)
    with pytest.raises(ValueError):
        get_style('rainbow')


def test_json_dumps_are_serializable():
    """Test JSON conversion of pieces and slides."""
    text = "# T\n## S\n- x\n> q"
    pieces = get_pieces_json(parse_document(text))
    assert pieces['total_pieces'] == 4
    assert pieces['pieces'][2] == {'kind': 'listitem', 'lines': ['x'], 'ordered': False, 'depth': 0}

    slides = get_slides_json(make_slides(text, create_default_config(), PlainStyle()))
    assert slides['total_slides'] == 2
    assert slides['title_slides'] == 1
    assert slides['normal_slides'] == 1
    assert slides['slides'][1]['body'][0] == "  * x"
    json.dumps(slides)
