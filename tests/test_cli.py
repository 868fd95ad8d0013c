"""Tests for the command line interface."""

import json

import yaml

from termslides.cli import main


def write_doc(tmp_path, text="# Title\n\n## Section\nHello world.\n"):
    path = tmp_path / 'talk.md'
    path.write_text(text, encoding='utf-8')
    return path


def test_show_prints_slides(tmp_path, capsys):
    """Test that show prints every slide without styles when asked."""
    doc = write_doc(tmp_path)
    assert main(['show', str(doc), '--color', 'never', '--width', '40']) == 0

    out = capsys.readouterr().out
    assert "Title" in out
    assert "Hello world." in out
    assert "\x1b[" not in out
    assert out.count("-" * 20) == 4


def test_show_uses_config_file(tmp_path, capsys):
    """Test that the config file separator is used."""
    doc = write_doc(tmp_path)
    config = tmp_path / 'slides.yaml'
    config.write_text(yaml.dump({'color': 'never', 'separator': {'char': '=', 'length': 10}}), encoding='utf-8')

    assert main(['show', str(doc), '--config', str(config)]) == 0
    assert capsys.readouterr().out.count("=" * 10) == 4


def test_show_missing_document(tmp_path, capsys):
    """Test error reporting for a missing document."""
    assert main(['show', str(tmp_path / 'missing.md')]) == 1
    assert "Error:" in capsys.readouterr().err


def test_show_rejects_invalid_width(tmp_path, capsys):
    """Test that out-of-range widths are reported as errors."""
    doc = write_doc(tmp_path)
    assert main(['show', str(doc), '--width', '2']) == 1
    assert "Error:" in capsys.readouterr().err


def test_dump_pieces(tmp_path, capsys):
    """Test JSON dump of parsed pieces."""
    doc = write_doc(tmp_path)
    assert main(['dump', str(doc), '--what', 'pieces']) == 0

    data = json.loads(capsys.readouterr().out)
    assert data['total_pieces'] == 3
    assert data['pieces'][0] == {'kind': 'header', 'lines': ['Title'], 'level': 0}


def test_dump_slides(tmp_path, capsys):
    """Test JSON dump of built slides."""
    doc = write_doc(tmp_path)
    assert main(['dump', str(doc), '--width', '20']) == 0

    data = json.loads(capsys.readouterr().out)
    assert data['total_slides'] == 2
    assert data['slides'][1]['header'] == ' ' * 6 + 'Section'


def test_init_config(tmp_path, capsys):
    """Test writing a default configuration file."""
    path = tmp_path / 'slides.json'
    assert main(['init-config', str(path), '--width', '100']) == 0

    data = json.loads(path.read_text(encoding='utf-8'))
    assert data['width'] == 100
    assert data['separator']['char'] == '-'


def test_no_command_prints_help(capsys):
    """Test that running without a command fails."""
    assert main([]) == 1


def test_global_verbose_prints_traceback(tmp_path, capsys):
    """Test that -v before the command turns on tracebacks."""
    assert main(['-v', 'show', str(tmp_path / 'missing.md')]) == 1
    err = capsys.readouterr().err
    assert "Error:" in err
    assert "Traceback" in err


def test_command_verbose_prints_traceback(tmp_path, capsys):
    """Test that -v after the command turns on tracebacks."""
    assert main(['dump', str(tmp_path / 'missing.md'), '-v']) == 1
    assert "Traceback" in capsys.readouterr().err


def test_errors_without_verbose_have_no_traceback(tmp_path, capsys):
    """Test that tracebacks are hidden by default."""
    assert main(['show', str(tmp_path / 'missing.md')]) == 1
    assert "Traceback" not in capsys.readouterr().err
