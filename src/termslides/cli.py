"""
Command Line Interface for termslides

Provides entry points for:
- termslides show: Present a markup document as slides in the terminal
- termslides dump: Print parsed pieces or built slides as JSON
- termslides init-config: Write a default configuration file
"""

import sys
import json
import logging
import argparse
from typing import Optional

from .config import PresentationConfig, load_config, save_config, create_default_config
from .parser import parse_document
from .present import load_document, make_slides, print_slides, get_slides_json, get_pieces_json
from .style import COLOR_MODES, PlainStyle, get_style


def build_config(args: argparse.Namespace) -> PresentationConfig:
    """Load configuration and apply command line overrides."""
    if args.config:
        config = load_config(args.config)
    else:
        config = create_default_config()

    overrides = {
        'width': getattr(args, 'width', None),
        'color': getattr(args, 'color', None),
        'step': True if getattr(args, 'step', False) else None,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        config = PresentationConfig(**{**config.model_dump(), **overrides})
    return config


def show_command(args: argparse.Namespace) -> int:
    """Execute show command."""
    try:
        config = build_config(args)
        text = load_document(args.input)
        style = get_style(config.color, sys.stdout)
        slides = make_slides(text, config, style)
        print_slides(slides, config)
        return 0

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130

    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def dump_command(args: argparse.Namespace) -> int:
    """Execute dump command."""
    try:
        config = build_config(args)
        text = load_document(args.input)

        if args.what == 'pieces':
            result = get_pieces_json(parse_document(text))
        else:
            result = get_slides_json(make_slides(text, config, PlainStyle()))

        print(json.dumps(result, indent=2, ensure_ascii=False))
        return 0

    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def init_config_command(args: argparse.Namespace) -> int:
    """Execute init-config command."""
    try:
        config = create_default_config(width=args.width)
        save_config(config, args.output)
        print(f"Wrote configuration to {args.output}")
        return 0

    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='termslides',
        description='termslides - Present lightweight markup documents as terminal slides',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s show talk.md --width 100
  %(prog)s show talk.md --config slides.yaml --step
  %(prog)s dump talk.md --what pieces
  %(prog)s init-config slides.yaml
        """
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Show detailed output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Show command
    show_parser = subparsers.add_parser('show', help='Present a document as slides')
    show_parser.add_argument('input', help='Markup document to present')
    show_parser.add_argument('--config', '-c', help='Configuration file (YAML/JSON)')
    show_parser.add_argument('--width', '-w', type=int, help='Presentation width in columns (overrides config)')
    show_parser.add_argument('--color', choices=COLOR_MODES, help='When to emit terminal styles (overrides config)')
    show_parser.add_argument('--step', action='store_true', help='Wait for Enter between slides')
    show_parser.add_argument('-v', '--verbose', action='store_true', default=argparse.SUPPRESS,
                            help='Show detailed output')

    # Dump command
    dump_parser = subparsers.add_parser('dump', help='Print parsed pieces or slides as JSON')
    dump_parser.add_argument('input', help='Markup document to parse')
    dump_parser.add_argument('--what', choices=['pieces', 'slides'], default='slides',
                             help='What to dump (default: slides)')
    dump_parser.add_argument('--config', '-c', help='Configuration file (YAML/JSON)')
    dump_parser.add_argument('--width', '-w', type=int, help='Presentation width in columns (overrides config)')
    dump_parser.add_argument('-v', '--verbose', action='store_true', default=argparse.SUPPRESS,
                            help='Show detailed output')

    # Init-config command
    init_parser = subparsers.add_parser('init-config', help='Write a default configuration file')
    init_parser.add_argument('output', help='Output file (.yaml, .yml, or .json)')
    init_parser.add_argument('--width', '-w', type=int, help='Presentation width in columns')
    init_parser.add_argument('-v', '--verbose', action='store_true', default=argparse.SUPPRESS,
                            help='Show detailed output')

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    if args.command == 'show':
        return show_command(args)
    elif args.command == 'dump':
        return dump_command(args)
    elif args.command == 'init-config':
        return init_config_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
