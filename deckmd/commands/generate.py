"""
Generate command for deckmd CLI.

Commands:
- deckmd generate - Write the deck document (DECK.md by default)
- deckmd generate --stdout - Print the document instead of writing it
"""

import argparse
import sys

from deckmd.commands.common import resolve_config
from deckmd.deck.builder import render_deck, write_deck
from deckmd.errors import DeckError
from deckmd.modules.utils import configure_logging, print_error, print_success


def add_generate_parser(subparsers) -> argparse.ArgumentParser:
    """Add generate command parser."""
    generate_parser = subparsers.add_parser(
        'generate',
        aliases=['gen', 'g'],
        help='Render all boards, columns and cards into the deck document'
    )
    generate_parser.add_argument(
        '--deck-dir',
        help='Directory holding one folder per board (default: .pm/deck)'
    )
    generate_parser.add_argument(
        '--overview',
        help='File copied verbatim at the top of the document (default: .pm/pm.md)'
    )
    generate_parser.add_argument(
        '--output', '-o',
        help='Document to write (default: DECK.md)'
    )
    generate_parser.add_argument(
        '--stdout',
        action='store_true',
        help='Print the document to stdout instead of writing the output file'
    )
    return generate_parser


def handle_generate_command(args: argparse.Namespace) -> int:
    """Handle the generate command."""
    try:
        config = resolve_config(args)
        configure_logging(config.verbose)
        if getattr(args, 'stdout', False):
            document = render_deck(config).encode("utf-8", errors="surrogateescape")
            sys.stdout.flush()
            sys.stdout.buffer.write(document)
            sys.stdout.buffer.flush()
            return 0
        output_path = write_deck(config)
    except (DeckError, OSError) as e:
        print_error(f"Error: {e}")
        return 1

    print_success(f"Deck written to {output_path}")
    return 0
