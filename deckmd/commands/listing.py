"""
List command for deckmd CLI.

Prints every board with its columns, the status label each column renders
with, and card counts.
"""

import argparse

from deckmd.commands.common import resolve_config
from deckmd.deck.scanner import scan_deck
from deckmd.errors import DeckError
from deckmd.modules.styles import Colors
from deckmd.modules.utils import configure_logging, print_error, print_info, styled_print


def add_list_parser(subparsers) -> argparse.ArgumentParser:
    """Add list command parser."""
    list_parser = subparsers.add_parser(
        'list',
        aliases=['ls', 'l'],
        help='List boards, columns and card counts'
    )
    list_parser.add_argument(
        '--deck-dir',
        help='Directory holding one folder per board (default: .pm/deck)'
    )
    list_parser.add_argument(
        '--cards',
        action='store_true',
        help='Also list card ids and titles'
    )
    return list_parser


def handle_list_command(args: argparse.Namespace) -> int:
    """Handle the list command."""
    try:
        config = resolve_config(args)
        configure_logging(config.verbose)
        boards = scan_deck(config.deck_dir)
    except (DeckError, OSError) as e:
        print_error(f"Error: {e}")
        return 1

    if not boards:
        print_info(f"No boards found in {config.deck_dir}")
        return 0

    show_cards = getattr(args, 'cards', False)
    for board in boards:
        styled_print(f"{board.display_id} - {board.name} ({board.card_count} cards)",
                     Colors.BRIGHT_CYAN, Colors.BOLD)
        if not board.columns:
            styled_print("(no columns)", Colors.DIM, None, 2)
        for column in board.columns:
            label = column.label
            suffix = f" [{label}]" if label != column.name else ""
            styled_print(f"{column.name}{suffix}: {len(column.cards)} cards", Colors.WHITE, None, 2)
            if show_cards:
                for card in column.cards:
                    styled_print(f"{card.card_id:>4}  {card.title}", None, None, 4)
    return 0
