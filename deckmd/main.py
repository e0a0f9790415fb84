#!/usr/bin/env python3
"""
deckmd - deck document generator

This is the main entry point for the deckmd CLI.
"""

from typing import Optional, Sequence

from .modules.cli_parser import create_main_parser, normalize_command_aliases


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the deckmd CLI."""
    parser = create_main_parser()
    args = parser.parse_args(argv)
    args = normalize_command_aliases(args)

    from deckmd.commands import (
        handle_config_command,
        handle_generate_command,
        handle_list_command,
    )

    # No command: generate, as the deck tool always did
    if args.command in (None, 'generate'):
        return handle_generate_command(args)
    elif args.command == 'list':
        return handle_list_command(args)
    elif args.command == 'config':
        return handle_config_command(args)

    parser.print_help()
    return 1
