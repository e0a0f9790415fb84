"""
Config command for deckmd CLI.

Commands:
- deckmd config show - Show the resolved root and deck paths
- deckmd config init - Write a default .pm/deck.toml
"""

import argparse
from pathlib import Path

from deckmd.commands.common import resolve_config, resolve_root
from deckmd.config.paths import get_config_path
from deckmd.config.settings import DeckConfig
from deckmd.errors import DeckError
from deckmd.modules.utils import print_error, print_info, print_success, print_warning


def add_config_parser(subparsers) -> argparse.ArgumentParser:
    """Add config command parser."""
    config_parser = subparsers.add_parser(
        'config',
        aliases=['cfg'],
        help='Show or initialize the deck configuration'
    )
    config_subparsers = config_parser.add_subparsers(
        dest='config_subcommand',
        help='Config subcommands'
    )
    config_subparsers.add_parser(
        'show',
        aliases=['sh'],
        help='Show resolved paths'
    )
    init_parser = config_subparsers.add_parser(
        'init',
        help='Write a default config file'
    )
    init_parser.add_argument(
        '--force',
        action='store_true',
        help='Overwrite an existing config file'
    )
    return config_parser


def handle_config_command(args: argparse.Namespace) -> int:
    """Dispatch config subcommands."""
    subcommand = getattr(args, 'config_subcommand', None)
    if subcommand in (None, 'show', 'sh'):
        return handle_config_show(args)
    if subcommand == 'init':
        return handle_config_init(args)

    print_error(f"Unknown config subcommand: {subcommand}")
    print_error("Available subcommands: show, init")
    return 1


def _config_path(args: argparse.Namespace, root: Path) -> Path:
    config_arg = getattr(args, 'config', None)
    return Path(config_arg) if config_arg else get_config_path(root)


def handle_config_show(args: argparse.Namespace) -> int:
    try:
        config = resolve_config(args)
    except DeckError as e:
        print_error(f"Error: {e}")
        return 1

    config_path = _config_path(args, config.root)
    source = "" if config_path.exists() else " (not present, using defaults)"
    print_info(f"root:          {config.root}")
    print_info(f"config file:   {config_path}{source}")
    print_info(f"deck_dir:      {config.deck_dir}")
    print_info(f"overview_file: {config.overview_file}")
    print_info(f"output_file:   {config.output_file}")
    print_info(f"verbose:       {config.verbose}")
    return 0


def handle_config_init(args: argparse.Namespace) -> int:
    root = resolve_root(args)
    config_path = _config_path(args, root)
    if config_path.exists() and not getattr(args, 'force', False):
        print_warning(f"Config file already exists: {config_path}")
        print_warning("Use --force to overwrite it.")
        return 1

    try:
        written = DeckConfig.default(root).save(config_path)
    except OSError as e:
        print_error(f"Error writing {config_path}: {e}")
        return 1
    print_success(f"Wrote default config to {written}")
    return 0
