"""
CLI argument parsing for deckmd.
"""
import argparse
import importlib
from typing import Iterable, Optional, Sequence

import pyfiglet

from .styles import Colors
from .utils import styled_print, print_subheader


class StyledArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that prints colored help, with a banner on the main parser."""

    def __init__(self, *args, show_banner=False, **kwargs):
        """Initialize with optional banner flag."""
        super().__init__(*args, **kwargs)
        self.show_banner = show_banner

    def print_help(self, file=None):
        """Override print_help to use our styled formatter."""
        from .. import __version__

        if self.show_banner:
            ascii_art = pyfiglet.figlet_format("DECK", font="standard")
            for line in ascii_art.split('\n'):
                if line.strip():
                    styled_print(line, Colors.BRIGHT_CYAN, Colors.BOLD, 0, file=file)
            print(file=file)
            print_subheader("COMMAND OPTIONS")

        for line in self.format_help().split('\n'):
            if not line.strip():
                continue
            elif line.startswith('usage:'):
                styled_print(line, Colors.BRIGHT_YELLOW, Colors.BOLD, 0, file=file)
            elif line.startswith('options:') or line.startswith('optional arguments:') \
                    or line.startswith('positional arguments:'):
                styled_print(line, Colors.BRIGHT_CYAN, Colors.BOLD, 0, file=file)
            elif line.startswith('  -') or line.startswith('    -'):
                styled_print(line, Colors.BRIGHT_YELLOW, None, 0, file=file)
            else:
                styled_print(line, Colors.BRIGHT_GREEN, None, 0, file=file)

        if self.show_banner:
            print(file=file)
            styled_print(f" deckmd v{__version__} ", Colors.MAGENTA, None, 0, file=file)


# (command, module, parser factory)
_COMMAND_SPECS = (
    ("generate", "deckmd.commands.generate", "add_generate_parser"),
    ("list", "deckmd.commands.listing", "add_list_parser"),
    ("config", "deckmd.commands.config", "add_config_parser"),
)

COMMAND_ALIASES = {
    'gen': 'generate',
    'g': 'generate',
    'ls': 'list',
    'l': 'list',
    'cfg': 'config',
}


def _register_command_parsers(
    subparsers: argparse._SubParsersAction,
    commands_to_load: Optional[Iterable[str]],
) -> None:
    commands = set(commands_to_load) if commands_to_load is not None else None
    for command, module_path, func_name in _COMMAND_SPECS:
        if commands is not None and command not in commands:
            continue
        module = importlib.import_module(module_path)
        getattr(module, func_name)(subparsers)


def create_main_parser(
    *,
    commands_to_load: Optional[Sequence[str]] = None,
    show_banner: bool = True,
) -> argparse.ArgumentParser:
    """Create the main argument parser for deckmd."""
    from .. import __version__

    parser = StyledArgumentParser(
        prog="deckmd",
        description="Render a file-based kanban deck (.pm/deck) into a single markdown document.\n\n"
                    "Running without a command is the same as 'deckmd generate'.",
        formatter_class=argparse.RawTextHelpFormatter,
        show_banner=show_banner,
        allow_abbrev=False,
    )
    parser.add_argument('--version', action='version',
                        version=f'deckmd {__version__}',
                        help='Show version information')
    parser.add_argument('--root',
                        help='Project root (default: DECKMD_ROOT, else the git work tree, else cwd)')
    parser.add_argument('--config',
                        help='Path to the TOML config file (default: <root>/.pm/deck.toml)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log skipped files and per-card progress')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    _register_command_parsers(subparsers, commands_to_load)
    return parser


def normalize_command_aliases(args: argparse.Namespace) -> argparse.Namespace:
    """Map command aliases (gen, ls, ...) to their main command names."""
    args.command = COMMAND_ALIASES.get(args.command, args.command)
    if args.command == 'config' and getattr(args, 'config_subcommand', None) == 'sh':
        args.config_subcommand = 'show'
    return args
