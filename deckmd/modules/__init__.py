"""
Console output, logging setup and CLI parsing for deckmd.
"""

from .styles import Colors
from .utils import (
    styled_print,
    print_subheader,
    print_success,
    print_warning,
    print_error,
    print_info,
    configure_logging,
)
from .cli_parser import create_main_parser, normalize_command_aliases

__all__ = [
    'Colors',
    'styled_print',
    'print_subheader',
    'print_success',
    'print_warning',
    'print_error',
    'print_info',
    'configure_logging',
    'create_main_parser',
    'normalize_command_aliases',
]
