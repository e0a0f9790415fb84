"""
Commands package for deckmd CLI commands.
"""

from .generate import add_generate_parser, handle_generate_command
from .listing import add_list_parser, handle_list_command
from .config import add_config_parser, handle_config_command

__all__ = [
    'add_generate_parser',
    'handle_generate_command',
    'add_list_parser',
    'handle_list_command',
    'add_config_parser',
    'handle_config_command',
]
