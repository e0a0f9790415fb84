"""
Package init file for deckmd.config module.
Exports the DeckConfig class and path helpers.
"""

from .settings import DeckConfig
from .paths import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_DECK_DIR,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_OVERVIEW_FILE,
    get_config_path,
    get_project_root,
)

__all__ = [
    'DeckConfig',
    'DEFAULT_CONFIG_FILE',
    'DEFAULT_DECK_DIR',
    'DEFAULT_OUTPUT_FILE',
    'DEFAULT_OVERVIEW_FILE',
    'get_config_path',
    'get_project_root',
]
