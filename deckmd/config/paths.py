"""Path resolution utilities for deckmd.

Provides the default deck layout and project root discovery, with an
environment variable override for testing.
"""

import os
from pathlib import Path
from typing import Optional

from deckmd.repo import get_git_root

DEFAULT_DECK_DIR = Path(".pm") / "deck"
DEFAULT_OVERVIEW_FILE = Path(".pm") / "pm.md"
DEFAULT_OUTPUT_FILE = Path("DECK.md")
DEFAULT_CONFIG_FILE = Path(".pm") / "deck.toml"


def get_project_root(start: Optional[str] = None) -> Path:
    """Get the project root directory.

    Resolution order: the DECKMD_ROOT environment variable, then the git
    top-level directory containing ``start`` (or the current directory),
    then ``start`` itself.

    Returns:
        Absolute path to the project root

    Environment Variables:
        DECKMD_ROOT: Override for the project root (useful for testing)
    """
    override = os.environ.get('DECKMD_ROOT')
    if override:
        return Path(override).resolve()

    git_root = get_git_root(start)
    if git_root:
        return Path(git_root).resolve()
    return Path(start or os.getcwd()).resolve()


def get_config_path(root: Path) -> Path:
    """Get the deck configuration file path (.pm/deck.toml under the root)."""
    return root / DEFAULT_CONFIG_FILE
