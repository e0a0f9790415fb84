"""Helpers shared by the deckmd command handlers."""

import argparse
from pathlib import Path

from deckmd.config.paths import get_project_root
from deckmd.config.settings import DeckConfig


def resolve_root(args: argparse.Namespace) -> Path:
    root = getattr(args, 'root', None)
    if root:
        return Path(root).resolve()
    return get_project_root()


def resolve_config(args: argparse.Namespace) -> DeckConfig:
    """Load the deck config for the parsed arguments and apply CLI overrides."""
    root = resolve_root(args)
    config_arg = getattr(args, 'config', None)
    config = DeckConfig.load(root, Path(config_arg) if config_arg else None)
    return config.with_overrides(
        deck_dir=getattr(args, 'deck_dir', None),
        overview_file=getattr(args, 'overview', None),
        output_file=getattr(args, 'output', None),
        verbose=True if getattr(args, 'verbose', False) else None,
    )
