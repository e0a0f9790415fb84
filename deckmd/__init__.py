"""
deckmd - file-based kanban deck to markdown

This package renders the boards, columns and cards stored under .pm/deck
into a single markdown document.
"""

__version__ = "1.0.0"


def main(*args, **kwargs):
    """Lazy import to avoid CLI startup side effects during help paths."""
    from .main import main as _main

    return _main(*args, **kwargs)


# Define what gets imported with "from deckmd import *"
__all__ = ["main", "__version__"]
