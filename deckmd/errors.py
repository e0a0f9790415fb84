"""Exceptions raised while reading a deck tree or its configuration."""

from pathlib import Path
from typing import Optional


class DeckError(Exception):
    """Base class for deck generation failures."""
    pass


class BoardIdError(DeckError):
    """Raised when a board's .id sidecar is missing or not an integer."""

    def __init__(self, board_path: Path, reason: str):
        self.board_path = board_path
        self.reason = reason
        super().__init__(f"Board {board_path}: {reason}")


class CardReadError(DeckError):
    """Raised when a card file cannot be read."""

    def __init__(self, card_path: Path, cause: Optional[BaseException] = None):
        self.card_path = card_path
        self.cause = cause
        message = f"Could not read card {card_path}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)


class InvalidConfigError(DeckError):
    """Raised when the deck configuration file cannot be used."""
    pass
