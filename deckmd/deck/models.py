"""
Data models for the Board/Column/Card tree.

These models mirror the on-disk layout of a deck:

    <deck_dir>/<board>/.id
    <deck_dir>/<board>/<column>/.status
    <deck_dir>/<board>/<column>/<card id>
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional


DEFAULT_TITLE = "Untitled"


@dataclass
class Status:
    """Column-level status read from the .status sidecar."""
    statustext: str = ""
    statusdetails: str = ""

    @classmethod
    def from_headers(cls, headers: Dict[str, str]) -> 'Status':
        return cls(
            statustext=headers.get('statustext', ''),
            statusdetails=headers.get('statusdetails', ''),
        )

    def label(self, column_name: str) -> str:
        """Display label for cards in the column: statustext, else the column name."""
        return self.statustext or column_name


@dataclass
class Card:
    """A single card file."""
    card_id: str  # filename as written, 1-4 digits, never re-padded
    path: Optional[Path] = None
    headers: Dict[str, str] = field(default_factory=dict)
    body: List[str] = field(default_factory=list)

    @property
    def title(self) -> str:
        return self.headers.get('Title') or DEFAULT_TITLE


@dataclass
class Column:
    """A workflow stage within a board."""
    name: str
    path: Optional[Path] = None
    status: Status = field(default_factory=Status)
    cards: List[Card] = field(default_factory=list)

    @property
    def label(self) -> str:
        return self.status.label(self.name)


@dataclass
class Board:
    """Top-level grouping of columns."""
    board_id: int
    name: str
    path: Optional[Path] = None
    columns: List[Column] = field(default_factory=list)
    id_text: str = ""  # .id contents as written, e.g. "007"

    @property
    def display_id(self) -> str:
        return self.id_text or str(self.board_id)

    @property
    def card_count(self) -> int:
        return sum(len(column.cards) for column in self.columns)
