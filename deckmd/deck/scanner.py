"""
Directory scanner for deck trees.

Boards, columns and cards are visited in lexicographic order of their names
so that output does not depend on filesystem enumeration order. Hidden
entries (".id", ".status", ".git", ...) are never treated as boards, columns
or cards.
"""

import logging
import re
from pathlib import Path
from typing import Iterator, List

from deckmd.data.front_matter import (
    extract_body_lines,
    parse_header_lines,
    parse_headers,
    read_lines,
)
from deckmd.deck.models import Board, Card, Column, Status
from deckmd.errors import BoardIdError, CardReadError

logger = logging.getLogger(__name__)

BOARD_ID_FILENAME = ".id"
STATUS_FILENAME = ".status"
CARD_NAME_PATTERN = re.compile(r"[0-9]{1,4}")


def is_card_name(name: str) -> bool:
    """Return True for names made of 1 to 4 ASCII digits."""
    return CARD_NAME_PATTERN.fullmatch(name) is not None


def _sorted_entries(directory: Path) -> List[Path]:
    return sorted(
        (entry for entry in directory.iterdir() if not entry.name.startswith(".")),
        key=lambda entry: entry.name,
    )


def iter_board_dirs(deck_dir: Path) -> Iterator[Path]:
    if not deck_dir.is_dir():
        logger.warning("Deck directory %s not found; no boards to render", deck_dir)
        return
    for entry in _sorted_entries(deck_dir):
        if entry.is_dir():
            yield entry
        else:
            logger.debug("Skipping non-directory %s in deck directory", entry)


def iter_column_dirs(board_dir: Path) -> Iterator[Path]:
    for entry in _sorted_entries(board_dir):
        if entry.is_dir():
            yield entry


def iter_card_files(column_dir: Path) -> Iterator[Path]:
    for entry in _sorted_entries(column_dir):
        if entry.is_file() and is_card_name(entry.name):
            yield entry
        else:
            logger.debug("Skipping %s: not a card file", entry)


def read_board_id_text(board_dir: Path) -> str:
    """Return the stripped contents of the board's .id sidecar."""
    id_path = board_dir / BOARD_ID_FILENAME
    try:
        return id_path.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        raise BoardIdError(board_dir, f"missing {BOARD_ID_FILENAME} file") from None
    except (OSError, UnicodeDecodeError) as e:
        raise BoardIdError(board_dir, f"cannot read {BOARD_ID_FILENAME}: {e}") from e


def parse_board_id(board_dir: Path, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise BoardIdError(board_dir, f"{BOARD_ID_FILENAME} does not hold an integer: {raw!r}") from None


def read_board_id(board_dir: Path) -> int:
    """Read the numeric board id from the board's .id sidecar."""
    return parse_board_id(board_dir, read_board_id_text(board_dir))


def load_board(board_dir: Path) -> Board:
    """Create a Board (without columns) from its directory and .id sidecar."""
    raw = read_board_id_text(board_dir)
    return Board(
        board_id=parse_board_id(board_dir, raw),
        name=board_dir.name,
        path=board_dir,
        id_text=raw,
    )


def load_status(column_dir: Path) -> Status:
    """
    Load the column's .status sidecar.

    An absent or unreadable file gives an empty Status, so the column's cards
    fall back to the column name.
    """
    status_path = column_dir / STATUS_FILENAME
    if not status_path.is_file():
        return Status()
    try:
        headers = parse_headers(status_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Ignoring unreadable %s: %s", status_path, e)
        return Status()
    return Status.from_headers(headers)


def load_card(card_path: Path) -> Card:
    try:
        lines = read_lines(card_path)
    except (OSError, UnicodeDecodeError) as e:
        raise CardReadError(card_path, e) from e
    return Card(
        card_id=card_path.name,
        path=card_path,
        headers=parse_header_lines(lines),
        body=extract_body_lines(lines),
    )


def scan_column(column_dir: Path) -> Column:
    column = Column(name=column_dir.name, path=column_dir, status=load_status(column_dir))
    for card_path in iter_card_files(column_dir):
        column.cards.append(load_card(card_path))
    return column


def scan_board(board_dir: Path) -> Board:
    board = load_board(board_dir)
    for column_dir in iter_column_dirs(board_dir):
        board.columns.append(scan_column(column_dir))
    return board


def scan_deck(deck_dir: Path) -> List[Board]:
    """Load every board under deck_dir with its columns and cards."""
    return [scan_board(board_dir) for board_dir in iter_board_dirs(deck_dir)]
