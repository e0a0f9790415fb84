"""
Deck builder: walks boards, columns and cards and writes the deck document.

The document is the overview file copied verbatim, followed by one heading
per board and one fragment per card of that board.
"""

import logging
from pathlib import Path
from typing import Iterator

from deckmd.config.settings import DeckConfig
from deckmd.deck.models import Column
from deckmd.deck.render import render_board_heading, render_column_card
from deckmd.deck.scanner import (
    iter_board_dirs,
    iter_card_files,
    iter_column_dirs,
    load_board,
    load_card,
    load_status,
)

logger = logging.getLogger(__name__)


def read_overview(config: DeckConfig) -> str:
    """
    Return the overview file contents, or an empty string when absent.

    Bytes that are not valid UTF-8 are carried as surrogate escapes so that
    the file reaches the output unchanged.
    """
    if not config.overview_file.is_file():
        logger.debug("No overview file at %s", config.overview_file)
        return ""
    with open(config.overview_file, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        return f.read()


def iter_board_fragments(config: DeckConfig) -> Iterator[str]:
    """Yield each board heading followed by its card fragments."""
    for board_dir in iter_board_dirs(config.deck_dir):
        board = load_board(board_dir)
        yield render_board_heading(board)

        for column_dir in iter_column_dirs(board_dir):
            column = Column(name=column_dir.name, path=column_dir, status=load_status(column_dir))
            for card_path in iter_card_files(column_dir):
                card = load_card(card_path)
                logger.debug("Rendering card %s from %s/%s", card.card_id, board.name, column.name)
                yield render_column_card(board, column, card)


def iter_deck(config: DeckConfig) -> Iterator[str]:
    yield read_overview(config)
    yield from iter_board_fragments(config)


def render_deck(config: DeckConfig) -> str:
    """Render the whole deck document as a string."""
    return "".join(iter_deck(config))


def write_deck(config: DeckConfig) -> Path:
    """
    Write the deck document to the configured output file.

    The overview is read before the output is truncated, so the two may even
    be the same file. The output is overwritten on every run.

    Returns:
        Path of the written file
    """
    preamble = read_overview(config)
    output_path = config.output_file
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
        f.write(preamble)
        for fragment in iter_board_fragments(config):
            f.write(fragment)

    logger.info("Wrote deck to %s", output_path)
    return output_path
