"""
Board/column/card model, directory scanner, markdown renderer and deck builder.
"""

from .models import Board, Card, Column, Status, DEFAULT_TITLE
from .scanner import scan_deck, scan_board, scan_column, is_card_name
from .render import render_card, render_board_heading, render_column_card
from .builder import iter_deck, render_deck, write_deck

__all__ = [
    'Board',
    'Card',
    'Column',
    'Status',
    'DEFAULT_TITLE',
    'scan_deck',
    'scan_board',
    'scan_column',
    'is_card_name',
    'render_card',
    'render_board_heading',
    'render_column_card',
    'iter_deck',
    'render_deck',
    'write_deck',
]
