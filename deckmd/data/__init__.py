"""
deckmd data module - front-matter parsing for card and status files.

Card files carry a ``---`` delimited header block followed by free text;
these helpers turn them into plain mappings and body line lists.
"""

from .front_matter import (
    DELIMITER,
    read_lines,
    is_delimiter,
    parse_header_line,
    parse_header_lines,
    parse_headers,
    extract_body_lines,
    extract_body,
)

__all__ = [
    'DELIMITER',
    'read_lines',
    'is_delimiter',
    'parse_header_line',
    'parse_header_lines',
    'parse_headers',
    'extract_body_lines',
    'extract_body',
]
