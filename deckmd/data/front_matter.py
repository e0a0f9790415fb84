"""
Front-matter parser for deck card and status files.

A card file starts with a block of ``key: value`` header lines delimited by
lines consisting of exactly ``---``, followed by a free-text body:

    ---
    Title: Fix bug
    ---
    Line one.
    Line two.

Column ``.status`` files use the same header block.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union


DELIMITER = "---"

PathLike = Union[str, Path]


# ============================================================================
# Line helpers
# ============================================================================

def _strip_newline(line: str) -> str:
    return line.rstrip("\r\n")


def is_delimiter(line: str) -> bool:
    """
    Check whether a line is a front-matter delimiter.

    Only a line that is exactly ``---`` counts; the line terminator
    (``\\n`` or ``\\r\\n``) is ignored.

    Examples:
        >>> is_delimiter('---')
        True
        >>> is_delimiter('---\\r\\n')
        True
        >>> is_delimiter('----')
        False
        >>> is_delimiter(' ---')
        False
    """
    return _strip_newline(line) == DELIMITER


def parse_header_line(line: str) -> Optional[Tuple[str, str]]:
    """
    Split a header line on its first colon.

    Args:
        line: A single line from inside the front-matter block

    Returns:
        Tuple of (key, value), both stripped, or None when the key is empty.
        A line without a colon is a key with an empty value.

    Examples:
        >>> parse_header_line('Title: Fix bug')
        ('Title', 'Fix bug')
        >>> parse_header_line('url: http://example.com')
        ('url', 'http://example.com')
        >>> parse_header_line('draft')
        ('draft', '')
        >>> parse_header_line(': orphan') is None
        True
    """
    key, _, value = _strip_newline(line).partition(":")
    key = key.strip()
    if not key:
        return None
    return key, value.strip()


def read_lines(path: PathLike) -> List[str]:
    """
    Read a text file as lines, terminators kept.

    Only ``\\n`` ends a line; a stray ``\\r`` inside a line stays part of it.
    """
    with open(path, "r", encoding="utf-8", newline="\n") as f:
        return f.readlines()


# ============================================================================
# Header Parser
# ============================================================================

def parse_header_lines(lines: Iterable[str]) -> Dict[str, str]:
    """
    Collect the key/value pairs of the first front-matter block.

    Scanning stops at the closing ``---``; anything after it is body text and
    never read as a header. A block that is opened but never closed yields
    no headers at all. Later occurrences of a key override earlier ones.

    Args:
        lines: Lines of a card or status file

    Returns:
        Mapping of header key to stripped value
    """
    headers: Dict[str, str] = {}
    in_header = False
    for line in lines:
        if is_delimiter(line):
            if in_header:
                return headers
            in_header = True
            continue
        if not in_header or not _strip_newline(line):
            continue
        pair = parse_header_line(line)
        if pair is not None:
            key, value = pair
            headers[key] = value
    # No closing delimiter: the block is malformed, treat as no headers.
    return {}


def parse_headers(path: PathLike) -> Dict[str, str]:
    """
    Parse the front-matter headers of a file.

    Raises:
        FileNotFoundError: If the file does not exist. Callers that accept a
            missing file (such as the column status loader) check first.
    """
    return parse_header_lines(read_lines(path))


# ============================================================================
# Body Extractor
# ============================================================================

def extract_body_lines(lines: Iterable[str]) -> List[str]:
    """
    Return every line after the second ``---`` delimiter.

    Lines are returned verbatim (minus their terminators), blank lines and
    any later ``---`` lines included. With fewer than two delimiters the
    body is empty.
    """
    body: List[str] = []
    in_header = False
    second_found = False
    for line in lines:
        if second_found:
            body.append(_strip_newline(line))
            continue
        if is_delimiter(line):
            if in_header:
                second_found = True
                in_header = False
            else:
                in_header = True
    return body


def extract_body(path: PathLike) -> List[str]:
    """Read a file and return its body lines (see :func:`extract_body_lines`)."""
    return extract_body_lines(read_lines(path))
