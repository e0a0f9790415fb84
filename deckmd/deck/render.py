"""
Markdown rendering for boards and cards.

A card renders as a blockquoted, collapsible ``<details>`` section:

    ## [B007-C12] Fix bug Todo
    > <details >
    >     <summary>Details</summary>
    > Line one.
    > </details>
"""

from typing import List, Sequence

from deckmd.deck.models import Board, Card, Column

QUOTE_PREFIX = "> "


def board_tag(board_id: int, card_id: str) -> str:
    """
    Build the bracketed card reference.

    Examples:
        >>> board_tag(7, '12')
        'B007-C12'
        >>> board_tag(123, '0042')
        'B123-C0042'
    """
    return f"B{board_id:03d}-C{card_id}"


def render_board_heading(board: Board) -> str:
    """Board heading; the id is printed as written in .id, not re-padded."""
    return f"# {board.display_id} - {board.name}\n"


def render_card(
    card_id: str,
    board_id: int,
    title: str,
    body: Sequence[str],
    status_label: str,
    status_details: str = "",
) -> str:
    """
    Render one card as a markdown fragment.

    The fragment starts with an empty line. Every body line is quoted with
    ``> ``; an empty body still produces a single ``> `` line so that the
    details block is never empty. ``status_details`` lands verbatim inside
    the ``<details>`` tag and is not escaped.

    Args:
        card_id: Card file name, used as written
        board_id: Numeric board id, zero padded to three digits
        title: Resolved card title
        body: Body lines without terminators
        status_label: Column status text, or the column name
        status_details: Raw attribute text for the details tag

    Returns:
        The fragment, newline terminated
    """
    lines: List[str] = [
        "",
        f"## [{board_tag(board_id, card_id)}] {title} {status_label}",
        f"> <details {status_details}>",
        ">     <summary>Details</summary>",
    ]
    quoted = body if body else [""]
    lines.extend(QUOTE_PREFIX + line for line in quoted)
    lines.append("> </details>")
    return "\n".join(lines) + "\n"


def render_column_card(board: Board, column: Column, card: Card) -> str:
    return render_card(
        card_id=card.card_id,
        board_id=board.board_id,
        title=card.title,
        body=card.body,
        status_label=column.label,
        status_details=column.status.statusdetails,
    )
