"""Tests for card and board rendering."""

import pytest

from deckmd.deck.models import Board, Card, Column, Status
from deckmd.deck.render import board_tag, render_board_heading, render_card, render_column_card


class TestBoardTag:
    @pytest.mark.parametrize("board_id, expected", [
        (0, "B000"),
        (7, "B007"),
        (42, "B042"),
        (999, "B999"),
    ])
    def test_board_id_is_three_digits(self, board_id, expected):
        assert board_tag(board_id, "1").split("-")[0] == expected

    def test_card_id_is_not_repadded(self):
        assert board_tag(7, "5") == "B007-C5"
        assert board_tag(7, "0005") == "B007-C0005"
        assert board_tag(7, "1234") == "B007-C1234"


def test_render_card_scenario():
    fragment = render_card(
        card_id="12",
        board_id=7,
        title="Fix bug",
        body=["Line one.", "Line two."],
        status_label="Todo",
    )
    assert fragment == (
        "\n"
        "## [B007-C12] Fix bug Todo\n"
        "> <details >\n"
        ">     <summary>Details</summary>\n"
        "> Line one.\n"
        "> Line two.\n"
        "> </details>\n"
    )


def test_blank_body_lines_are_quoted():
    fragment = render_card("3", 1, "T", ["a", "", "b"], "Done")
    assert "> a\n> \n> b\n" in fragment


def test_empty_body_renders_single_quote_line():
    fragment = render_card("3", 1, "Untitled", [], "Todo")
    assert fragment.endswith(">     <summary>Details</summary>\n> \n> </details>\n")


def test_status_details_inserted_verbatim():
    fragment = render_card("3", 1, "T", ["x"], "Doing", status_details='open class="wip"')
    assert '> <details open class="wip">\n' in fragment


def test_render_board_heading():
    assert render_board_heading(Board(board_id=7, name="Engineering")) == "# 7 - Engineering\n"


class TestRenderColumnCard:
    def test_uses_statustext_and_details(self):
        board = Board(board_id=3, name="Ops")
        column = Column(name="Doing", status=Status(statustext="In progress", statusdetails="open"))
        card = Card(card_id="9", headers={"Title": "Rotate keys"}, body=["soon"])
        fragment = render_column_card(board, column, card)
        assert "## [B003-C9] Rotate keys In progress\n" in fragment
        assert "> <details open>\n" in fragment

    def test_falls_back_to_column_name(self):
        board = Board(board_id=3, name="Ops")
        column = Column(name="Backlog")
        card = Card(card_id="10")
        fragment = render_column_card(board, column, card)
        assert "## [B003-C10] Untitled Backlog\n" in fragment
        assert "> <details >\n" in fragment


def test_render_board_heading_keeps_id_text():
    board = Board(board_id=7, name="Engineering", id_text="007")
    assert render_board_heading(board) == "# 007 - Engineering\n"
    assert render_column_card(board, Column(name="Todo"), Card(card_id="1")).startswith("\n## [B007-C1] ")
