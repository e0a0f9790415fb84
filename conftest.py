"""
Pytest configuration and hooks for the deckmd test suite.

This conftest.py handles:
1. Building throwaway deck trees (boards, columns, cards) under tmp_path
2. Keeping a developer's DECKMD_ROOT from leaking into tests
3. Opt-in gating of tests that shell out to git (DECKMD_TEST_ALLOW_GIT=1)
"""

import os
from pathlib import Path
from typing import Optional

import pytest


# Test files that require a git executable and a writable work tree
GIT_TEST_FILES = {
    "test_repo.py",
}


class DeckTree:
    """Writes a deck layout rooted at a project directory."""

    def __init__(self, root: Path):
        self.root = root
        self.deck_dir = root / ".pm" / "deck"
        self.deck_dir.mkdir(parents=True, exist_ok=True)

    def board(self, name: str, board_id: Optional[str] = "1") -> Path:
        board_dir = self.deck_dir / name
        board_dir.mkdir(parents=True, exist_ok=True)
        if board_id is not None:
            (board_dir / ".id").write_text(f"{board_id}\n", encoding="utf-8")
        return board_dir

    def column(self, board: str, name: str, status: Optional[str] = None) -> Path:
        column_dir = self.deck_dir / board / name
        column_dir.mkdir(parents=True, exist_ok=True)
        if status is not None:
            (column_dir / ".status").write_text(status, encoding="utf-8")
        return column_dir

    def card(self, board: str, column: str, card_id: str, text: str) -> Path:
        card_path = self.column(board, column) / card_id
        card_path.write_text(text, encoding="utf-8")
        return card_path

    def overview(self, text: str) -> Path:
        path = self.root / ".pm" / "pm.md"
        path.write_text(text, encoding="utf-8")
        return path

    def overview_bytes(self, data: bytes) -> Path:
        path = self.root / ".pm" / "pm.md"
        path.write_bytes(data)
        return path

    @property
    def output(self) -> Path:
        return self.root / "DECK.md"


@pytest.fixture
def deck_tree(tmp_path: Path) -> DeckTree:
    return DeckTree(tmp_path)


@pytest.fixture(autouse=True)
def _no_root_override(monkeypatch):
    monkeypatch.delenv("DECKMD_ROOT", raising=False)


def pytest_configure(config):
    config.addinivalue_line("markers", "git: test shells out to git (opt-in via DECKMD_TEST_ALLOW_GIT=1)")


def pytest_collection_modifyitems(config, items):
    """
    Hook to modify test collection.

    Marks tests from GIT_TEST_FILES with the 'git' marker and skips them
    unless DECKMD_TEST_ALLOW_GIT=1.
    """
    allow_git = os.environ.get("DECKMD_TEST_ALLOW_GIT") == "1"
    for item in items:
        item_path = getattr(item, "path", None) or getattr(item, "fspath", None)
        if item_path is None or Path(str(item_path)).name not in GIT_TEST_FILES:
            continue
        item.add_marker(pytest.mark.git)
        if not allow_git:
            item.add_marker(pytest.mark.skip(reason="requires DECKMD_TEST_ALLOW_GIT=1"))
