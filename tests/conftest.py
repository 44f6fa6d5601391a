"""Shared test fixtures for the Agile board tests."""

import sys
from pathlib import Path

import pytest

# Ensure the package is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from agileboard.board import Board
from agileboard.schema import Card, Column, ColumnType


@pytest.fixture
def columns():
    """Starting, in-progress (limit 8), done."""
    return [
        Column(name="To Do", type=ColumnType.STARTING),
        Column(name="In Progress", type=ColumnType.NORMAL, points_limit=8),
        Column(name="Done", type=ColumnType.DONE),
    ]


@pytest.fixture
def board(columns):
    return Board(columns, name="test-board")


@pytest.fixture
def iteration(board):
    return board.iteration


@pytest.fixture
def make_card():
    """Factory for field-identical cards that are still distinct objects."""
    def _make(estimate=5, title="card title"):
        return Card(title=title, description="this is a card", estimate=estimate)
    return _make
