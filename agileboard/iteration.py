"""
Iteration: the card tracking engine bound to one board.

Cards enter in the board's starting column and move between any of the
board's columns. Moves into a column with a points limit are rejected when
they would overflow it. Only the latest move can be undone, and undoing
consumes it.

Every public method takes the iteration lock and validates before it
mutates, so a failed call leaves the iteration untouched.
"""
import logging
import threading
from typing import Callable, List, Optional, Tuple, TYPE_CHECKING

from .schema import Card, Column, ColumnType, MoveRecord
from .errors import (
    CardAlreadyAdded,
    CardNotFound,
    ColumnNotFound,
    NoLastMove,
    WIPLimitExceeded,
)
from .events import IterationEvents

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)


class Iteration:
    """Tracks which cards are on the board and where they sit."""

    def __init__(self, board: "Board"):
        self.board = board
        self.events = IterationEvents()
        self._cards: List[Card] = []
        self._last_move: Optional[MoveRecord] = None
        self._lock = threading.RLock()

    # ── Read-only views ──────────────────────────────────────

    @property
    def cards(self) -> Tuple[Card, ...]:
        with self._lock:
            return tuple(self._cards)

    @property
    def last_move(self) -> Optional[MoveRecord]:
        return self._last_move

    def __contains__(self, card: Card) -> bool:
        with self._lock:
            return self._has_card(card)

    def __len__(self) -> int:
        return len(self._cards)

    def subscribe(self, event_type: str, callback: Callable) -> None:
        """Register a callback for card_added, card_removed, card_moved or move_undone."""
        self.events.subscribe(event_type, callback)

    # ── Membership ───────────────────────────────────────────

    def add(self, card: Card) -> None:
        """
        Add a card and place it in the starting column.

        The starting column's WIP limit is not checked here, only moves are.
        """
        with self._lock:
            if self._has_card(card):
                logger.info(f"Rejected add: '{card.title}' is already in the iteration")
                raise CardAlreadyAdded(f"Card '{card.title}' is already in the iteration")

            self._cards.append(card)
            card.column = self.board.start_column
            logger.debug(f"Added '{card.title}' ({card.estimate} pts) to '{card.column.name}'")

        self.events.emit("card_added", card=card, column=card.column)

    def remove(self, card: Card) -> None:
        """Drop a card from the iteration. Its column reference is left as it was."""
        with self._lock:
            index = self._index_of(card)
            if index is None:
                raise CardNotFound(f"Card '{card.title}' is not in the iteration")
            del self._cards[index]
            logger.debug(f"Removed '{card.title}' from the iteration")

        self.events.emit("card_removed", card=card, column=card.column)

    # ── Movement ─────────────────────────────────────────────

    def move(self, card: Card, column: Column) -> None:
        """Move a card to a column on this board, honouring its points limit."""
        with self._lock:
            if column.has_limit:
                current = self._points_in(column)
                if current + card.estimate > column.points_limit:
                    logger.info(
                        f"Rejected move of '{card.title}' to '{column.name}': "
                        f"{current} + {card.estimate} > {column.points_limit}"
                    )
                    raise WIPLimitExceeded(column, current, card.estimate)

            from_column = card.column
            self._place(card, column)
            self._last_move = MoveRecord(card=card, from_column=from_column, to_column=column)
            logger.debug(
                f"Moved '{card.title}' from "
                f"'{from_column.name if from_column else None}' to '{column.name}'"
            )

        self.events.emit("card_moved", card=card, from_column=from_column, column=column)

    def undo_last_move(self) -> None:
        """
        Return the last moved card to the column it left.

        The WIP limit of the column being returned to is not checked, since the
        card held that spot before the move. The record is consumed, so a
        second undo in a row raises NoLastMove.
        """
        with self._lock:
            record = self._last_move
            if record is None:
                raise NoLastMove("There is no move to undo")

            # A card moved before it ever had a column cannot happen through
            # add(), but fall back to the starting column rather than None.
            target = record.from_column or self.board.start_column
            self._place(record.card, target)
            self._last_move = None
            logger.debug(
                f"Undid move of '{record.card.title}': back to '{target.name}' "
                f"from '{record.to_column.name}'"
            )

        self.events.emit(
            "move_undone", card=record.card, from_column=record.to_column, column=target
        )

    # ── Queries ──────────────────────────────────────────────

    def cards_in(self, column: Column) -> List[Card]:
        """All cards currently in a column, in the order they were added."""
        with self._lock:
            self._require_column(column)
            return [c for c in self._cards if c.column is column]

    def points_in(self, column: Column) -> int:
        with self._lock:
            return self._points_in(column)

    def remaining_capacity(self, column: Column) -> Optional[int]:
        """Points still free under the column's limit, or None if it has no limit."""
        with self._lock:
            used = self._points_in(column)
            if not column.has_limit:
                return None
            return max(column.points_limit - used, 0)

    def velocity(self) -> int:
        """Sum of estimates of every card sitting in a done column."""
        with self._lock:
            return sum(
                c.estimate for c in self._cards
                if c.column is not None and c.column.type == ColumnType.DONE
            )

    # ── Internals (caller holds the lock) ────────────────────

    def _index_of(self, card: Card) -> Optional[int]:
        for i, member in enumerate(self._cards):
            if member is card:
                return i
        return None

    def _has_card(self, card: Card) -> bool:
        return self._index_of(card) is not None

    def _require_column(self, column: Column) -> None:
        if not any(c is column for c in self.board.columns):
            raise ColumnNotFound(f"Column '{column.name}' is not on this board")

    def _points_in(self, column: Column) -> int:
        self._require_column(column)
        return sum(c.estimate for c in self._cards if c.column is column)

    def _place(self, card: Card, column: Column) -> None:
        """Validated placement shared by move and undo."""
        if not self._has_card(card):
            raise CardNotFound(f"Card '{card.title}' is not in the iteration")
        self._require_column(column)
        card.column = column
