"""
Agile board schema: columns, cards, and the move record used for undo.

Column lifecycle on a board:
  Starting → (any normal columns, in any order) → Done

Cards and columns compare by identity. Two cards with the same title and
estimate are still two separate pieces of work, so both dataclasses are
declared with eq=False and keep object hashing.
"""
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Dict, Any


class ColumnType(Enum):
    """Role a column plays in the workflow."""
    STARTING = "starting"    # Entry point, cards land here on add
    NORMAL = "normal"        # Any intermediate stage
    DONE = "done"            # Terminal, counted towards velocity

    @classmethod
    def from_str(cls, value: str) -> "ColumnType":
        try:
            return cls[value.strip().upper()]
        except (KeyError, AttributeError):
            raise ValueError(
                f"Unknown column type {value!r}. "
                f"Expected one of: {[t.value for t in cls]}"
            )


@dataclass(eq=False)
class Column:
    """A named workflow stage with an optional WIP limit in points."""

    name: str
    type: ColumnType = ColumnType.NORMAL
    points_limit: Optional[int] = None   # None = unlimited

    def __post_init__(self):
        if self.points_limit is not None and self.points_limit < 0:
            raise ValueError(f"points_limit must be >= 0, got {self.points_limit}")
        self._frozen = True

    def __setattr__(self, key, value):
        # Only the name may change once the column exists
        if key in ("type", "points_limit") and getattr(self, "_frozen", False):
            raise AttributeError(f"Column.{key} cannot be changed after creation")
        super().__setattr__(key, value)

    @property
    def has_limit(self) -> bool:
        return self.points_limit is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type.value,
            "points_limit": self.points_limit,
        }


@dataclass(eq=False)
class Card:
    """A unit of work tracked by an iteration."""

    title: str
    description: str = ""
    estimate: int = 0               # Story points

    # Placement, written only by Iteration
    column: Optional[Column] = field(default=None, repr=False)

    def __post_init__(self):
        if self.estimate < 0:
            raise ValueError(f"estimate must be >= 0, got {self.estimate}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict, naming the current column rather than nesting it."""
        return {
            "title": self.title,
            "description": self.description,
            "estimate": self.estimate,
            "column": self.column.name if self.column else None,
        }


@dataclass(eq=False)
class MoveRecord:
    """The most recent successful move, kept for a single-level undo."""
    card: Card
    from_column: Optional[Column]
    to_column: Column

    def to_dict(self) -> Dict[str, Any]:
        return {
            "card": self.card.title,
            "from_column": self.from_column.name if self.from_column else None,
            "to_column": self.to_column.name,
        }
