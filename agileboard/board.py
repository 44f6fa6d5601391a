"""
Agile board: a validated, fixed set of workflow columns.

A board needs exactly one starting column and exactly one done column. Start
checks run first, so a column set with neither reports NoStartColumn.
"""
import logging
from typing import Sequence, Tuple, Dict, Any, TYPE_CHECKING

from .schema import Column, ColumnType
from .errors import (
    ColumnNotFound,
    MultipleDoneColumns,
    MultipleStartColumns,
    NoDoneColumn,
    NoStartColumn,
)
from .iteration import Iteration

if TYPE_CHECKING:
    from .config import BoardConfig

logger = logging.getLogger(__name__)


class Board:
    """Holds the columns and the one iteration running on them."""

    def __init__(self, columns: Sequence[Column], name: str = "board"):
        starting = [c for c in columns if c.type == ColumnType.STARTING]
        if not starting:
            raise NoStartColumn("Board needs a starting column")
        if len(starting) > 1:
            raise MultipleStartColumns(
                f"Board has {len(starting)} starting columns: {[c.name for c in starting]}"
            )

        done = [c for c in columns if c.type == ColumnType.DONE]
        if not done:
            raise NoDoneColumn("Board needs a done column")
        if len(done) > 1:
            raise MultipleDoneColumns(
                f"Board has {len(done)} done columns: {[c.name for c in done]}"
            )

        self.name = name
        self._columns: Tuple[Column, ...] = tuple(columns)
        self._start_column = starting[0]
        self._done_column = done[0]

        # Bound only once the board itself is valid
        self._iteration = Iteration(self)

        logger.info(
            f"Board '{name}' ready with {len(self._columns)} columns: "
            f"{[c.name for c in self._columns]}"
        )

    @classmethod
    def from_config(cls, cfg: "BoardConfig") -> "Board":
        """Build a board from a loaded YAML configuration."""
        return cls(cfg.build_columns(), name=cfg.name)

    @property
    def columns(self) -> Tuple[Column, ...]:
        return self._columns

    @property
    def start_column(self) -> Column:
        return self._start_column

    @property
    def done_column(self) -> Column:
        return self._done_column

    @property
    def iteration(self) -> Iteration:
        return self._iteration

    def column_named(self, name: str) -> Column:
        """First column with the given name. Names are not unique, identity is."""
        for column in self._columns:
            if column.name == name:
                return column
        raise ColumnNotFound(f"No column named '{name}' on board '{self.name}'")

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot of the board layout and where every tracked card sits."""
        return {
            "name": self.name,
            "columns": [c.to_dict() for c in self._columns],
            "start_column": self._start_column.name,
            "done_column": self._done_column.name,
            "cards": [c.to_dict() for c in self._iteration.cards],
            "velocity": self._iteration.velocity(),
        }
