"""
Board configuration: column layout and logging, loaded from YAML.

Example board.yaml:

    name: Sprint 12
    log_level: INFO
    columns:
      - {name: To Do, type: starting}
      - {name: In Progress, type: normal, points_limit: 13}
      - {name: Done, type: done}

The path defaults to ./board.yaml and can be overridden with AGILEBOARD_CONFIG.
"""
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .schema import Column, ColumnType

CONFIG_ENV = "AGILEBOARD_CONFIG"
CONFIG_PATH = Path("board.yaml")


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""
    pass


def _default_columns() -> List[Dict[str, Any]]:
    return [
        {"name": "To Do", "type": "starting"},
        {"name": "In Progress", "type": "normal"},
        {"name": "Done", "type": "done"},
    ]


@dataclass
class BoardConfig:
    """Runtime configuration for a board."""

    name: str = "board"
    log_level: str = "INFO"
    columns: List[Dict[str, Any]] = field(default_factory=_default_columns)

    def build_columns(self) -> List[Column]:
        """Turn the raw column entries into Column objects, in file order."""
        built = []
        for i, raw in enumerate(self.columns):
            if not isinstance(raw, dict) or not raw.get("name"):
                raise ConfigError(f"Column #{i + 1} needs at least a name: {raw!r}")

            try:
                column_type = ColumnType.from_str(raw.get("type", "normal"))
            except ValueError as e:
                raise ConfigError(f"Column '{raw['name']}': {e}") from e

            limit = raw.get("points_limit")
            if limit is not None and (not isinstance(limit, int) or limit < 0):
                raise ConfigError(
                    f"Column '{raw['name']}': points_limit must be a non-negative integer, got {limit!r}"
                )

            built.append(Column(name=str(raw["name"]), type=column_type, points_limit=limit))
        return built

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoardConfig":
        if not isinstance(data, dict):
            raise ConfigError(f"Board config must be a mapping, got {type(data).__name__}")
        cfg = cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
        if not isinstance(cfg.columns, list):
            raise ConfigError("'columns' must be a list of column entries")
        return cfg

    @classmethod
    def load(cls, path: Optional[str] = None) -> "BoardConfig":
        """Load config from YAML file, falling back to defaults when it is missing."""
        cfg_path = Path(path or os.environ.get(CONFIG_ENV) or CONFIG_PATH)
        if not cfg_path.exists():
            return cls()

        try:
            with open(cfg_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {cfg_path}: {e}") from e

        return cls.from_dict(data)


def setup_logging(cfg: BoardConfig) -> None:
    """Route log output to stdout at the configured level."""
    level = logging.getLevelName(str(cfg.log_level).upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level {cfg.log_level!r}")

    logging.basicConfig(
        level=level,
        format=f"%(asctime)s [{cfg.name}] %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
