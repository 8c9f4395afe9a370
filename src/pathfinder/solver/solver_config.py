from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import yaml

from .frontier import FRONTIER_BACKENDS

logger = logging.getLogger(__name__)

KNOWN_KEYS = {"frontier", "record_trace"}


@dataclass(frozen=True)
class SolverConfig:
    """Knobs for :class:`ShortestPathSolver`.

    ``frontier`` selects the unvisited-set backend (``linear`` or ``heap``);
    ``record_trace`` keeps every relaxation on the result for inspection.
    """

    frontier: str = "linear"
    record_trace: bool = False

    def __post_init__(self) -> None:
        if self.frontier not in FRONTIER_BACKENDS:
            raise ValueError(
                f"frontier must be one of {', '.join(sorted(FRONTIER_BACKENDS))}, got {self.frontier!r}"
            )
        if not isinstance(self.record_trace, bool):
            raise TypeError("record_trace must be a boolean")

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "SolverConfig":
        if not isinstance(data, Mapping):
            raise TypeError("Solver config must contain a mapping at the top level")
        unknown = sorted(set(data) - KNOWN_KEYS)
        if unknown:
            logger.warning("Ignoring unknown solver config keys: %s", ", ".join(unknown))
        return cls(
            frontier=str(data.get("frontier", "linear")).strip().lower(),
            record_trace=data.get("record_trace", False),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "SolverConfig":
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Solver config YAML not found at {config_path}")
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        return cls.from_mapping(data)


__all__ = ["SolverConfig"]
