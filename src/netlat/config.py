from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional
import json
import logging


_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

_TYPES = {
    "strict_ingest": bool,
    "strict_copper": bool,
    "failure_min_degree": int,
    "check_optimality": bool,
    "log_level": str,
}


@dataclass(frozen=True)
class AnalysisConfig:
    """Knobs shared by the CLI and the analyzer."""

    strict_ingest: bool = True
    strict_copper: bool = False
    failure_min_degree: int = 3
    check_optimality: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.failure_min_degree < 0:
            raise ValueError(f"failure_min_degree must be >= 0, got {self.failure_min_degree}")
        level = str(self.log_level).upper()
        if level not in _LEVELS:
            raise ValueError(f"Invalid log_level {self.log_level!r}. Use one of: {', '.join(sorted(_LEVELS))}")
        object.__setattr__(self, "log_level", level)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def override(self, **values: Optional[Any]) -> "AnalysisConfig":
        """Copy with every non-None value replaced (CLI flags win over the file)."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})


def load_config(path: Optional[str]) -> AnalysisConfig:
    """
    Config JSON schema (every key optional):

    {
      "strict_ingest": true,
      "strict_copper": false,
      "failure_min_degree": 3,
      "check_optimality": true,
      "log_level": "INFO"
    }
    """
    if not path:
        return AnalysisConfig()
    with open(path, "r", encoding="utf-8") as f:
        data: Dict[str, Any] = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: config must be a JSON object")

    known = {f.name for f in fields(AnalysisConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"{path}: unknown config key(s): {', '.join(unknown)}")

    for key, value in data.items():
        expected = _TYPES[key]
        # bool passes isinstance(int)
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ValueError(f"{path}: '{key}' must be {expected.__name__}, got {value!r}")

    return AnalysisConfig(**data)
