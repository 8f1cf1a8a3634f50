from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from hamilton.core.model import Difficulty
from hamilton.core.params import GameParams, validate_params

from .codec import decode_params

DEFAULT_SOLVE_STEPS = 1000000


@dataclass
class Config:
    params: GameParams = field(default_factory=GameParams)
    seed: Optional[str] = None
    count: int = 1
    max_attempts: Optional[int] = None
    solve_steps_limit: int = DEFAULT_SOLVE_STEPS


def params_from_data(data: Any) -> GameParams:
    """Build params from a params string or a mapping of field values."""
    if data is None:
        return GameParams()
    if isinstance(data, str):
        params = decode_params(data)
    else:
        params = GameParams()
        if "size" in data:
            params.w = params.h = int(data["size"])
        params.w = int(data.get("width", data.get("w", params.w)))
        params.h = int(data.get("height", data.get("h", params.h)))
        params.diagonal = bool(data.get("diagonal", params.diagonal))
        params.keep_ends = bool(data.get("keep_ends", params.keep_ends))
        params.pattern = str(data.get("pattern", params.pattern))
        try:
            params.difficulty = Difficulty(data.get("difficulty", params.difficulty.value))
        except ValueError:
            raise ValueError("Unknown difficulty rating") from None
    validate_params(params)
    return params


def load_config(path: str | Path) -> Config:
    """Load a YAML generator configuration.

    Example::

        params:
          width: 9
          height: 7
          pattern: ring
          difficulty: hard
        seed: "puzzle of the day"
        count: 3

    ``params`` may also be a params string like ``"9x7prdh"``.
    """
    with open(path, "r", encoding="utf-8") as f:
        data: Dict[str, Any] = yaml.safe_load(f) or {}

    max_attempts = data.get("max_attempts")
    seed = data.get("seed")
    return Config(
        params=params_from_data(data.get("params")),
        seed=None if seed is None else str(seed),
        count=int(data.get("count", 1)),
        max_attempts=None if max_attempts is None else int(max_attempts),
        solve_steps_limit=int(data.get("solve_steps_limit", DEFAULT_SOLVE_STEPS)),
    )
