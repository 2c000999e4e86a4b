"""Game configuration loaded from an optional JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Optional

from ai.search_tree import TREE_DEPTH

COMPUTED_ACTIONS = 10


class GameConfig:
    """Container for engine and driver settings."""

    def __init__(self, payload: Optional[Dict[str, object]] = None) -> None:
        payload = payload or {}
        self.search_depth = int(payload.get("search_depth", TREE_DEPTH))
        self.computed_actions = int(payload.get("computed_actions", COMPUTED_ACTIONS))
        self.debug_top_k = int(payload.get("debug_top_k", 3))
        self.log_level = str(payload.get("log_level", "WARNING"))
        self.validate()

    def validate(self) -> None:
        if self.search_depth < 1:
            raise ValueError(f"search_depth must be at least 1, got {self.search_depth}")
        if self.computed_actions < 0:
            raise ValueError(f"computed_actions must be non-negative, got {self.computed_actions}")

    @classmethod
    def from_json(cls, path: str | Path) -> "GameConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(payload)
