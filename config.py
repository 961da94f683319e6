"""
config.py

Simulation settings, read from a YAML file such as settings.yaml:

    room_size: 15
    interval: 0.6
    density: 0.05
    seed: 7
    rules:
      reproduction: [4, 5]
      underpopulation: [0, 2]
      continuation: [2, 5]
      overpopulation: [5, 28]

Every key is optional; missing keys fall back to the defaults below.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from generate import DEFAULT_DENSITY
from rules import GameRules

SETTING_KEYS = ("room_size", "interval", "density", "seed", "rules")


@dataclass(frozen=True)
class Settings:
    room_size: int = 15
    interval: float = 0.6
    density: float = DEFAULT_DENSITY
    seed: Optional[int] = None
    rules: GameRules = field(default_factory=GameRules)

    def __post_init__(self) -> None:
        if self.room_size < 1:
            raise ValueError(f"room_size must be positive, got {self.room_size}")
        if self.interval <= 0:
            raise ValueError(f"interval must be positive, got {self.interval}")
        if not 0.0 <= self.density <= 1.0:
            raise ValueError(f"density must be in [0, 1], got {self.density}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Settings:
        unknown = set(data) - set(SETTING_KEYS)
        if unknown:
            raise ValueError(f"unknown settings keys: {sorted(unknown)}")
        kwargs: Dict[str, Any] = {k: v for k, v in data.items() if k != "rules"}
        if data.get("rules"):
            kwargs["rules"] = GameRules.from_bounds(**data["rules"])
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "room_size": self.room_size,
            "interval": self.interval,
            "density": self.density,
            "seed": self.seed,
            "rules": self.rules.to_bounds(),
        }

    def override(self, **changes: Any) -> Settings:
        """Copy with the non-None entries of `changes` applied (CLI flags)."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_settings(path: Path) -> Settings:
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return Settings.from_dict(data)
