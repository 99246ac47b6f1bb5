"""
GameConfig - the tunable ruleset for one simulation run.

The config is a frozen pydantic model: it is validated once on construction
and shared (never copied) between every state of a run.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GameConfig(BaseModel):
    """Rules and world parameters, fixed for the lifetime of a run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    grid_width: int = Field(default=20, gt=0, description="Grid width (X dimension).")
    grid_height: int = Field(default=20, gt=0, description="Grid height (Y dimension).")
    vision_radius: int = Field(
        default=5, ge=0, description="Manhattan distance an agent can see and hear."
    )
    inventory_capacity: int = Field(
        default=5, gt=0, description="Maximum number of inventory slots per agent."
    )
    hunger_depletion_per_turn: int = Field(
        default=2, ge=0, description="Hunger lost by every living agent each turn."
    )
    hit_damage: int = Field(default=20, ge=0, description="Hunger removed from a hit agent.")
    berry_hunger_restore: int = Field(
        default=30, ge=0, description="Hunger restored by eating one berry."
    )
    max_hunger: int = Field(default=100, gt=0, description="Hunger of a fully fed agent.")

    stone_density: float = Field(
        default=0.10, ge=0.0, le=1.0, description="Fraction of cells seeded with stone."
    )
    wood_density: float = Field(
        default=0.10, ge=0.0, le=1.0, description="Fraction of cells seeded with wood."
    )
    berry_bush_density: float = Field(
        default=0.05, ge=0.0, le=1.0, description="Fraction of cells seeded with berry bushes."
    )
    berries_per_bush: Optional[int] = Field(
        default=None,
        gt=0,
        description="Berries a bush yields before it disappears; None means it never runs out.",
    )

    @model_validator(mode="after")
    def _check_densities(self) -> GameConfig:
        total = self.stone_density + self.wood_density + self.berry_bush_density
        if total > 1.0:
            raise ValueError(f"Resource densities must sum to at most 1.0, got {total:.2f}")
        return self

    # ========================================================================
    # SERIALIZATION
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a JSON-friendly dict."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameConfig:
        """Construct from a dict (e.g., loaded from JSON)."""
        return cls.model_validate(data)

    def with_overrides(self, **overrides: Any) -> GameConfig:
        """Return a validated copy with the given fields replaced."""
        return type(self).model_validate({**self.model_dump(), **overrides})

    def save_json(self, path: str | Path) -> Path:
        """Write the config to `path` as JSON, creating parent directories."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return target

    @classmethod
    def load_json(cls, path: str | Path) -> GameConfig:
        """Read a config previously written by save_json()."""
        return cls.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))

    @property
    def total_cells(self) -> int:
        return self.grid_width * self.grid_height
