"""
Core types, actions and configuration for the gridlife simulation.
"""

# Instead of from gridlife.core.types import Direction, you can do: from gridlife.core import Direction
from .types import (
    AgentId,
    ActionType,
    BlockType,
    Direction,
    ValidationResult,
    MAX_STACK_SIZE,
    MESSAGE_HEARING_TURNS,
    MESSAGE_RETENTION_TURNS,
)
from .actions import Action, ActionOutcome
from .config import GameConfig


__all__ = [
    "AgentId",
    "ActionType",
    "BlockType",
    "Direction",
    "ValidationResult",
    "MAX_STACK_SIZE",
    "MESSAGE_HEARING_TURNS",
    "MESSAGE_RETENTION_TURNS",
    "Action",
    "ActionOutcome",
    "GameConfig",
]
