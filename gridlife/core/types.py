"""
Core type definitions for the gridlife simulation.

This module contains all fundamental types, enums, and constants used
throughout the system. No logic, just pure data structures.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Tuple
from dataclasses import dataclass

# ============================================================================
# RULESET CONSTANTS
# ============================================================================

MAX_STACK_SIZE = 10  # Units per inventory slot
MESSAGE_RETENTION_TURNS = 10  # How long the world keeps a message
MESSAGE_HEARING_TURNS = 5  # How far back an agent can still "hear"

AgentId = str


# ============================================================================
# DIRECTIONS
# ============================================================================

class Direction(Enum):
    """
    Cardinal directions using screen coordinates (Y+ = DOWN).

    Coordinate System:
    - X increases to the RIGHT
    - Y increases DOWNWARD
    - Origin (0, 0) is at TOP-LEFT
    """
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Tuple[int, int]:
        """Get the (dx, dy) step for this direction."""
        return _DIRECTION_DELTAS[self]

    def __str__(self) -> str:
        return self.value


_DIRECTION_DELTAS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


# ============================================================================
# BLOCKS
# ============================================================================

class BlockType(Enum):
    """Terrain, resources and items that can sit on a cell or in an inventory."""
    GRASS = "grass"  # Default terrain, not gatherable
    STONE = "stone"  # Gatherable, placeable, blocks movement
    WOOD = "wood"  # Gatherable, placeable, blocks movement
    BERRY_BUSH = "berry_bush"  # Gatherable (yields berry), walkable, stays in place
    BERRY = "berry"  # Food item, placeable, walkable

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Single-character map symbol."""
        return {
            BlockType.GRASS: ".",
            BlockType.STONE: "S",
            BlockType.WOOD: "T",
            BlockType.BERRY_BUSH: "B",
            BlockType.BERRY: "b",
        }[self]


# ============================================================================
# ACTIONS
# ============================================================================

class ActionType(Enum):
    """Types of actions agents can perform."""
    MOVE = "move"  # Step one cell
    WAIT = "wait"  # Do nothing this turn
    GATHER = "gather"  # Pick up an adjacent resource
    BUILD = "build"  # Place a block from inventory
    SPEAK = "speak"  # Say something to nearby agents
    HIT = "hit"  # Attack an adjacent agent
    EAT = "eat"  # Consume food from inventory
    THINK = "think"  # Reason privately, no effect on the world

    def __str__(self) -> str:
        return self.value


# ============================================================================
# ACTION VALIDATION
# ============================================================================

@dataclass(frozen=True)
class ValidationResult:
    """
    Structured result of validating an action.

    Attributes:
        valid: Whether the action is legal right now
        reason: Human-readable explanation (None if valid)
        code: Machine-readable error code (None if valid)

    Error codes:
        - "AGENT_NOT_FOUND": No agent with that id
        - "AGENT_DEAD": Agent is not alive
        - "OUT_OF_BOUNDS": Target cell is off the grid
        - "NOT_WALKABLE": Target cell is blocked
        - "NOT_GATHERABLE": Nothing to gather at target
        - "INVENTORY_FULL": No room for the gathered item
        - "CANNOT_BUILD_HERE": Target cell already holds a block
        - "NOT_PLACEABLE": Block kind cannot be placed
        - "MISSING_MATERIAL": Block kind not in inventory
        - "EMPTY_MESSAGE": Speech text is blank
        - "NO_TARGET": No living agent at target
        - "NO_FOOD": No food in inventory
    """
    valid: bool
    reason: Optional[str] = None
    code: Optional[str] = None

    @staticmethod
    def success() -> ValidationResult:
        """Create a validation success result."""
        return ValidationResult(valid=True)

    @staticmethod
    def fail(code: str, reason: str) -> ValidationResult:
        """Create a validation failure result."""
        return ValidationResult(valid=False, reason=reason, code=code)

    def to_dict(self) -> Dict[str, object]:
        data: Dict[str, object] = {"valid": self.valid}
        if not self.valid:
            data["reason"] = self.reason
            data["code"] = self.code
        return data
