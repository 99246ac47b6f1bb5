"""
Agent - one simulated creature, and AgentIdentity - who it is before placement.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.actions import Action
from .geometry import Position
from .inventory import InventorySlot


# Default colors for agents, cycled by placement order
DEFAULT_COLORS = [
    "#FF6B6B",  # Red
    "#4ECDC4",  # Teal
    "#FFE66D",  # Yellow
    "#95E1D3",  # Mint
    "#F38181",  # Coral
    "#AA96DA",  # Purple
    "#FCBAD3",  # Pink
    "#A8D8EA",  # Light Blue
]


@dataclass
class AgentIdentity:
    """
    Serializable description of an agent to be placed in a new world.

    Attributes:
        id: Unique, stable agent id
        name: Display name
        personality: Optional free-text persona for decision-making layers
        color: Optional hex color; a palette color is assigned when omitted
    """
    id: str
    name: str
    personality: Optional[str] = None
    color: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "personality": self.personality,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AgentIdentity:
        return cls(
            id=data["id"],
            name=data["name"],
            personality=data.get("personality"),
            color=data.get("color"),
        )


@dataclass
class Agent:
    """
    A creature living on the grid.

    Dead agents stay in the state (so their history remains inspectable)
    but never take part in movement, occupancy, combat or perception.

    Attributes:
        id: Unique, stable id for the whole run
        name: Display name
        position: Current cell
        hunger: 0 (starved) .. max_hunger (full)
        inventory: Ordered stacks of held items
        alive: False once starved or killed
        color: Hex color for viewers
        last_thought: Most recent thought (advisory, set by callers)
        last_action: Most recent submitted action (advisory, set by callers)
    """
    id: str
    name: str
    position: Position
    hunger: int
    inventory: List[InventorySlot] = field(default_factory=list)
    alive: bool = True
    color: str = DEFAULT_COLORS[0]
    last_thought: Optional[str] = None
    last_action: Optional[Action] = None

    def label(self) -> str:
        """Short label for log lines."""
        return f"{self.name}#{self.id}"

    def copy(self) -> Agent:
        """Copy with an independent inventory; actions are never mutated so they are shared."""
        return Agent(
            id=self.id,
            name=self.name,
            position=self.position,
            hunger=self.hunger,
            inventory=[slot.copy() for slot in self.inventory],
            alive=self.alive,
            color=self.color,
            last_thought=self.last_thought,
            last_action=self.last_action,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position.to_dict(),
            "hunger": self.hunger,
            "inventory": [slot.to_dict() for slot in self.inventory],
            "alive": self.alive,
            "color": self.color,
            "last_thought": self.last_thought,
            "last_action": self.last_action.to_dict() if self.last_action else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Agent:
        last_action = data.get("last_action")
        return cls(
            id=data["id"],
            name=data["name"],
            position=Position.from_dict(data["position"]),
            hunger=data["hunger"],
            inventory=[InventorySlot.from_dict(slot) for slot in data.get("inventory", [])],
            alive=data.get("alive", True),
            color=data.get("color", DEFAULT_COLORS[0]),
            last_thought=data.get("last_thought"),
            last_action=Action.from_dict(last_action) if last_action else None,
        )

    def __str__(self) -> str:
        status = "alive" if self.alive else "dead"
        return f"Agent({self.label()} at {tuple(self.position)}, hunger={self.hunger}, {status})"
