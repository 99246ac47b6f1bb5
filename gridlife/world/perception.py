"""
Perception - per-agent fog-of-war views.

Each agent only sees the part of the world within its vision radius
(Manhattan distance, no occlusion). An AgentView is the complete input a
decision-making policy gets for one turn:
- The agent's own status (never filtered)
- Visible cells, with positions relative to the agent
- Visible living agents
- Recent messages spoken within earshot
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.types import BlockType, MESSAGE_HEARING_TURNS
from .geometry import Position, manhattan_distance, relative_direction
from .inventory import InventorySlot
from .state import GameState


def _relative(origin: Position, pos: Position) -> Position:
    return Position(pos[0] - origin[0], pos[1] - origin[1])


@dataclass
class SelfView:
    """The observing agent's own status."""
    id: str
    name: str
    position: Position
    hunger: int
    max_hunger: int
    inventory: List[InventorySlot]
    inventory_capacity: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position.to_dict(),
            "hunger": self.hunger,
            "max_hunger": self.max_hunger,
            "inventory": [slot.to_dict() for slot in self.inventory],
            "inventory_capacity": self.inventory_capacity,
        }


@dataclass
class VisibleCell:
    relative_position: Position
    absolute_position: Position
    terrain: BlockType
    block: Optional[BlockType]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "relative_position": self.relative_position.to_dict(),
            "absolute_position": self.absolute_position.to_dict(),
            "terrain": self.terrain.value,
            "block": self.block.value if self.block else None,
        }


@dataclass
class VisibleAgent:
    id: str
    name: str
    relative_position: Position
    absolute_position: Position
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "relative_position": self.relative_position.to_dict(),
            "absolute_position": self.absolute_position.to_dict(),
            "color": self.color,
        }


@dataclass
class HeardMessage:
    """A message as heard by an observer: who, what, and roughly from where."""
    turn: int
    agent_name: str
    content: str
    relative_direction: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "turn": self.turn,
            "agent_name": self.agent_name,
            "content": self.content,
            "relative_direction": self.relative_direction,
        }


@dataclass
class AgentView:
    """
    Everything one agent perceives at one turn.

    Attributes:
        self_state: The agent's own status ("self" in the dict form)
        visible_cells: Cells within vision radius
        visible_agents: Other living agents within vision radius
        recent_messages: Messages heard from the last few turns
        turn: Current turn number
    """
    self_state: SelfView
    visible_cells: List[VisibleCell] = field(default_factory=list)
    visible_agents: List[VisibleAgent] = field(default_factory=list)
    recent_messages: List[HeardMessage] = field(default_factory=list)
    turn: int = 0

    def cell_at_relative(self, dx: int, dy: int) -> Optional[VisibleCell]:
        """Look up a visible cell by offset from the observer."""
        for cell in self.visible_cells:
            if cell.relative_position == (dx, dy):
                return cell
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "self": self.self_state.to_dict(),
            "visible_cells": [cell.to_dict() for cell in self.visible_cells],
            "visible_agents": [agent.to_dict() for agent in self.visible_agents],
            "recent_messages": [message.to_dict() for message in self.recent_messages],
            "turn": self.turn,
        }


def generate_agent_view(state: GameState, agent_id: str) -> AgentView:
    """
    Build the restricted, agent-relative view of `state` for one agent.

    Args:
        state: Current game state (not modified)
        agent_id: Observer id

    Returns:
        AgentView for that agent

    Raises:
        KeyError: If the agent id is unknown (a caller bug)
    """
    agent = state.get_agent(agent_id)
    if agent is None:
        raise KeyError(f"Agent {agent_id} not found")

    config = state.config
    radius = config.vision_radius
    origin = agent.position

    visible_cells = []
    for pos in state.grid.positions_in_range(origin, radius):
        cell = state.grid.cell_at(pos)
        visible_cells.append(
            VisibleCell(
                relative_position=_relative(origin, pos),
                absolute_position=pos,
                terrain=cell.terrain,
                block=cell.block,
            )
        )

    visible_agents = [
        VisibleAgent(
            id=other.id,
            name=other.name,
            relative_position=_relative(origin, other.position),
            absolute_position=other.position,
            color=other.color,
        )
        for other in state.living_agents()
        if other.id != agent_id and manhattan_distance(origin, other.position) <= radius
    ]

    # Earshot is judged from where the speaker stood, not where it is now
    recent_messages = [
        HeardMessage(
            turn=message.turn,
            agent_name=message.agent_name,
            content=message.content,
            relative_direction=relative_direction(origin, message.position),
        )
        for message in state.messages
        if state.turn - message.turn <= MESSAGE_HEARING_TURNS
        and message.agent_id != agent_id
        and manhattan_distance(origin, message.position) <= radius
    ]

    return AgentView(
        self_state=SelfView(
            id=agent.id,
            name=agent.name,
            position=origin,
            hunger=agent.hunger,
            max_hunger=config.max_hunger,
            inventory=[slot.copy() for slot in agent.inventory],
            inventory_capacity=config.inventory_capacity,
        ),
        visible_cells=visible_cells,
        visible_agents=visible_agents,
        recent_messages=recent_messages,
        turn=state.turn,
    )
