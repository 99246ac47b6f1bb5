"""
GameState - the complete world at one turn.

The GameState is the single source of truth for the simulation. It holds:
- The grid (terrain and blocks)
- Every agent, living or dead, keyed by id
- Recently spoken messages
- The run's config and the turn counter

States are treated as immutable values: the turn engine clones its input
and returns a new state, it never modifies the one it was given.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from ..core.config import GameConfig
from .agent import Agent
from .geometry import Position
from .grid import Grid


@dataclass
class Message:
    """
    Something an agent said out loud.

    Attributes:
        turn: Turn on which it was spoken
        agent_id: Speaker id
        agent_name: Speaker name at the time of speaking
        content: The text
        position: Where the speaker stood when speaking
    """
    turn: int
    agent_id: str
    agent_name: str
    content: str
    position: Position

    def to_dict(self) -> Dict[str, Any]:
        return {
            "turn": self.turn,
            "agent_id": self.agent_id,
            "agent_name": self.agent_name,
            "content": self.content,
            "position": self.position.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Message:
        return cls(
            turn=data["turn"],
            agent_id=data["agent_id"],
            agent_name=data["agent_name"],
            content=data["content"],
            position=Position.from_dict(data["position"]),
        )


@dataclass
class GameState:
    """
    The full world at one turn.

    Attributes:
        turn: Turn number (0 for a fresh world)
        grid: The map
        agents: Every agent by id (dead ones included)
        messages: Messages from recent turns, oldest first
        config: Rules for this run
    """
    turn: int
    grid: Grid
    agents: Dict[str, Agent] = field(default_factory=dict)
    messages: List[Message] = field(default_factory=list)
    config: GameConfig = field(default_factory=GameConfig)

    def __post_init__(self):
        for key, agent in self.agents.items():
            if key != agent.id:
                raise ValueError(f"Agent keyed as {key!r} has id {agent.id!r}")

    # ========================================================================
    # AGENT QUERIES
    # ========================================================================

    def get_agent(self, agent_id: str) -> Optional[Agent]:
        """Get agent by id, or None if unknown."""
        return self.agents.get(agent_id)

    def living_agents(self) -> Iterator[Agent]:
        """Iterate living agents."""
        return (agent for agent in self.agents.values() if agent.alive)

    def agent_at(self, pos: Position) -> Optional[Agent]:
        """First living agent standing on `pos`, or None."""
        for agent in self.agents.values():
            if agent.alive and agent.position == pos:
                return agent
        return None

    def is_occupied(self, pos: Position) -> bool:
        """Check if a position is occupied by a living agent."""
        return self.agent_at(pos) is not None

    # ========================================================================
    # UTILITY
    # ========================================================================

    def clone(self) -> GameState:
        """
        Create a deep copy of this state.

        The config is frozen and shared; everything else is copied.
        """
        return GameState(
            turn=self.turn,
            grid=self.grid.copy(),
            agents={agent_id: agent.copy() for agent_id, agent in self.agents.items()},
            messages=[
                Message(m.turn, m.agent_id, m.agent_name, m.content, m.position)
                for m in self.messages
            ],
            config=self.config,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize state to a dictionary.

        Returns:
            JSON-serializable dictionary; agents are keyed by id
        """
        return {
            "turn": self.turn,
            "grid": self.grid.to_dict(),
            "agents": {agent_id: agent.to_dict() for agent_id, agent in self.agents.items()},
            "messages": [message.to_dict() for message in self.messages],
            "config": self.config.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GameState:
        """
        Deserialize state from dictionary.

        Args:
            data: Dictionary from to_dict()
        """
        return cls(
            turn=data["turn"],
            grid=Grid.from_dict(data["grid"]),
            agents={
                agent_id: Agent.from_dict(agent_data)
                for agent_id, agent_data in data.get("agents", {}).items()
            },
            messages=[Message.from_dict(m) for m in data.get("messages", [])],
            config=GameConfig.from_dict(data["config"]),
        )

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> GameState:
        """Deserialize from a JSON string produced by to_json()."""
        return cls.from_dict(json.loads(json_str))

    def __str__(self) -> str:
        """String representation."""
        alive = sum(1 for _ in self.living_agents())
        total = len(self.agents)
        return f"GameState(turn={self.turn}, agents={alive}/{total}, grid={self.grid})"
