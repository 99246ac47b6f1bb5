"""
World state for the gridlife simulation.

This module provides:
- Position and geometry helpers
- Grid / Cell: Spatial storage
- Inventory stacking
- Agent / AgentIdentity
- GameState / Message: The per-turn snapshot
- Perception: Per-agent fog-of-war views
"""

from .geometry import Position, target_position, in_bounds, manhattan_distance, relative_direction
from .grid import Cell, Grid
from .inventory import InventorySlot
from .agent import Agent, AgentIdentity
from .state import GameState, Message
from .perception import AgentView, HeardMessage, SelfView, VisibleAgent, VisibleCell, generate_agent_view

__all__ = [
    "Position",
    "target_position",
    "in_bounds",
    "manhattan_distance",
    "relative_direction",
    "Cell",
    "Grid",
    "InventorySlot",
    "Agent",
    "AgentIdentity",
    "GameState",
    "Message",
    "AgentView",
    "HeardMessage",
    "SelfView",
    "VisibleAgent",
    "VisibleCell",
    "generate_agent_view",
]
