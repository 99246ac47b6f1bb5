"""
gridlife - a turn-based simulation of agents living on a 2D grid.

Agents move, gather, build, fight and talk; every turn all of their actions
are resolved together. The four entry points are:

- create_initial_state(config, identities, rng=None) -> GameState
- validate_action(state, agent_id, action) -> ValidationResult
- compute_next_state(state, actions, rng=None) -> GameState
- generate_agent_view(state, agent_id) -> AgentView
"""

from .core import (
    Action,
    ActionOutcome,
    ActionType,
    BlockType,
    Direction,
    GameConfig,
    ValidationResult,
)
from .core.validation import validate_action
from .world import (
    Agent,
    AgentIdentity,
    AgentView,
    Cell,
    GameState,
    Grid,
    InventorySlot,
    Message,
    Position,
    generate_agent_view,
)
from .initializer import create_initial_state
from .engine import TurnEngine, TurnResult, compute_next_state, record_decisions

__all__ = [
    "Action",
    "ActionOutcome",
    "ActionType",
    "BlockType",
    "Direction",
    "GameConfig",
    "ValidationResult",
    "validate_action",
    "Agent",
    "AgentIdentity",
    "AgentView",
    "Cell",
    "GameState",
    "Grid",
    "InventorySlot",
    "Message",
    "Position",
    "generate_agent_view",
    "create_initial_state",
    "TurnEngine",
    "TurnResult",
    "compute_next_state",
    "record_decisions",
]
