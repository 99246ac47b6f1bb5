"""
State initializer - builds the turn-0 world.

- Generates a grid filled with grass terrain
- Scatters stone, wood and berry bushes
- Places agents at random walkable cells
- Initializes agents with full hunger and empty inventory
"""

from __future__ import annotations

import math
import random
from typing import Any, Dict, List, Optional, Sequence, Union

from infra.logger import get_logger

from .core.config import GameConfig
from .core.types import BlockType
from .world.agent import DEFAULT_COLORS, Agent, AgentIdentity
from .world.geometry import Position
from .world.grid import Grid
from .world.state import GameState

log = get_logger(__name__)

ConfigLike = Union[GameConfig, Dict[str, Any], None]

# Blocks an agent may start on
_SPAWNABLE = (None, BlockType.BERRY_BUSH, BlockType.BERRY)


def create_initial_state(
    config: ConfigLike,
    identities: Sequence[AgentIdentity],
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Create the initial game state.

    Args:
        config: A GameConfig, a dict of overrides on the defaults, or None
        identities: Agents to place, one per identity
        rng: Source of randomness for resource and agent placement

    Returns:
        GameState at turn 0

    Raises:
        ValueError: If two identities share an id, or the config is invalid
    """
    full_config = _resolve_config(config)
    rng = rng or random.Random()

    seen = set()
    for identity in identities:
        if identity.id in seen:
            raise ValueError(f"Duplicate agent id: {identity.id!r}")
        seen.add(identity.id)

    grid = Grid(full_config.grid_width, full_config.grid_height)
    scatter_resources(grid, full_config, rng)
    agents = place_agents(grid, identities, full_config, rng)

    log.info(
        "Created %dx%d world with %d agent(s)",
        grid.width, grid.height, len(agents),
    )
    return GameState(turn=0, grid=grid, agents=agents, messages=[], config=full_config)


def _resolve_config(config: ConfigLike) -> GameConfig:
    if config is None:
        return GameConfig()
    if isinstance(config, GameConfig):
        return config
    return GameConfig.from_dict(config)


def scatter_resources(grid: Grid, config: GameConfig, rng: random.Random) -> None:
    """
    Scatter stone, wood and berry bushes over `grid` in-place.

    All coordinates are shuffled once and consumed in order, stone first,
    then wood, then bushes, so placements never overlap.
    """
    total = grid.width * grid.height
    quotas = [
        (BlockType.STONE, math.floor(total * config.stone_density)),
        (BlockType.WOOD, math.floor(total * config.wood_density)),
        (BlockType.BERRY_BUSH, math.floor(total * config.berry_bush_density)),
    ]

    positions = list(grid.all_positions())
    rng.shuffle(positions)

    index = 0
    for block, count in quotas:
        for pos in positions[index:index + count]:
            cell = grid.cell_at(pos)
            cell.block = block
            if block == BlockType.BERRY_BUSH:
                cell.berries_remaining = config.berries_per_bush
        index += count


def place_agents(
    grid: Grid,
    identities: Sequence[AgentIdentity],
    config: GameConfig,
    rng: random.Random,
) -> Dict[str, Agent]:
    """
    Place one agent per identity on distinct, shuffled walkable cells.

    Identities beyond the number of walkable cells receive no agent.
    """
    walkable: List[Position] = [
        pos for pos in grid.all_positions() if grid.cell_at(pos).block in _SPAWNABLE
    ]
    rng.shuffle(walkable)

    if len(identities) > len(walkable):
        dropped = [identity.id for identity in identities[len(walkable):]]
        log.warning(
            "Only %d walkable cell(s) for %d agent(s); not placing %s",
            len(walkable), len(identities), dropped,
        )

    agents: Dict[str, Agent] = {}
    for index, (identity, pos) in enumerate(zip(identities, walkable)):
        agents[identity.id] = Agent(
            id=identity.id,
            name=identity.name,
            position=pos,
            hunger=config.max_hunger,
            inventory=[],
            alive=True,
            color=identity.color or DEFAULT_COLORS[index % len(DEFAULT_COLORS)],
        )
    return agents
