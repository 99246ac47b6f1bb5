"""Shared fixtures for the gridlife test suite."""

from __future__ import annotations

from pathlib import Path
import random
import sys
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import pytest

# Add repository root to sys.path so tests can import local modules without installation.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gridlife import Agent, BlockType, GameConfig, GameState, Grid, InventorySlot, Position


@pytest.fixture
def rng() -> random.Random:
    """A deterministic random generator for reproducible tests."""
    return random.Random(12345)


@pytest.fixture
def config() -> GameConfig:
    """10x10 world with no scattered resources."""
    return GameConfig(
        grid_width=10,
        grid_height=10,
        stone_density=0.0,
        wood_density=0.0,
        berry_bush_density=0.0,
    )


def make_agent(
    agent_id: str,
    pos: Tuple[int, int],
    hunger: int = 100,
    inventory: Optional[List[InventorySlot]] = None,
    alive: bool = True,
) -> Agent:
    return Agent(
        id=agent_id,
        name=agent_id.capitalize(),
        position=Position(*pos),
        hunger=hunger,
        inventory=inventory or [],
        alive=alive,
    )


@pytest.fixture
def make_state(config: GameConfig) -> Callable[..., GameState]:
    """
    Factory for hand-built states.

    Usage: make_state(agents=[...], blocks={(x, y): BlockType.STONE}, **config_overrides)
    """

    def _make(
        agents: Iterable[Agent] = (),
        blocks: Optional[Dict[Tuple[int, int], BlockType]] = None,
        turn: int = 0,
        **overrides,
    ) -> GameState:
        cfg = config.with_overrides(**overrides) if overrides else config
        grid = Grid(cfg.grid_width, cfg.grid_height)
        for (x, y), block in (blocks or {}).items():
            grid.cells[y][x].block = block
        return GameState(
            turn=turn,
            grid=grid,
            agents={agent.id: agent for agent in agents},
            config=cfg,
        )

    return _make


@pytest.fixture
def agent_factory() -> Callable[..., Agent]:
    return make_agent
