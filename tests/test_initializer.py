"""Tests for GameConfig and the turn-0 world builder."""

import logging
import random

import pytest
from pydantic import ValidationError

from gridlife import AgentIdentity, BlockType, GameConfig, create_initial_state
from gridlife.world.rules import is_walkable


def _identities(count):
    return [AgentIdentity(id=f"a{i}", name=f"Agent {i}") for i in range(count)]


# ============================================================================
# CONFIG
# ============================================================================

def test_config_defaults():
    config = GameConfig()
    assert (config.grid_width, config.grid_height) == (20, 20)
    assert config.vision_radius == 5
    assert config.inventory_capacity == 5
    assert config.hunger_depletion_per_turn == 2
    assert config.hit_damage == 20
    assert config.berry_hunger_restore == 30
    assert config.max_hunger == 100
    assert config.berries_per_bush is None


def test_config_rejects_invalid_values():
    with pytest.raises(ValidationError):
        GameConfig(grid_width=0)
    with pytest.raises(ValidationError):
        GameConfig(stone_density=0.6, wood_density=0.6)
    with pytest.raises(ValidationError):
        GameConfig(unknown_field=1)


def test_config_is_frozen_and_overridable():
    config = GameConfig()
    with pytest.raises(ValidationError):
        config.grid_width = 5
    smaller = config.with_overrides(grid_width=5)
    assert smaller.grid_width == 5
    assert config.grid_width == 20


def test_config_save_and_load(tmp_path):
    config = GameConfig(grid_width=12, berries_per_bush=3)
    path = config.save_json(tmp_path / "configs" / "small.json")
    assert GameConfig.load_json(path) == config


# ============================================================================
# INITIAL STATE
# ============================================================================

def test_initial_state_places_every_agent_on_distinct_walkable_cells():
    state = create_initial_state({"grid_width": 10, "grid_height": 10}, _identities(6), random.Random(3))

    assert state.turn == 0
    assert state.messages == []
    assert len(state.agents) == 6
    positions = [agent.position for agent in state.agents.values()]
    assert len(set(positions)) == 6
    for agent in state.agents.values():
        assert is_walkable(state.grid.cell_at(agent.position))
        assert agent.hunger == state.config.max_hunger
        assert agent.inventory == []
        assert agent.alive


def test_resource_counts_follow_densities():
    config = GameConfig(grid_width=10, grid_height=10, stone_density=0.1, wood_density=0.2, berry_bush_density=0.05)
    state = create_initial_state(config, [], random.Random(1))

    assert state.grid.count_blocks(BlockType.STONE) == 10
    assert state.grid.count_blocks(BlockType.WOOD) == 20
    assert state.grid.count_blocks(BlockType.BERRY_BUSH) == 5


def test_same_seed_gives_same_world():
    first = create_initial_state(None, _identities(3), random.Random(99))
    second = create_initial_state(None, _identities(3), random.Random(99))
    assert first.to_dict() == second.to_dict()


def test_bushes_carry_configured_berry_count():
    config = GameConfig(grid_width=6, grid_height=6, berry_bush_density=0.25, berries_per_bush=4)
    state = create_initial_state(config, [], random.Random(5))
    bushes = [row_cell for row in state.grid.cells for row_cell in row if row_cell.block == BlockType.BERRY_BUSH]
    assert bushes
    assert all(cell.berries_remaining == 4 for cell in bushes)


def test_duplicate_ids_are_rejected():
    identities = [AgentIdentity(id="x", name="One"), AgentIdentity(id="x", name="Two")]
    with pytest.raises(ValueError):
        create_initial_state(None, identities, random.Random(0))


def test_excess_identities_are_dropped_with_warning(caplog):
    config = GameConfig(grid_width=2, grid_height=2, stone_density=0.5)
    with caplog.at_level(logging.WARNING):
        state = create_initial_state(config, _identities(4), random.Random(0))

    assert len(state.agents) == 2
    assert set(state.agents) == {"a0", "a1"}
    assert "walkable" in caplog.text


def test_identity_color_is_kept():
    identities = [AgentIdentity(id="c", name="Colored", color="#123456")]
    state = create_initial_state(None, identities, random.Random(0))
    assert state.agents["c"].color == "#123456"
