"""Tests for the JSON forms of actions, outcomes and whole states."""

import json
import random

import pytest

from gridlife import (
    Action,
    ActionOutcome,
    AgentIdentity,
    BlockType,
    Direction,
    GameState,
    InventorySlot,
    TurnEngine,
    create_initial_state,
    record_decisions,
)
from gridlife.core.types import ActionType


def test_action_dict_is_flat():
    action = Action.build(Direction.UP, BlockType.STONE)
    assert action.to_dict() == {"type": "build", "direction": "up", "block": "stone"}
    assert Action.from_json(action.to_json()) == action


def test_action_from_dict_rejects_bad_input():
    with pytest.raises(ValueError):
        Action.from_dict({"direction": "up"})
    with pytest.raises(ValueError):
        Action.from_dict({"type": "fly"})
    with pytest.raises(ValueError):
        Action.from_dict({"type": "move", "direction": "sideways"})
    with pytest.raises(ValueError):
        Action.from_dict({"type": "move"})


def test_action_parameters_are_checked():
    with pytest.raises(ValueError):
        Action(ActionType.MOVE, {"direction": "up"})
    with pytest.raises(ValueError):
        Action(ActionType.WAIT, {"direction": Direction.UP})
    assert str(Action.move(Direction.LEFT)) == "MOVE LEFT"


def test_outcome_roundtrip():
    outcome = ActionOutcome("a", Action.speak("hi"), True, "a says hi")
    assert ActionOutcome.from_dict(outcome.to_dict()) == outcome


def test_state_json_roundtrip_after_play(make_state, agent_factory):
    state = make_state(
        [
            agent_factory("a", (5, 5), inventory=[InventorySlot(BlockType.BERRY, 2)]),
            agent_factory("b", (5, 4), hunger=30),
        ],
        blocks={(4, 5): BlockType.BERRY_BUSH},
    )
    state.grid.cells[5][4].berries_remaining = 3
    actions = {"a": Action.gather(Direction.LEFT), "b": Action.speak("mine!")}
    state = record_decisions(state, actions)
    state = TurnEngine().step(state, actions, random.Random(1)).state

    restored = GameState.from_json(state.to_json(indent=2))

    assert restored.to_dict() == state.to_dict()
    assert restored.grid == state.grid
    assert restored.agents["b"].last_action == actions["b"]
    assert restored.messages[0].content == "mine!"
    assert restored.config == state.config


def test_state_dict_is_plain_json(make_state, agent_factory):
    state = make_state([agent_factory("a", (0, 0))])
    data = json.loads(state.to_json())
    assert data["agents"]["a"]["position"] == {"x": 0, "y": 0}
    assert data["grid"]["cells"][0][0] == {"terrain": "grass", "block": None}


def test_generated_world_roundtrip():
    identities = [AgentIdentity(id=str(i), name=f"N{i}", personality="curious") for i in range(4)]
    state = create_initial_state({"grid_width": 8, "grid_height": 6}, identities, random.Random(4))
    assert GameState.from_dict(state.to_dict()).to_dict() == state.to_dict()


def test_mismatched_agent_key_is_rejected(make_state, agent_factory):
    state = make_state([agent_factory("a", (0, 0))])
    data = state.to_dict()
    data["agents"]["z"] = data["agents"].pop("a")
    with pytest.raises(ValueError):
        GameState.from_dict(data)
