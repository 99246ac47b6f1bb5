"""Tests for the policy layer: registry, specs, random and scripted policies, runner."""

import random

import pytest

from agents import (
    AgentSpec,
    BaseAgent,
    RandomAgent,
    ScriptedAgent,
    available_agents,
    collect_actions,
    create_agent_from_spec,
    create_population,
    parse_action,
    register_agent,
    resolve_agent_class,
)
from game_runner import GameRunner
from gridlife import (
    Action,
    BlockType,
    Direction,
    InventorySlot,
    compute_next_state,
    create_initial_state,
    generate_agent_view,
)
from gridlife.core.types import ActionType


def test_registry_resolves_random_and_import_paths():
    assert resolve_agent_class("random") is RandomAgent
    assert resolve_agent_class("agents.random_agent.RandomAgent") is RandomAgent
    assert resolve_agent_class("agents.scripted_agent:ScriptedAgent") is ScriptedAgent
    assert {"random", "scripted"} <= set(available_agents())
    with pytest.raises(ValueError):
        resolve_agent_class("nonexistent")
    with pytest.raises(TypeError):
        resolve_agent_class("gridlife.world.grid.Grid")


def test_registry_refuses_conflicting_keys():
    class Other(BaseAgent):
        def act(self, view):
            return Action.wait()

    with pytest.raises(ValueError):
        register_agent("random", Other)


def test_spec_roundtrip_and_factory():
    spec = AgentSpec(type="random", agent_id="r1", name="Rex", personality="bold", init_params={"seed": 3})
    assert AgentSpec.from_dict(spec.to_dict()) == spec
    assert spec.identity.id == "r1"
    assert spec.identity.personality == "bold"

    policy = create_agent_from_spec(spec)
    assert isinstance(policy, RandomAgent)
    assert policy.agent_id == "r1"
    assert policy.name == "Rex"


def test_spec_requires_core_fields():
    with pytest.raises(ValueError):
        AgentSpec.from_dict({"type": "random", "name": "No id"})


def test_population_rejects_duplicate_ids():
    specs = [AgentSpec(type="random", agent_id="x", name="A"), AgentSpec(type="random", agent_id="x", name="B")]
    with pytest.raises(ValueError):
        create_population(specs)


def test_random_agent_eats_when_hungry(make_state, agent_factory):
    state = make_state([agent_factory("a", (3, 3), hunger=10, inventory=[InventorySlot(BlockType.BERRY, 1)])])
    policy = RandomAgent("a", seed=0)
    assert policy.act(generate_agent_view(state, "a")).type == ActionType.EAT


def test_random_agent_is_reproducible(make_state, agent_factory):
    state = make_state([agent_factory("a", (3, 3))])
    view = generate_agent_view(state, "a")
    policy = RandomAgent("a", seed=11)
    first = [policy.act(view) for _ in range(20)]
    policy.reset()
    assert [policy.act(view) for _ in range(20)] == first


def test_random_population_runs_many_turns():
    specs = [AgentSpec(type="random", agent_id=f"p{i}", name=f"P{i}", init_params={"seed": i}) for i in range(5)]
    policies = create_population(specs)
    rng = random.Random(2024)
    state = create_initial_state(
        {"grid_width": 12, "grid_height": 12, "berries_per_bush": 5},
        [spec.identity for spec in specs],
        rng,
    )

    for _ in range(60):
        actions = collect_actions(state, policies)
        assert set(actions) <= {agent.id for agent in state.living_agents()}
        state = compute_next_state(state, actions, rng)
        positions = [agent.position for agent in state.living_agents()]
        assert len(positions) == len(set(positions))

    assert state.turn == 60


def test_game_runner_plays_until_limit_or_extinction():
    specs = [AgentSpec(type="random", agent_id=f"r{i}", name=f"R{i}", init_params={"seed": i}) for i in range(3)]
    runner = GameRunner({"grid_width": 8, "grid_height": 8, "berry_bush_density": 0.0}, specs, seed=5)

    result = runner.run_episode(max_turns=80)

    # No food on the map: everyone starves by turn 50
    assert result.survivors == []
    assert result.turns_played == 50
    assert result.state.turn == 50
    assert result.to_dict()["turns_played"] == 50


# ============================================================================
# TEXT COMMANDS
# ============================================================================

def test_parse_action_accepts_every_command_form():
    assert parse_action("move(up)") == Action.move(Direction.UP)
    assert parse_action("ACTION: Gather(LEFT)") == Action.gather(Direction.LEFT)
    assert parse_action("I see food.\nACTION: hit(down)") == Action.hit(Direction.DOWN)
    assert parse_action("build(right, stone)") == Action.build(Direction.RIGHT, BlockType.STONE)
    assert parse_action('speak("hello there")') == Action.speak("hello there")
    assert parse_action('think("stay safe")') == Action.think("stay safe")
    assert parse_action("wait") == Action.wait()
    assert parse_action("EAT") == Action.eat()
    assert parse_action("I'll just wait here") == Action.wait()


def test_parse_action_rejects_unknown_text():
    assert parse_action("dance(up)") is None
    assert parse_action("move(north)") is None
    assert parse_action("build(up, lava)") is None


def test_scripted_agent_plays_commands_then_waits(make_state, agent_factory):
    state = make_state([agent_factory("s", (2, 2))])
    view = generate_agent_view(state, "s")
    policy = create_agent_from_spec(
        AgentSpec(type="scripted", agent_id="s", name="S", init_params={"commands": ["move(up)", "gibberish", "eat"]})
    )

    assert isinstance(policy, ScriptedAgent)
    kinds = [policy.act(view).type for _ in range(4)]
    assert kinds == [ActionType.MOVE, ActionType.WAIT, ActionType.EAT, ActionType.WAIT]
    policy.reset()
    assert policy.act(view).type == ActionType.MOVE
