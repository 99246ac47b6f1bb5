"""Tests for generate_agent_view - fog of war, relative positions, hearing."""

import pytest

from gridlife import BlockType, GameState, InventorySlot, Message, Position, generate_agent_view


def test_view_is_limited_to_vision_radius(make_state, agent_factory):
    state = make_state(
        [agent_factory("me", (5, 5)), agent_factory("near", (5, 3)), agent_factory("far", (9, 9))],
        blocks={(5, 4): BlockType.STONE, (0, 0): BlockType.WOOD},
        vision_radius=2,
    )

    view = generate_agent_view(state, "me")

    # 2*r*(r+1) + 1 cells in a diamond of radius r
    assert len(view.visible_cells) == 13
    assert all(abs(c.relative_position.x) + abs(c.relative_position.y) <= 2 for c in view.visible_cells)
    assert view.cell_at_relative(0, -1).block == BlockType.STONE
    assert view.cell_at_relative(0, -1).absolute_position == (5, 4)
    assert [agent.id for agent in view.visible_agents] == ["near"]
    assert view.visible_agents[0].relative_position == (0, -2)


def test_view_clips_at_grid_edge(make_state, agent_factory):
    state = make_state([agent_factory("me", (0, 0))], vision_radius=1)
    view = generate_agent_view(state, "me")
    assert {tuple(c.relative_position) for c in view.visible_cells} == {(0, 0), (1, 0), (0, 1)}


def test_self_view_reports_own_status(make_state, agent_factory):
    state = make_state([agent_factory("me", (2, 3), hunger=40)], turn=6)

    view = generate_agent_view(state, "me")

    assert view.turn == 6
    assert view.self_state.position == (2, 3)
    assert view.self_state.hunger == 40
    assert view.self_state.max_hunger == state.config.max_hunger
    assert view.self_state.inventory_capacity == state.config.inventory_capacity
    assert view.to_dict()["self"]["id"] == "me"


def test_dead_agents_are_invisible(make_state, agent_factory):
    state = make_state([agent_factory("me", (5, 5)), agent_factory("corpse", (5, 6), hunger=0, alive=False)])
    assert generate_agent_view(state, "me").visible_agents == []


def test_hearing_window_and_range(make_state, agent_factory):
    state = make_state([agent_factory("me", (5, 5))], turn=10, vision_radius=3)
    state.messages = [
        Message(turn=4, agent_id="x", agent_name="X", content="too old", position=Position(5, 4)),
        Message(turn=5, agent_id="x", agent_name="X", content="just in time", position=Position(5, 4)),
        Message(turn=9, agent_id="x", agent_name="X", content="too far", position=Position(9, 9)),
        Message(turn=9, agent_id="me", agent_name="Me", content="my own", position=Position(5, 5)),
        Message(turn=10, agent_id="y", agent_name="Y", content="east", position=Position(7, 5)),
    ]

    heard = generate_agent_view(state, "me").recent_messages

    assert [m.content for m in heard] == ["just in time", "east"]
    assert heard[0].relative_direction == "North"
    assert heard[1].relative_direction == "East"
    assert heard[1].agent_name == "Y"


def test_view_does_not_alias_state(make_state, agent_factory):
    state = make_state([agent_factory("me", (1, 1), inventory=[InventorySlot(BlockType.STONE, 2)])])
    view = generate_agent_view(state, "me")
    view.self_state.inventory[0].count = 9
    assert state.agents["me"].inventory[0].count == 2


def test_unknown_agent_raises(make_state):
    state: GameState = make_state([])
    with pytest.raises(KeyError):
        generate_agent_view(state, "nobody")
