"""
Action validation.

This module is the single place that decides whether an action is legal
against a given state. The turn engine re-runs it on its working copy each
turn, and callers may use it as a "can I do this?" pre-check. It never
modifies the state.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from .types import ActionType, ValidationResult
from ..world.geometry import target_position
from ..world.inventory import count_of, first_food, has_room_for
from ..world.rules import (
    can_build_on,
    gather_yield,
    is_gatherable,
    is_placeable,
    is_walkable,
)

if TYPE_CHECKING:
    from ..world.state import GameState
    from ..world.agent import Agent
    from .actions import Action


def validate_action(state: GameState, agent_id: str, action: Action) -> ValidationResult:
    """
    Check whether `agent_id` may perform `action` in `state`.

    Rule violations are reported in the result, never raised.
    """
    agent = state.get_agent(agent_id)
    if agent is None:
        return ValidationResult.fail("AGENT_NOT_FOUND", f"Agent {agent_id} not found")

    if not agent.alive:
        return ValidationResult.fail("AGENT_DEAD", f"{agent.label()} is dead")

    if action.type == ActionType.MOVE:
        return _validate_move(state, agent, action)
    if action.type == ActionType.GATHER:
        return _validate_gather(state, agent, action)
    if action.type == ActionType.BUILD:
        return _validate_build(state, agent, action)
    if action.type == ActionType.SPEAK:
        if not action.message.strip():
            return ValidationResult.fail("EMPTY_MESSAGE", "Message cannot be empty")
        return ValidationResult.success()
    if action.type == ActionType.HIT:
        return _validate_hit(state, agent, action)
    if action.type == ActionType.EAT:
        if first_food(agent.inventory) is None:
            return ValidationResult.fail("NO_FOOD", "No food in inventory")
        return ValidationResult.success()

    # WAIT / THINK
    return ValidationResult.success()


def _validate_move(state: GameState, agent: Agent, action: Action) -> ValidationResult:
    target = target_position(agent.position, action.direction)
    cell = state.grid.cell_at(target)
    if cell is None:
        return ValidationResult.fail("OUT_OF_BOUNDS", "Cannot move off the grid")
    if not is_walkable(cell):
        return ValidationResult.fail("NOT_WALKABLE", "Target cell is not walkable")
    return ValidationResult.success()


def _validate_gather(state: GameState, agent: Agent, action: Action) -> ValidationResult:
    target = target_position(agent.position, action.direction)
    cell = state.grid.cell_at(target)
    if cell is None:
        return ValidationResult.fail("OUT_OF_BOUNDS", "Cannot gather outside the grid")
    if not is_gatherable(cell.block):
        return ValidationResult.fail("NOT_GATHERABLE", "No gatherable resource at target")

    # Same check the resolver applies, so an open stack counts as room
    if not has_room_for(agent.inventory, gather_yield(cell.block), state.config.inventory_capacity):
        return ValidationResult.fail("INVENTORY_FULL", "Inventory is full")
    return ValidationResult.success()


def _validate_build(state: GameState, agent: Agent, action: Action) -> ValidationResult:
    target = target_position(agent.position, action.direction)
    cell = state.grid.cell_at(target)
    if cell is None:
        return ValidationResult.fail("OUT_OF_BOUNDS", "Cannot build outside the grid")
    if not can_build_on(cell):
        return ValidationResult.fail("CANNOT_BUILD_HERE", "Cannot build at target location")
    if not is_placeable(action.block):
        return ValidationResult.fail("NOT_PLACEABLE", f"{action.block.value} cannot be placed")
    if count_of(agent.inventory, action.block) < 1:
        return ValidationResult.fail("MISSING_MATERIAL", f"No {action.block.value} in inventory")
    return ValidationResult.success()


def _validate_hit(state: GameState, agent: Agent, action: Action) -> ValidationResult:
    target = target_position(agent.position, action.direction)
    if not state.grid.in_bounds(target):
        return ValidationResult.fail("OUT_OF_BOUNDS", "Cannot hit outside the grid")
    if not state.is_occupied(target):
        return ValidationResult.fail("NO_TARGET", "No agent at target position")
    return ValidationResult.success()
