"""
MetabolismSystem - hunger depletion, starvation and eating.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, List, Sequence

from ..world.inventory import first_food, remove_one
from .resolution import PhaseResult, Submission

if TYPE_CHECKING:
    from ..world.state import GameState


class MetabolismSystem:
    """Stateless handler for everything that changes hunger except hits."""

    def deplete(self, state: GameState) -> List[str]:
        """
        Drain hunger from every living agent and mark starved agents dead.

        Returns:
            Log lines, one per agent that starved
        """
        loss = state.config.hunger_depletion_per_turn
        logs = []
        for agent in state.agents.values():
            if agent.alive:
                agent.hunger = max(0, agent.hunger - loss)

        for agent in state.agents.values():
            if agent.alive and agent.hunger <= 0:
                agent.alive = False
                logs.append(f"{agent.label()} starved")
        return logs

    def resolve_eating(self, state: GameState, submissions: Sequence[Submission]) -> PhaseResult:
        """Each living eater consumes one food unit and regains hunger, capped at max."""
        result = PhaseResult()
        config = state.config

        for agent, action in submissions:
            if not agent.alive:
                result.fail(agent, action, f"{agent.label()} cannot eat (dead)")
                continue

            food = first_food(agent.inventory)
            if food is None or not remove_one(agent.inventory, food):
                result.fail(agent, action, f"{agent.label()} has nothing to eat")
                continue

            agent.hunger = min(config.max_hunger, agent.hunger + config.berry_hunger_restore)
            result.succeed(agent, action, f"{agent.label()} eats {food.value} (hunger {agent.hunger})")

        return result
