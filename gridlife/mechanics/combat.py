"""
CombatResolver - Hit action resolution.

This module handles:
- Finding the victim standing in the hit direction (after movement)
- Applying hit damage to the victim's hunger
- Looting and killing victims brought to zero hunger
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

from infra.logger import get_logger

from ..world.geometry import target_position
from ..world.inventory import total_items, transfer_all
from .resolution import PhaseResult, Submission

if TYPE_CHECKING:
    from ..world.state import GameState

log = get_logger(__name__)


class CombatResolver:
    """
    Stateless resolver for hit actions.

    Hits are applied one at a time in submission order, so an agent killed
    by an earlier hit this turn no longer gets to strike.
    """

    def resolve(self, state: GameState, submissions: Sequence[Submission]) -> PhaseResult:
        """
        Resolve all valid hit actions for a turn.

        Args:
            state: Working state (modified in-place)
            submissions: Validated (agent, HIT action) pairs

        Returns:
            PhaseResult with one outcome per submission
        """
        result = PhaseResult()
        damage = state.config.hit_damage
        capacity = state.config.inventory_capacity

        for attacker, action in submissions:
            if not attacker.alive:
                result.fail(attacker, action, f"{attacker.label()} cannot hit (dead)")
                continue

            target = target_position(attacker.position, action.direction)
            victim = state.agent_at(target)
            if victim is None:
                result.fail(attacker, action, f"{attacker.label()} swings at empty {tuple(target)}")
                continue

            victim.hunger = max(0, victim.hunger - damage)
            if victim.hunger > 0:
                result.succeed(
                    attacker, action,
                    f"{attacker.label()} hits {victim.label()} (hunger {victim.hunger})",
                )
                continue

            # Loot before marking the victim dead
            looted = total_items(victim.inventory)
            lost = transfer_all(victim.inventory, attacker.inventory, capacity)
            victim.alive = False
            if lost:
                log.debug("%s could not carry %d looted item(s) from %s", attacker.label(), lost, victim.label())
            result.succeed(
                attacker, action,
                f"{attacker.label()} kills {victim.label()} and loots {looted - lost} item(s)",
            )

        return result
