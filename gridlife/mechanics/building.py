"""
BuildResolver - placing blocks from the inventory onto adjacent cells.
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING, Sequence

from ..world.inventory import remove_one
from ..world.rules import can_build_on
from .resolution import PhaseResult, Submission, group_by_target, pick_winner

if TYPE_CHECKING:
    from ..world.state import GameState


class BuildResolver:
    """
    Stateless resolver for build actions.

    One random builder per target cell spends one unit of the named block and
    places it. Losers keep their inventory untouched.
    """

    def resolve(
        self,
        state: GameState,
        submissions: Sequence[Submission],
        rng: random.Random,
    ) -> PhaseResult:
        result = PhaseResult()

        for target, contenders in group_by_target(submissions).items():
            winner, winner_action = pick_winner(contenders, rng)
            for agent, action in contenders:
                if agent is not winner:
                    result.fail(agent, action, f"{agent.label()} lost {tuple(target)} to {winner.label()}")

            cell = state.grid.cell_at(target)
            block = winner_action.block
            if cell is None or not can_build_on(cell):
                result.fail(winner, winner_action, f"{winner.label()} cannot build at {tuple(target)}")
                continue
            if not remove_one(winner.inventory, block):
                result.fail(winner, winner_action, f"{winner.label()} has no {block.value} left")
                continue

            cell.block = block
            cell.berries_remaining = None
            result.succeed(winner, winner_action, f"{winner.label()} builds {block.value} at {tuple(target)}")

        return result
