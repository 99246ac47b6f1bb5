"""
GatherResolver - picking up resources from adjacent cells.
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING, Sequence

from infra.logger import get_logger

from ..world.inventory import add_items
from ..world.rules import block_persists_after_gather, gather_yield, is_gatherable
from .resolution import PhaseResult, Submission, group_by_target, pick_winner

if TYPE_CHECKING:
    from ..world.state import GameState

log = get_logger(__name__)


class GatherResolver:
    """
    Stateless resolver for gather actions.

    One random gatherer per target cell receives one unit of the block's
    yield. Stone and wood disappear when gathered. A berry bush stays; if it
    tracks remaining berries it is removed once they run out.
    """

    def resolve(
        self,
        state: GameState,
        submissions: Sequence[Submission],
        rng: random.Random,
    ) -> PhaseResult:
        result = PhaseResult()
        capacity = state.config.inventory_capacity

        for target, contenders in group_by_target(submissions).items():
            cell = state.grid.cell_at(target)
            if cell is None or not is_gatherable(cell.block):
                for agent, action in contenders:
                    result.fail(agent, action, f"{agent.label()} finds nothing to gather at {tuple(target)}")
                continue

            winner, winner_action = pick_winner(contenders, rng)
            for agent, action in contenders:
                if agent is not winner:
                    result.fail(agent, action, f"{agent.label()} lost {tuple(target)} to {winner.label()}")

            source = cell.block
            item = gather_yield(source)
            if add_items(winner.inventory, item, 1, capacity) == 0:
                result.fail(winner, winner_action, f"{winner.label()} has no room for {item.value}")
                continue

            if not block_persists_after_gather(source):
                cell.clear()
            elif cell.berries_remaining is not None:
                cell.berries_remaining -= 1
                if cell.berries_remaining <= 0:
                    cell.clear()
                    log.debug("Berry bush at %s exhausted", target)

            result.succeed(
                winner, winner_action,
                f"{winner.label()} gathers {item.value} from {source.value} at {tuple(target)}",
            )

        return result
