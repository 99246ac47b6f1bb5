"""
MovementResolver - Movement action resolution.

This module handles:
- Grouping move proposals by target cell
- Random arbitration when several agents want the same cell
- Collision checks against agents that stay put
- Applying position changes
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING, Dict, Sequence, Tuple

from infra.logger import get_logger

from .resolution import PhaseResult, Submission, group_by_target, pick_winner

if TYPE_CHECKING:
    from ..world.state import GameState
    from ..world.geometry import Position

log = get_logger(__name__)


class MovementResolver:
    """
    Stateless resolver for movement actions.

    Every move is one cell in a cardinal direction. Per target cell only one
    proposer (chosen at random) may try to enter it. A winner enters only
    when no living agent is standing there at that moment; resolution repeats
    until no further winner can advance, so an agent can follow another one
    that left its cell this turn. Agents in a closed cycle (A and B trying to
    swap, for instance) all stay where they are.

    Post-condition: no two living agents share a cell.
    """

    def resolve(
        self,
        state: GameState,
        submissions: Sequence[Submission],
        rng: random.Random,
    ) -> PhaseResult:
        """
        Resolve all valid move actions for a turn.

        Args:
            state: Working state (modified in-place)
            submissions: Validated (agent, MOVE action) pairs
            rng: Source of randomness for tie-breaks

        Returns:
            PhaseResult with one outcome per submission
        """
        result = PhaseResult()
        pending: Dict[str, Tuple[Submission, Position]] = {}

        for target, contenders in group_by_target(submissions).items():
            winner = pick_winner(contenders, rng)
            winner_agent = winner[0]
            pending[winner_agent.id] = (winner, target)

            for agent, action in contenders:
                if agent is not winner_agent:
                    result.fail(
                        agent, action,
                        f"{agent.label()} lost the race to {tuple(target)} to {winner_agent.label()}",
                    )
            if len(contenders) > 1:
                log.debug("Move contest at %s won by %s", target, winner_agent.label())

        progress = True
        while pending and progress:
            progress = False
            for agent_id, ((agent, action), target) in list(pending.items()):
                if state.is_occupied(target):
                    continue
                agent.position = target
                del pending[agent_id]
                progress = True
                result.succeed(agent, action, f"{agent.label()} moves {action.direction.name} to {tuple(target)}")

        for (agent, action), target in pending.values():
            occupant = state.agent_at(target)
            blocker = occupant.label() if occupant else "another agent"
            result.fail(agent, action, f"{agent.label()} blocked by {blocker} at {tuple(target)}")

        return result
