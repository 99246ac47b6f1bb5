"""
Shared pieces for the per-category resolvers.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random
from typing import TYPE_CHECKING, Any, Dict, List, Sequence, Tuple

from ..core.actions import Action, ActionOutcome
from ..world.geometry import Position, target_position

if TYPE_CHECKING:
    from ..world.agent import Agent

# An already-validated (agent, action) pair
Submission = Tuple["Agent", Action]


@dataclass
class PhaseResult:
    """
    Result of resolving one category of actions.

    Attributes:
        outcomes: One outcome per submission handled in this phase
        logs: Human-readable lines in execution order
    """
    outcomes: List[ActionOutcome] = field(default_factory=list)
    logs: List[str] = field(default_factory=list)

    def succeed(self, agent: Agent, action: Action, message: str) -> None:
        self.outcomes.append(ActionOutcome(agent.id, action, True, message))
        self.logs.append(message)

    def fail(self, agent: Agent, action: Action, message: str) -> None:
        self.outcomes.append(ActionOutcome(agent.id, action, False, message))
        self.logs.append(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
            "logs": self.logs,
        }


def group_by_target(submissions: Sequence[Submission]) -> Dict[Position, List[Submission]]:
    """
    Group submissions by the cell their direction points at.

    Dead agents are skipped. Groups and their members keep submission order.
    """
    groups: Dict[Position, List[Submission]] = {}
    for agent, action in submissions:
        if not agent.alive:
            continue
        target = target_position(agent.position, action.direction)
        groups.setdefault(target, []).append((agent, action))
    return groups


def pick_winner(contenders: List[Submission], rng: random.Random) -> Submission:
    """Uniformly random winner of a contested cell; no draw when uncontested."""
    if len(contenders) == 1:
        return contenders[0]
    return rng.choice(contenders)
