"""
Mechanics module - Action resolution systems.

This module provides stateless resolvers for game actions:
- MetabolismSystem: Hunger depletion, starvation, eating
- MovementResolver: Resolves movement actions
- GatherResolver: Resolves gather actions
- BuildResolver: Resolves build actions
- SpeechSystem: Appends and prunes messages
- CombatResolver: Resolves hit actions and looting

All resolvers are stateless - they take the working GameState and return
results without modifying their own state.
"""

from .resolution import PhaseResult, Submission, group_by_target, pick_winner
from .metabolism import MetabolismSystem
from .movement import MovementResolver
from .gathering import GatherResolver
from .building import BuildResolver
from .speech import SpeechSystem
from .combat import CombatResolver

__all__ = [
    "PhaseResult",
    "Submission",
    "group_by_target",
    "pick_winner",
    "MetabolismSystem",
    "MovementResolver",
    "GatherResolver",
    "BuildResolver",
    "SpeechSystem",
    "CombatResolver",
]
