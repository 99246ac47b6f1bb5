"""
TurnEngine - the per-turn transition function.

This is the primary API for advancing the simulation:

    from gridlife import create_initial_state, compute_next_state, generate_agent_view

    state = create_initial_state(config, identities, rng=random.Random(7))
    while any_alive(state):
        actions = {agent_id: policy(generate_agent_view(state, agent_id)) ...}
        state = compute_next_state(state, actions, rng=rng)

Turn processing order:
1. Hunger depletion
2. Death check (starvation)
3. Re-validation of every submitted action against the post-depletion state
4. Movement (random winner per contested cell)
5. Gather (random winner per contested cell)
6. Build (random winner per contested cell)
7. Speak
8. Hit (with looting of killed agents)
9. Eat
10. Think (no effect)
11. Message pruning
12. Turn counter + 1

The input state is never modified: the engine works on a clone.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from infra.logger import get_logger

from .core.actions import Action, ActionOutcome
from .core.types import ActionType
from .core.validation import validate_action
from .mechanics import (
    BuildResolver,
    CombatResolver,
    GatherResolver,
    MetabolismSystem,
    MovementResolver,
    PhaseResult,
    SpeechSystem,
    Submission,
)
from .world.state import GameState

log = get_logger(__name__)


@dataclass
class TurnResult:
    """
    Everything produced by one turn.

    Attributes:
        state: The new GameState (turn = previous turn + 1)
        outcomes: One entry per submitted action, valid or not
        logs: Human-readable lines in execution order
    """
    state: GameState
    outcomes: List[ActionOutcome] = field(default_factory=list)
    logs: List[str] = field(default_factory=list)

    def outcome_for(self, agent_id: str) -> Optional[ActionOutcome]:
        for outcome in self.outcomes:
            if outcome.agent_id == agent_id:
                return outcome
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": self.state.to_dict(),
            "outcomes": [outcome.to_dict() for outcome in self.outcomes],
            "logs": self.logs,
        }


class TurnEngine:
    """
    Orchestrates the stateless resolvers to turn one GameState into the next.

    The engine holds no state between calls; one instance can serve any
    number of independent simulations.
    """

    def __init__(self):
        # Mechanics modules (stateless, can be reused)
        self._metabolism = MetabolismSystem()
        self._movement = MovementResolver()
        self._gathering = GatherResolver()
        self._building = BuildResolver()
        self._speech = SpeechSystem()
        self._combat = CombatResolver()

    def step(
        self,
        state: GameState,
        actions: Mapping[str, Action],
        rng: Optional[random.Random] = None,
    ) -> TurnResult:
        """
        Execute one turn of the simulation.

        Args:
            state: Current state (not modified)
            actions: Map of agent_id -> Action; agents without an entry do nothing
            rng: Source of randomness for tie-breaks (fresh unseeded one if omitted)

        Returns:
            TurnResult with the new state, per-action outcomes and logs
        """
        rng = rng or random.Random()
        world = state.clone()
        next_turn = state.turn + 1
        logs: List[str] = []

        logs.extend(self._metabolism.deplete(world))

        rejected, valid = self._filter_valid(world, actions)
        by_type: Dict[ActionType, List[Submission]] = {kind: [] for kind in ActionType}
        for agent, action in valid:
            by_type[action.type].append((agent, action))

        phases: List[PhaseResult] = [
            rejected,
            self._movement.resolve(world, by_type[ActionType.MOVE], rng),
            self._gathering.resolve(world, by_type[ActionType.GATHER], rng),
            self._building.resolve(world, by_type[ActionType.BUILD], rng),
            self._speech.resolve(world, by_type[ActionType.SPEAK], next_turn),
            self._combat.resolve(world, by_type[ActionType.HIT]),
            self._metabolism.resolve_eating(world, by_type[ActionType.EAT]),
            self._passive(by_type[ActionType.WAIT], by_type[ActionType.THINK]),
        ]

        self._speech.prune(world, next_turn)
        world.turn = next_turn

        outcomes: List[ActionOutcome] = []
        for phase in phases:
            outcomes.extend(phase.outcomes)
            logs.extend(phase.logs)

        applied = sum(1 for outcome in outcomes if outcome.success)
        alive = sum(1 for _ in world.living_agents())
        log.info(
            "Turn %d resolved: %d/%d action(s) applied, %d agent(s) alive",
            next_turn, applied, len(outcomes), alive,
        )
        return TurnResult(state=world, outcomes=outcomes, logs=logs)

    def _filter_valid(
        self,
        world: GameState,
        actions: Mapping[str, Action],
    ) -> Tuple[PhaseResult, List[Submission]]:
        """
        Re-validate every submitted action against the working state.

        Invalid actions are recorded as failed outcomes and dropped.
        """
        rejected = PhaseResult()
        valid: List[Submission] = []

        for agent_id, action in actions.items():
            if not isinstance(action, Action):
                rejected.logs.append(f"Invalid action for agent {agent_id}; ignoring")
                log.debug("Ignoring non-Action value for agent %s: %r", agent_id, action)
                continue

            validation = validate_action(world, agent_id, action)
            if not validation.valid:
                rejected.outcomes.append(ActionOutcome(agent_id, action, False, validation.reason))
                rejected.logs.append(f"{agent_id}: {action} rejected ({validation.reason})")
                log.debug("Dropping %s from %s: %s", action, agent_id, validation.code)
                continue

            valid.append((world.agents[agent_id], action))

        return rejected, valid

    def _passive(self, waits: List[Submission], thoughts: List[Submission]) -> PhaseResult:
        result = PhaseResult()
        for agent, action in waits:
            result.succeed(agent, action, f"{agent.label()} waits")
        for agent, action in thoughts:
            result.succeed(agent, action, f"{agent.label()} thinks")
        return result


def compute_next_state(
    state: GameState,
    actions: Mapping[str, Action],
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Advance `state` by one turn.

    Args:
        state: Current state (not modified)
        actions: Map of agent_id -> Action
        rng: Injectable random source for conflict tie-breaks

    Returns:
        The next GameState
    """
    return TurnEngine().step(state, actions, rng).state


def record_decisions(state: GameState, actions: Mapping[str, Action]) -> GameState:
    """
    Copy of `state` whose agents remember what they just decided.

    Sets `last_action` for every agent with a submitted action and
    `last_thought` for THINK actions. Observers use these fields; the
    engine itself never reads them.
    """
    annotated = state.clone()
    for agent_id, action in actions.items():
        agent = annotated.get_agent(agent_id)
        if agent is None:
            continue
        agent.last_action = action
        if action.type == ActionType.THINK:
            agent.last_thought = action.thought
    return annotated
