"""
Base policy interface for gridlife agents.

A policy controls exactly one simulated agent. Each turn it receives that
agent's AgentView (fog-of-war applied) and returns one Action.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from gridlife.core.actions import Action
from gridlife.world.perception import AgentView, generate_agent_view
from gridlife.world.state import GameState


class BaseAgent(ABC):
    """
    Abstract base class for all decision-making policies.

    Subclasses must implement:
    - act(): Choose an action from the agent's view

    Attributes:
        agent_id: Id of the simulated agent this policy controls
        name: Policy name for logging/identification
    """

    def __init__(self, agent_id: str, name: Optional[str] = None):
        """
        Initialize the policy.

        Args:
            agent_id: Agent this policy controls
            name: Optional name (defaults to class name)
        """
        self.agent_id = agent_id
        self.name = name or self.__class__.__name__

    @abstractmethod
    def act(self, view: AgentView) -> Action:
        """
        Choose this turn's action.

        Args:
            view: What the controlled agent perceives this turn

        Returns:
            One Action. Illegal actions are dropped by the engine, so
            returning Action.wait() is never required for safety.
        """

    def reset(self) -> None:
        """
        Reset policy state between runs.

        Override if the policy keeps memory across turns.
        """

    def __str__(self) -> str:
        return f"{self.name} ({self.agent_id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(agent_id='{self.agent_id}', name='{self.name}')"


def collect_actions(state: GameState, policies: Iterable[BaseAgent]) -> Dict[str, Action]:
    """
    Ask every policy whose agent is alive for this turn's action.

    Returns:
        Map of agent_id -> Action, ready for compute_next_state()
    """
    actions: Dict[str, Action] = {}
    for policy in policies:
        agent = state.get_agent(policy.agent_id)
        if agent is None or not agent.alive:
            continue
        actions[policy.agent_id] = policy.act(generate_agent_view(state, policy.agent_id))
    return actions
