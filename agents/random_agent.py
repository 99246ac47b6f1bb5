"""
Random policy for testing and baseline comparison.

Makes weighted random decisions without any planning. Useful for exercising
the engine and for smoke-testing long runs.
"""

import random
from typing import Any, Optional

from gridlife.core.actions import Action
from gridlife.core.types import Direction
from gridlife.world.inventory import first_food
from gridlife.world.perception import AgentView
from .base_agent import BaseAgent
from .registry import register_agent

CANNED_MESSAGES = [
    "Hello!",
    "Anyone there?",
    "Looking for food...",
    "Nice weather today!",
    "Let's cooperate!",
]

HUNGRY_THRESHOLD = 30


@register_agent("random")
class RandomAgent(BaseAgent):
    """
    Policy that takes random actions.

    Decision process:
    - Eat whenever hunger is below 30 and food is held.
    - Otherwise roll: 40% move, 10% speak, 15% gather, 10% build a held
      item (when holding anything), else wait.
    """

    def __init__(
        self,
        agent_id: str,
        name: Optional[str] = None,
        seed: Optional[int] = None,
        **_: Any,
    ):
        """
        Initialize random policy.

        Args:
            agent_id: Agent to control
            name: Policy name (default: "RandomAgent")
            seed: Random seed for reproducibility (None = random)
        """
        super().__init__(agent_id, name)
        self._seed = seed
        self.rng = random.Random(seed)

    def act(self, view: AgentView) -> Action:
        me = view.self_state
        if me.hunger < HUNGRY_THRESHOLD and first_food(me.inventory) is not None:
            return Action.eat()

        directions = list(Direction)
        roll = self.rng.random()

        if roll < 0.4:
            return Action.move(self.rng.choice(directions))
        if roll < 0.5:
            return Action.speak(self.rng.choice(CANNED_MESSAGES))
        if roll < 0.65:
            return Action.gather(self.rng.choice(directions))
        if roll < 0.75 and me.inventory:
            slot = self.rng.choice(me.inventory)
            return Action.build(self.rng.choice(directions), slot.kind)
        return Action.wait()

    def reset(self) -> None:
        self.rng = random.Random(self._seed)
