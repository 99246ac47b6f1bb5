"""
Action definitions and utilities.

Actions represent what an agent wants to do this turn. This module provides:
- Action dataclass (a tagged union over the eight action kinds)
- Action factory methods
- Action serialization
- ActionOutcome, the per-action record produced by the turn engine
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Any, Optional
import json

from .types import ActionType, BlockType, Direction

# Which parameters each action kind carries, and their expected types
_PARAM_SPEC: Dict[ActionType, Dict[str, type]] = {
    ActionType.MOVE: {"direction": Direction},
    ActionType.WAIT: {},
    ActionType.GATHER: {"direction": Direction},
    ActionType.BUILD: {"direction": Direction, "block": BlockType},
    ActionType.SPEAK: {"message": str},
    ActionType.HIT: {"direction": Direction},
    ActionType.EAT: {},
    ActionType.THINK: {"thought": str},
}


@dataclass
class Action:
    """
    An action that can be performed by an agent.

    Actions consist of a type and the parameters that type requires.
    The parameters are validated based on the action type.

    Use static factory methods for convenient construction:
        - Action.move(direction)
        - Action.wait()
        - Action.gather(direction)
        - Action.build(direction, block)
        - Action.speak(message)
        - Action.hit(direction)
        - Action.eat()
        - Action.think(thought)

    Or construct directly:
        - Action(ActionType.WAIT)
        - Action(ActionType.MOVE, {"direction": Direction.UP})
    """

    type: ActionType
    params: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate action parameters after initialization."""
        self._validate()

    def _validate(self) -> None:
        """
        Validate that parameters match the action type.

        Raises:
            ValueError: If parameters are invalid for the action type
        """
        if not isinstance(self.type, ActionType):
            raise ValueError(f"Action type must be an ActionType, got {type(self.type)}")

        expected = _PARAM_SPEC[self.type]
        extra = set(self.params) - set(expected)
        if extra:
            raise ValueError(f"{self.type.name} action got unexpected parameters: {sorted(extra)}")

        for name, kind in expected.items():
            if name not in self.params:
                raise ValueError(f"{self.type.name} action requires '{name}' parameter")
            if not isinstance(self.params[name], kind):
                raise ValueError(
                    f"'{name}' must be a {kind.__name__}, got {type(self.params[name]).__name__}"
                )

    # Parameter accessors. Each returns None when the kind has no such parameter.
    @property
    def direction(self) -> Optional[Direction]:
        return self.params.get("direction")

    @property
    def block(self) -> Optional[BlockType]:
        return self.params.get("block")

    @property
    def message(self) -> Optional[str]:
        return self.params.get("message")

    @property
    def thought(self) -> Optional[str]:
        return self.params.get("thought")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert action to a flat JSON-serializable dictionary.

        Example:
            {"type": "build", "direction": "up", "block": "stone"}
        """
        data: Dict[str, Any] = {"type": self.type.value}
        for key, value in self.params.items():
            if isinstance(value, (Direction, BlockType)):
                data[key] = value.value
            else:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Action:
        """
        Create an action from a flat dictionary.

        Raises:
            ValueError: If dictionary format is invalid
        """
        if "type" not in data:
            raise ValueError("Action dictionary must contain 'type'")

        try:
            action_type = ActionType(str(data["type"]).lower())
        except ValueError:
            raise ValueError(f"Unknown action type: {data['type']!r}") from None

        params: Dict[str, Any] = {}
        for name, kind in _PARAM_SPEC[action_type].items():
            if name not in data:
                continue
            value = data[name]
            if kind in (Direction, BlockType) and isinstance(value, str):
                try:
                    value = kind(value.lower())
                except ValueError:
                    raise ValueError(f"Invalid {name}: {value!r}") from None
            params[name] = value

        return cls(type=action_type, params=params)

    def to_json(self) -> str:
        """Convert action to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> Action:
        """Create action from JSON string."""
        return cls.from_dict(json.loads(json_str))

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.type in (ActionType.MOVE, ActionType.GATHER, ActionType.HIT):
            return f"{self.type.name} {self.direction.name}"
        if self.type == ActionType.BUILD:
            return f"BUILD {self.block.value} {self.direction.name}"
        if self.type == ActionType.SPEAK:
            return f'SPEAK "{self.message}"'
        if self.type == ActionType.THINK:
            return f'THINK "{self.thought}"'
        return self.type.name

    # FACTORY METHODS
    @staticmethod
    def move(direction: Direction) -> Action:
        """Create a MOVE action (step one cell in `direction`)."""
        return Action(ActionType.MOVE, {"direction": direction})

    @staticmethod
    def wait() -> Action:
        """Create a WAIT action."""
        return Action(ActionType.WAIT)

    @staticmethod
    def gather(direction: Direction) -> Action:
        """Create a GATHER action targeting the adjacent cell in `direction`."""
        return Action(ActionType.GATHER, {"direction": direction})

    @staticmethod
    def build(direction: Direction, block: BlockType) -> Action:
        """
        Create a BUILD action.

        Args:
            direction: Side of the agent to build on
            block: Block kind to take from the inventory and place
        """
        return Action(ActionType.BUILD, {"direction": direction, "block": block})

    @staticmethod
    def speak(message: str) -> Action:
        """Create a SPEAK action; nearby agents hear `message`."""
        return Action(ActionType.SPEAK, {"message": message})

    @staticmethod
    def hit(direction: Direction) -> Action:
        """Create a HIT action against whoever stands in `direction`."""
        return Action(ActionType.HIT, {"direction": direction})

    @staticmethod
    def eat() -> Action:
        """Create an EAT action."""
        return Action(ActionType.EAT)

    @staticmethod
    def think(thought: str) -> Action:
        """Create a THINK action. Has no effect on the world."""
        return Action(ActionType.THINK, {"thought": thought})


@dataclass
class ActionOutcome:
    """
    Result of resolving one submitted action during a turn.

    Attributes:
        agent_id: Agent that submitted the action
        action: The submitted action
        success: Whether the action took effect
        message: Human-readable explanation of what happened
    """
    agent_id: str
    action: Action
    success: bool
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize outcome to a plain dict."""
        return {
            "agent_id": self.agent_id,
            "action": self.action.to_dict(),
            "success": self.success,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ActionOutcome:
        """Deserialize an outcome from a dict."""
        return cls(
            agent_id=data["agent_id"],
            action=Action.from_dict(data["action"]),
            success=data["success"],
            message=data.get("message", ""),
        )
