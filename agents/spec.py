from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from gridlife.world.agent import AgentIdentity


@dataclass
class AgentSpec:
    """
    Serializable description of one simulated agent and the policy driving it.

    Intended for configuration files so that a population can be set up
    from JSON: the identity goes to create_initial_state(), the policy is
    built by create_agent_from_spec().
    """
    type: str
    agent_id: str
    name: str
    personality: Optional[str] = None
    init_params: Dict[str, Any] = field(default_factory=dict)

    @property
    def identity(self) -> AgentIdentity:
        """Identity to place in a new world."""
        return AgentIdentity(id=self.agent_id, name=self.name, personality=self.personality)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "type": self.type,
            "agent_id": self.agent_id,
            "name": self.name,
            "personality": self.personality,
            "init_params": self.init_params,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AgentSpec":
        """Construct from a dict (e.g., loaded from JSON)."""
        for key in ("type", "agent_id", "name"):
            if data.get(key) is None:
                raise ValueError(f"AgentSpec requires '{key}'")
        return cls(
            type=data["type"],
            agent_id=data["agent_id"],
            name=data["name"],
            personality=data.get("personality"),
            init_params=data.get("init_params", {}) or {},
        )
