from __future__ import annotations

from typing import Iterable, List

from .base_agent import BaseAgent
from .registry import resolve_agent_class
from .spec import AgentSpec


def create_agent_from_spec(spec: AgentSpec) -> BaseAgent:
    """Instantiate the policy described by an AgentSpec."""
    cls = resolve_agent_class(spec.type)

    init_kwargs = dict(spec.init_params)
    init_kwargs.setdefault("agent_id", spec.agent_id)
    init_kwargs.setdefault("name", spec.name)

    agent = cls(**init_kwargs)
    if not isinstance(agent, BaseAgent):
        raise TypeError(f"Agent {cls} is not a BaseAgent")
    return agent


def create_population(specs: Iterable[AgentSpec]) -> List[BaseAgent]:
    """Instantiate one policy per spec, rejecting duplicate agent ids."""
    policies: List[BaseAgent] = []
    seen = set()
    for spec in specs:
        if spec.agent_id in seen:
            raise ValueError(f"Duplicate agent id in specs: {spec.agent_id!r}")
        seen.add(spec.agent_id)
        policies.append(create_agent_from_spec(spec))
    return policies
