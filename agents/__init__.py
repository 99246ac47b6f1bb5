"""
Decision-making policies for gridlife agents.

This module provides:
- BaseAgent: Abstract interface for all policies
- RandomAgent: Simple random policy for testing
- ScriptedAgent / parse_action: Text-command driven play
- AgentSpec / create_agent_from_spec: Config-driven construction
"""

from .base_agent import BaseAgent, collect_actions
from .registry import AGENT_REGISTRY, available_agents, register_agent, resolve_agent_class
from .random_agent import RandomAgent
from .scripted_agent import ScriptedAgent
from .parser import parse_action
from .spec import AgentSpec
from .factory import create_agent_from_spec, create_population

__all__ = [
    "BaseAgent",
    "collect_actions",
    "AGENT_REGISTRY",
    "available_agents",
    "register_agent",
    "resolve_agent_class",
    "RandomAgent",
    "ScriptedAgent",
    "parse_action",
    "AgentSpec",
    "create_agent_from_spec",
    "create_population",
]
