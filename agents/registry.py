"""
Policy registry.

Policies are looked up by a short key ("random", "scripted") so that
AgentSpec files stay readable; anything unregistered can still be named by
import path ("pkg.module.Class" or "pkg.module:Class").
"""

from __future__ import annotations

import importlib
from typing import Callable, Dict, List, Type, TypeVar

from .base_agent import BaseAgent

AGENT_REGISTRY: Dict[str, Type[BaseAgent]] = {}
PolicyClass = TypeVar("PolicyClass", bound=Type[BaseAgent])


def register_agent(key: str, cls: PolicyClass | None = None) -> PolicyClass | Callable[[PolicyClass], PolicyClass]:
    """
    Register a policy class under `key`.

    Works as `@register_agent("key")` above a class or as
    `register_agent("key", SomePolicy)`. Re-registering the same class is a
    no-op; claiming a key held by another class raises ValueError.
    """
    def decorator(policy_cls: PolicyClass) -> PolicyClass:
        current = AGENT_REGISTRY.get(key)
        if current is not None and current is not policy_cls:
            raise ValueError(f"Policy key '{key}' already belongs to {current.__name__}")
        AGENT_REGISTRY[key] = policy_cls
        return policy_cls

    return decorator if cls is None else decorator(cls)


def available_agents() -> List[str]:
    """Registered policy keys, sorted."""
    return sorted(AGENT_REGISTRY)


def resolve_agent_class(type_ref: str) -> Type[BaseAgent]:
    """
    Map a registry key or import path to a BaseAgent subclass.

    Raises:
        ValueError: Unknown key that is not an import path
        TypeError: The path names something that is not a BaseAgent subclass
    """
    if type_ref in AGENT_REGISTRY:
        return AGENT_REGISTRY[type_ref]

    separator = ":" if ":" in type_ref else "."
    if separator not in type_ref:
        raise ValueError(
            f"Unknown policy '{type_ref}'; registered: {', '.join(available_agents()) or 'none'}"
        )

    module_name, attr = type_ref.rsplit(separator, 1)
    target = getattr(importlib.import_module(module_name), attr)
    if not (isinstance(target, type) and issubclass(target, BaseAgent)):
        raise TypeError(f"{type_ref} does not name a BaseAgent subclass")
    return target
