"""Central registry for move-source agents."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, Mapping

if TYPE_CHECKING:
    from .agents.base_agent import BaseAgent


AgentFactory = Callable[..., "BaseAgent"]

_AGENT_REGISTRY: Dict[str, AgentFactory] = {}


def register_agent(agent_id: str, ctor: AgentFactory) -> None:
    """Register an agent constructor."""
    if agent_id in _AGENT_REGISTRY:
        raise ValueError(f"Agent id '{agent_id}' is already registered.")
    _AGENT_REGISTRY[agent_id] = ctor


def check_agent_params(agent_id: str, params: Mapping[str, Any]) -> None:
    """
    Check that ``params`` are accepted by the agent's constructor.

    Raises:
        KeyError: If the agent id is not registered.
        ValueError: If some keys are not constructor parameters.
    """
    ctor = get_agent_entry(agent_id)
    signature = inspect.signature(ctor)
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in signature.parameters.values()):
        return
    unknown = sorted(set(params) - set(signature.parameters))
    if unknown:
        raise ValueError(f"Agent '{agent_id}' does not accept parameters: {', '.join(unknown)}")


def make_agent(agent_id: str, **kwargs: Any) -> "BaseAgent":
    """Instantiate a registered agent, rejecting parameters it does not take."""
    check_agent_params(agent_id, kwargs)
    return get_agent_entry(agent_id)(**kwargs)


def list_agents() -> Iterable[str]:
    """Return iterable of registered agent identifiers."""
    return tuple(_AGENT_REGISTRY.keys())


def get_agent_entry(agent_id: str) -> AgentFactory:
    """Retrieve the raw constructor for an agent."""
    if agent_id not in _AGENT_REGISTRY:
        raise KeyError(f"Agent id '{agent_id}' is not registered.")
    return _AGENT_REGISTRY[agent_id]
