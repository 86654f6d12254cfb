"""Agents for Guessr."""

from .geolocation_agent import AgentBusyError, GeolocationAgent
from .schemas import AgentResult

__all__ = [
    "AgentBusyError",
    "AgentResult",
    "GeolocationAgent",
]
