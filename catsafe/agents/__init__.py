"""
LLM agents for Cat Safe plant analysis.

This package contains the coordinator that routes a plant photo and the two
specialists that produce the structured safety verdict.
"""

from catsafe.agents.base import AgentError, AgentOutputError, AgentTimeoutError
from catsafe.agents.coordinator import CoordinatorAgent
from catsafe.agents.specialists import (
    SpecialistAgent,
    create_harmful_agent,
    create_poisonous_agent,
)

__all__ = [
    "AgentError",
    "AgentOutputError",
    "AgentTimeoutError",
    "CoordinatorAgent",
    "SpecialistAgent",
    "create_harmful_agent",
    "create_poisonous_agent",
]
