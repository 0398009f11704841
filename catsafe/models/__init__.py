"""
Pydantic data models for the Cat Safe system.
"""

from catsafe.models.results import (
    AgentType,
    AnalysisResult,
    HarmfulResult,
    PoisonousResult,
    RESULT_SCHEMAS,
    parse_analysis_result,
)
from catsafe.models.routing import RoutingDecision

__all__ = [
    "AgentType",
    "AnalysisResult",
    "HarmfulResult",
    "PoisonousResult",
    "RESULT_SCHEMAS",
    "RoutingDecision",
    "parse_analysis_result",
]
