"""Schema definitions for the coordinator's routing decision."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from catsafe.models.results import AgentType


class RoutingDecision(BaseModel):
    """Which specialist should handle the plant image."""

    route: AgentType = Field(
        ...,
        description="HARMFUL for plants believed safe or mildly irritating, POISONOUS for toxic plants",
    )
    is_certain: bool = Field(
        ..., description="False when the plant or its toxicity cannot be determined with confidence"
    )
    reasoning: str = Field(..., description="One or two sentences explaining the choice")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


__all__ = ["RoutingDecision"]
