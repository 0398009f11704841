"""
Analysis result models for the Cat Safe system.

This module contains the two structured result shapes a specialist agent can
produce, and the discriminated union the API returns. Field names are
snake_case in Python and camelCase on the wire.
"""

from enum import Enum
from typing import Annotated, Any, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class AgentType(str, Enum):
    """Discriminator tag carried by every analysis result."""

    HARMFUL = "HARMFUL"
    POISONOUS = "POISONOUS"


class ResultModel(BaseModel):
    """Base for all result records: camelCase aliases, strict types, no extra keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        strict=True,
    )


# =============================================================================
# Harmful result
# =============================================================================


class ChemicalEntry(ResultModel):
    """A chemical found in the plant."""
    name: str = Field(..., description="Chemical name")
    description: str = Field(..., description="What the chemical is")
    toxicity: bool = Field(..., description="Whether the chemical is toxic to cats")
    toxicity_level: float = Field(..., ge=0, le=10, description="Toxicity level from 0 (none) to 10 (lethal)")
    toxicity_description: str = Field(..., description="How the chemical affects cats")
    toxicity_symptoms: List[str] = Field(..., description="Symptoms of exposure, in order of appearance")
    toxicity_treatment: str = Field(..., description="Recommended treatment")


class HarmfulResult(ResultModel):
    """Result of the harmful plant identifier."""
    is_harmful: bool = Field(..., description="Whether the plant is harmful to cats")
    plant_name: str = Field(..., description="Common name")
    plant_scientific_name: str = Field(..., description="Scientific name")
    chemical_composition: str = Field(..., description="Summary of the chemical composition")
    chemical_list: List[ChemicalEntry] = Field(..., description="Chemicals found in the plant")
    toxicity_threshold: str = Field(..., description="Amount of plant material that causes harm")
    agent_type: Literal["HARMFUL"] = Field(..., description='Always "HARMFUL"')


# =============================================================================
# Poisonous result
# =============================================================================


class ToxicCompound(ResultModel):
    """A toxic compound and how it acts."""
    name: str = Field(..., description="Compound name")
    chemical_classification: str = Field(
        ..., description="Chemical class (alkaloids, glycosides, saponins, etc.)"
    )
    mechanism_of_action: str = Field(..., description="How the compound causes damage")
    target_organs: List[str] = Field(..., description="Organs affected")
    toxicity_description: str = Field(..., description="Description of the toxic effect")


class ClinicalSigns(ResultModel):
    early_symptoms: List[str] = Field(..., description="First signs of poisoning")
    progressive_symptoms: List[str] = Field(..., description="Signs as poisoning progresses")
    onset_timeline: str = Field(..., description="When symptoms appear after exposure")


class EmergencyResponse(ResultModel):
    first_aid_steps: List[str] = Field(..., description="Ordered first-aid steps")
    when_to_seek_help: str = Field(..., description="When to go to a veterinarian")
    vet_information: List[str] = Field(..., description="Information to give the veterinarian")


class VetClinic(ResultModel):
    """A veterinary clinic near the supplied coordinates."""
    name: str = Field(..., description="Clinic name")
    address: str = Field(..., description="Street address")
    phone_number: str = Field(..., description="Phone number")
    distance: str = Field(..., description="Distance from the plant location")
    is_emergency_24h: bool = Field(
        ..., alias="isEmergency24h", description="Whether the clinic runs a 24-hour emergency service"
    )


class LocationCoordinates(ResultModel):
    latitude: float = Field(..., description="Latitude as supplied in the request")
    longitude: float = Field(..., description="Longitude as supplied in the request")


class PoisonousResult(ResultModel):
    """Result of the poisonous plant analyzer."""
    is_poisonous: bool = Field(..., description="Whether the plant is poisonous to cats")
    plant_name: str = Field(..., description="Common name")
    plant_scientific_name: str = Field(..., description="Scientific name")
    plant_description: str = Field(..., description="Description of the plant")
    toxicity_level: str = Field(
        ...,
        description="One of: Non-toxic, Mildly toxic, Moderately toxic, Highly toxic, Lethal",
    )
    toxic_plant_parts: List[str] = Field(..., description="Toxic parts (leaves, stems, flowers, roots, etc.)")
    safe_plant_parts: List[str] = Field(..., description="Parts that are safe")
    toxic_compounds: List[ToxicCompound] = Field(..., description="Toxic compounds in the plant")
    clinical_signs: ClinicalSigns
    emergency_response: EmergencyResponse
    nearest_vets: List[VetClinic] = Field(
        ..., max_length=10, description="Up to 10 veterinary clinics near the coordinates"
    )
    location_coordinates: LocationCoordinates
    toxicity_threshold: str = Field(..., description="Amount of plant material that causes harm")
    agent_type: Literal["POISONOUS"] = Field(..., description='Always "POISONOUS"')


AnalysisResult = Annotated[
    Union[HarmfulResult, PoisonousResult],
    Field(discriminator="agent_type"),
]

RESULT_SCHEMAS: dict[AgentType, type[ResultModel]] = {
    AgentType.HARMFUL: HarmfulResult,
    AgentType.POISONOUS: PoisonousResult,
}

_analysis_result_adapter: TypeAdapter = TypeAdapter(AnalysisResult)


def parse_analysis_result(payload: Any) -> Union[HarmfulResult, PoisonousResult]:
    """
    Validate a raw payload against the shape selected by its ``agentType``.

    Args:
        payload: Decoded JSON object (camelCase keys)

    Returns:
        HarmfulResult or PoisonousResult

    Raises:
        ValidationError: If the tag is missing/unknown or the payload does not
            fully satisfy the selected shape
    """
    return _analysis_result_adapter.validate_python(payload)
