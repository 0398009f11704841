"""
Shared fixtures for Cat Safe tests.

LLM calls are never made: every chat model is a Mock whose structured-output
runnable returns canned results.
"""

import copy
from unittest.mock import AsyncMock, Mock

import pytest

from catsafe.core.config import Settings

NYC_LONGITUDE = -73.968285
NYC_LATITUDE = 40.785091


@pytest.fixture
def settings():
    """Settings with a dummy API key, isolated from any local .env file."""
    return Settings(_env_file=None, openai_api_key="sk-test")


@pytest.fixture
def spider_plant_payload():
    """A Harmful result for a Spider Plant (safe for cats)."""
    return copy.deepcopy({
        "isHarmful": False,
        "plantName": "Spider Plant",
        "plantScientificName": "Chlorophytum comosum",
        "chemicalComposition": "Mostly water, cellulose and chlorophyll with trace volatile compounds.",
        "chemicalList": [
            {
                "name": "Volatile organic compounds",
                "description": "Aromatic compounds released by the leaves.",
                "toxicity": False,
                "toxicityLevel": 1,
                "toxicityDescription": "Attractive to cats but not toxic.",
                "toxicitySymptoms": ["Mild vomiting if large amounts are eaten"],
                "toxicityTreatment": "No treatment needed; offer water.",
            }
        ],
        "toxicityThreshold": "No known toxic dose for cats.",
        "agentType": "HARMFUL",
    })


@pytest.fixture
def lily_payload():
    """A Poisonous result for an Easter Lily located in Central Park."""
    return copy.deepcopy({
        "isPoisonous": True,
        "plantName": "Easter Lily",
        "plantScientificName": "Lilium longiflorum",
        "plantDescription": "Tall perennial with white trumpet-shaped flowers.",
        "toxicityLevel": "Lethal",
        "toxicPlantParts": ["leaves", "flowers", "pollen", "stems", "vase water"],
        "safePlantParts": [],
        "toxicCompounds": [
            {
                "name": "Unknown water-soluble nephrotoxin",
                "chemicalClassification": "Unidentified",
                "mechanismOfAction": "Damages renal tubular epithelial cells.",
                "targetOrgans": ["kidneys"],
                "toxicityDescription": "Causes acute kidney injury within 24-72 hours.",
            }
        ],
        "clinicalSigns": {
            "earlySymptoms": ["vomiting", "lethargy", "loss of appetite"],
            "progressiveSymptoms": ["increased thirst", "dehydration", "kidney failure"],
            "onsetTimeline": "Vomiting within 2 hours; kidney failure within 24-72 hours.",
        },
        "emergencyResponse": {
            "firstAidSteps": ["Remove plant material from the mouth", "Go to a vet immediately"],
            "whenToSeekHelp": "Immediately, even if the cat seems well.",
            "vetInformation": ["Plant species", "Time of exposure", "Amount eaten"],
        },
        "nearestVets": [
            {
                "name": "Animal Medical Center",
                "address": "510 E 62nd St, New York, NY 10065",
                "phoneNumber": "+1 212-838-8100",
                "distance": "2.1 km",
                "isEmergency24h": True,
            },
            {
                "name": "BluePearl Pet Hospital",
                "address": "410 W 55th St, New York, NY 10019",
                "phoneNumber": "+1 212-767-0099",
                "distance": "2.6 km",
                "isEmergency24h": True,
            },
        ],
        "locationCoordinates": {"latitude": NYC_LATITUDE, "longitude": NYC_LONGITUDE},
        "toxicityThreshold": "Any amount, including pollen, can be fatal.",
        "agentType": "POISONOUS",
    })


@pytest.fixture
def structured_llm():
    """
    Factory for a mocked chat model.

    Returns (llm, runnable): ``llm.with_structured_output(...)`` returns
    ``runnable`` whose ``ainvoke`` returns the given result or raises the
    given exception.
    """

    def _make(result=None, side_effect=None):
        runnable = Mock()
        runnable.ainvoke = AsyncMock(return_value=result, side_effect=side_effect)
        llm = Mock()
        llm.with_structured_output.return_value = runnable
        return llm, runnable

    return _make
