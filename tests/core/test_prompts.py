"""
Unit tests for agent instruction sets.
"""

import pytest

from catsafe.core.prompts import (
    CAT_SAFE_INSTRUCTIONS,
    CAT_SAFE_PROMPT,
    HARMFUL_INSTRUCTIONS,
    HARMFUL_PROMPT,
    POISONOUS_INSTRUCTIONS,
    POISONOUS_PROMPT,
    build_instructions,
)


def test_build_instructions_joins_with_newlines():
    assert build_instructions(["first", "second", "third"]) == "first\nsecond\nthird"


def test_build_instructions_empty():
    assert build_instructions([]) == ""


@pytest.mark.parametrize(
    "lines, blob",
    [
        (CAT_SAFE_PROMPT, CAT_SAFE_INSTRUCTIONS),
        (HARMFUL_PROMPT, HARMFUL_INSTRUCTIONS),
        (POISONOUS_PROMPT, POISONOUS_INSTRUCTIONS),
    ],
)
def test_instruction_blobs_match_prompt_lists(lines, blob):
    assert blob.split("\n") == lines
    assert all(line.strip() for line in lines)


def test_coordinator_prefers_poisonous_when_unsure():
    assert "not sure" in CAT_SAFE_INSTRUCTIONS
    assert "choose route POISONOUS" in CAT_SAFE_INSTRUCTIONS
    assert "never answer the user yourself" in CAT_SAFE_INSTRUCTIONS


def test_specialists_set_their_agent_type():
    assert 'agentType to "HARMFUL"' in HARMFUL_INSTRUCTIONS
    assert 'agentType to "POISONOUS"' in POISONOUS_INSTRUCTIONS


def test_specialists_use_web_search():
    assert "web search" in HARMFUL_INSTRUCTIONS
    assert "web search" in POISONOUS_INSTRUCTIONS


def test_poisonous_prompt_covers_vets_and_coordinates():
    assert "at most 10 clinics" in POISONOUS_INSTRUCTIONS
    assert "locationCoordinates" in POISONOUS_INSTRUCTIONS
    for level in ("Non-toxic", "Mildly toxic", "Moderately toxic", "Highly toxic", "Lethal"):
        assert level in POISONOUS_INSTRUCTIONS
