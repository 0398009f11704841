"""
PlantSafetyService for the Cat Safe system.

This module packages an uploaded plant photo and its coordinates into a single
multimodal message, runs the coordinator pipeline, and returns the structured
result unchanged.
"""

import asyncio
import base64
import logging
from typing import Optional, Union

from langchain_core.messages import HumanMessage

from catsafe.agents.base import classify_agent_error, create_chat_model
from catsafe.agents.coordinator import CoordinatorAgent
from catsafe.agents.specialists import create_harmful_agent, create_poisonous_agent
from catsafe.core.config import Settings
from catsafe.models.results import AgentType, HarmfulResult, PoisonousResult

logger = logging.getLogger(__name__)

DEFAULT_IMAGE_CONTENT_TYPE = "image/jpeg"


def encode_image_data_url(
    image_bytes: bytes, content_type: Optional[str] = DEFAULT_IMAGE_CONTENT_TYPE
) -> str:
    """
    Encode raw image bytes as a base64 data URL.

    Args:
        image_bytes: Decoded image buffer
        content_type: MIME type of the image ("image/jpg" is normalized)

    Returns:
        A ``data:<mime>;base64,<payload>`` URL
    """
    mime = (content_type or DEFAULT_IMAGE_CONTENT_TYPE).lower()
    if mime == "image/jpg":
        mime = "image/jpeg"
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime};base64,{encoded}"


def build_user_message(
    image_bytes: bytes,
    longitude: float,
    latitude: float,
    content_type: Optional[str] = DEFAULT_IMAGE_CONTENT_TYPE,
) -> HumanMessage:
    """
    Build the single user message sent to the coordinator.

    The message has a text part stating the coordinates and an image part
    carrying the photo as a data URL.
    """
    return HumanMessage(
        content=[
            {
                "type": "text",
                "text": f"The plant is located at {longitude}, {latitude}",
            },
            {
                "type": "image_url",
                "image_url": {"url": encode_image_data_url(image_bytes, content_type)},
            },
        ]
    )


def build_coordinator(settings: Settings) -> CoordinatorAgent:
    """
    Build the default coordinator with both specialists from settings.

    Specialists use the Responses API so the hosted web-search tool is
    available to them; the coordinator only routes and needs no tools.
    """
    specialist_llm = create_chat_model(settings, use_responses_api=True)
    return CoordinatorAgent(
        llm=create_chat_model(settings),
        handoffs={
            AgentType.HARMFUL: create_harmful_agent(specialist_llm),
            AgentType.POISONOUS: create_poisonous_agent(specialist_llm),
        },
    )


class PlantSafetyService:
    """
    Orchestrates one plant analysis per call.

    The service holds no per-request state; concurrent calls are independent.
    """

    def __init__(
        self,
        settings: Settings,
        coordinator: Optional[CoordinatorAgent] = None,
    ):
        self.settings = settings
        self.coordinator = coordinator or build_coordinator(settings)

    async def analyze(
        self,
        image_bytes: bytes,
        longitude: float,
        latitude: float,
        content_type: Optional[str] = DEFAULT_IMAGE_CONTENT_TYPE,
    ) -> Union[HarmfulResult, PoisonousResult]:
        """
        Analyze a plant photo for cat safety.

        Args:
            image_bytes: Image already validated upstream (format, size)
            longitude: Longitude where the plant was found (not range-checked)
            latitude: Latitude where the plant was found (not range-checked)
            content_type: MIME type of the image

        Returns:
            HarmfulResult or PoisonousResult, exactly as the pipeline produced it

        Raises:
            AgentTimeoutError: If the analysis exceeds settings.analysis_timeout
            AgentOutputError: If the model's answer fails schema validation
            AgentError: For any other upstream failure
        """
        logger.info(
            f"Analyzing plant image ({len(image_bytes)} bytes) "
            f"at longitude={longitude}, latitude={latitude}"
        )
        message = build_user_message(image_bytes, longitude, latitude, content_type)

        try:
            result = await asyncio.wait_for(
                self.coordinator.run(message),
                timeout=self.settings.analysis_timeout,
            )
        except Exception as e:
            agent_error = classify_agent_error(e)
            logger.error(f"Plant analysis failed: {type(agent_error).__name__}: {agent_error}")
            if agent_error is e:
                raise
            raise agent_error from e

        logger.info(f"Plant analysis complete: agentType={result.agent_type}")
        return result


__all__ = [
    "PlantSafetyService",
    "build_coordinator",
    "build_user_message",
    "encode_image_data_url",
]
