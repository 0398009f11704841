"""
Specialist agents for Cat Safe plant analysis.

Each specialist pairs an instruction blob with the hosted web-search tool and
exactly one result schema. Given the user's multimodal message it returns a
validated instance of that schema or raises.
"""

import logging
from typing import Any, Dict, List, Optional, Type

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, SystemMessage
from pydantic import ValidationError

from catsafe.agents.base import AgentOutputError
from catsafe.core.prompts import HARMFUL_INSTRUCTIONS, POISONOUS_INSTRUCTIONS
from catsafe.models.results import HarmfulResult, PoisonousResult, ResultModel

logger = logging.getLogger(__name__)

# OpenAI hosted web search, executed server-side through the Responses API
WEB_SEARCH_TOOL: Dict[str, Any] = {"type": "web_search_preview"}

HARMFUL_AGENT_NAME = "Harmful Plant Identifier"
POISONOUS_AGENT_NAME = "Poisonous Plant Analyzer"


class SpecialistAgent:
    """
    A leaf worker bound to one output schema.

    Architecture:
        1. Prepends its instructions as a system message
        2. Lets the model call the hosted web-search tool
        3. Parses the final answer into output_schema
    """

    def __init__(
        self,
        name: str,
        instructions: str,
        output_schema: Type[ResultModel],
        llm: BaseChatModel,
        tools: Optional[List[Dict[str, Any]]] = None,
    ):
        """
        Initialize the specialist.

        Args:
            name: Agent identity, used in logs
            instructions: Instruction blob sent as the system message
            output_schema: Result model the answer must satisfy
            llm: Chat model (Responses API when hosted tools are used)
            tools: Hosted tools made available to the model
        """
        self.name = name
        self.instructions = instructions
        self.output_schema = output_schema
        self.tools = [WEB_SEARCH_TOOL] if tools is None else tools
        self._runnable = llm.with_structured_output(
            output_schema,
            method="json_schema",
            strict=True,
            include_raw=True,
            tools=self.tools or None,
        )

    def _parse(self, result: Dict[str, Any]) -> ResultModel:
        parsed = result.get("parsed")
        parsing_error = result.get("parsing_error")

        if parsing_error is not None:
            raise AgentOutputError(
                f"{self.name} returned output that does not match "
                f"{self.output_schema.__name__}: {parsing_error}"
            ) from parsing_error

        if parsed is None:
            raise AgentOutputError(f"{self.name} returned no structured output")

        if isinstance(parsed, self.output_schema):
            return parsed

        try:
            return self.output_schema.model_validate(parsed)
        except ValidationError as e:
            raise AgentOutputError(
                f"{self.name} returned output that does not match "
                f"{self.output_schema.__name__}: {e}"
            ) from e

    async def run(self, message: BaseMessage) -> ResultModel:
        """
        Analyze the plant in the user's message.

        Args:
            message: The multimodal user message (coordinates + image)

        Returns:
            Validated instance of output_schema

        Raises:
            AgentOutputError: If the answer does not satisfy output_schema
        """
        logger.info(f"{self.name}: running analysis")
        result = await self._runnable.ainvoke(
            [SystemMessage(content=self.instructions), message]
        )
        output = self._parse(result)
        logger.info(f"{self.name}: identified '{output.plant_name}'")
        return output


def create_harmful_agent(llm: BaseChatModel) -> SpecialistAgent:
    """Build the specialist for plants believed safe or mildly harmful."""
    return SpecialistAgent(
        name=HARMFUL_AGENT_NAME,
        instructions=HARMFUL_INSTRUCTIONS,
        output_schema=HarmfulResult,
        llm=llm,
    )


def create_poisonous_agent(llm: BaseChatModel) -> SpecialistAgent:
    """Build the specialist for plants believed toxic."""
    return SpecialistAgent(
        name=POISONOUS_AGENT_NAME,
        instructions=POISONOUS_INSTRUCTIONS,
        output_schema=PoisonousResult,
        llm=llm,
    )
