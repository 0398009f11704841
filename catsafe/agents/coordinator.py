"""
Coordinator agent for Cat Safe plant analysis.

The coordinator looks at the plant photo, decides which specialist should
handle it, and delegates. It never produces a result of its own.
"""

import logging
from typing import Dict, Union

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, SystemMessage
from pydantic import ValidationError

from catsafe.agents.specialists import SpecialistAgent
from catsafe.core.prompts import CAT_SAFE_INSTRUCTIONS
from catsafe.models.results import AgentType, HarmfulResult, PoisonousResult
from catsafe.models.routing import RoutingDecision

logger = logging.getLogger(__name__)

COORDINATOR_AGENT_NAME = "Cat Safe Plant Analysis Coordinator"

# Route taken whenever the toxicity judgment is in doubt
CAUTIOUS_ROUTE = AgentType.POISONOUS


class CoordinatorAgent:
    """
    Router that hands the request off to exactly one specialist.

    Flow: received -> routing-decision -> delegated
    """

    def __init__(
        self,
        llm: BaseChatModel,
        handoffs: Dict[AgentType, SpecialistAgent],
        instructions: str = CAT_SAFE_INSTRUCTIONS,
        name: str = COORDINATOR_AGENT_NAME,
    ):
        missing = set(AgentType) - set(handoffs)
        if missing:
            raise ValueError(
                f"Coordinator needs a specialist for every route, missing: "
                f"{sorted(t.value for t in missing)}"
            )

        self.name = name
        self.instructions = instructions
        self.handoffs = dict(handoffs)
        self._router = llm.with_structured_output(
            RoutingDecision,
            method="json_schema",
            strict=True,
            include_raw=True,
        )

    def decide(self, decision: RoutingDecision) -> AgentType:
        """Apply the cautious tie-break to a parsed routing decision."""
        if not decision.is_certain and decision.route != CAUTIOUS_ROUTE:
            logger.info(
                f"{self.name}: uncertain {decision.route.value} decision, "
                f"routing to {CAUTIOUS_ROUTE.value}"
            )
            return CAUTIOUS_ROUTE
        return decision.route

    async def route(self, message: BaseMessage) -> AgentType:
        """
        Choose the specialist for the user's message.

        Args:
            message: The multimodal user message

        Returns:
            The chosen route; POISONOUS when the model is unsure or its
            routing reply cannot be parsed
        """
        result = await self._router.ainvoke(
            [SystemMessage(content=self.instructions), message]
        )
        decision = result.get("parsed")
        parsing_error = result.get("parsing_error")

        if decision is not None and not isinstance(decision, RoutingDecision):
            try:
                decision = RoutingDecision.model_validate(decision)
            except ValidationError as e:
                decision, parsing_error = None, e

        if decision is None:
            logger.warning(
                f"{self.name}: unparseable routing reply ({parsing_error}), "
                f"routing to {CAUTIOUS_ROUTE.value}"
            )
            return CAUTIOUS_ROUTE

        logger.info(
            f"{self.name}: route={decision.route.value} certain={decision.is_certain} "
            f"reason={decision.reasoning!r}"
        )
        return self.decide(decision)

    async def run(self, message: BaseMessage) -> Union[HarmfulResult, PoisonousResult]:
        """
        Route the message and return the chosen specialist's result.

        Args:
            message: The multimodal user message

        Returns:
            HarmfulResult or PoisonousResult, exactly as the specialist produced it
        """
        route = await self.route(message)
        specialist = self.handoffs[route]
        logger.info(f"{self.name}: handing off to {specialist.name}")
        return await specialist.run(message)
