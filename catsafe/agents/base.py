"""
Shared building blocks for the Cat Safe agents.

This module contains the agent exception hierarchy, the ChatOpenAI factory
used by every agent, and the mapping from raw upstream failures to typed
agent errors.
"""

import asyncio
import logging
from typing import Optional

from langchain_openai import ChatOpenAI

from catsafe.core.config import Settings

logger = logging.getLogger(__name__)


class AgentError(Exception):
    """Base exception for agent pipeline errors."""

    pass


class AgentTimeoutError(AgentError):
    """Raised when the upstream model call or the whole analysis times out."""

    pass


class AgentOutputError(AgentError):
    """Raised when a model response does not satisfy its bound schema."""

    pass


def create_chat_model(
    settings: Settings,
    use_responses_api: bool = False,
    temperature: Optional[float] = 0.2,
) -> ChatOpenAI:
    """
    Build a ChatOpenAI client from application settings.

    Args:
        settings: Application settings (model, key, base URL, timeout, retries)
        use_responses_api: Route calls through the Responses API, required for
            hosted tools such as web search
        temperature: Sampling temperature (lower = more factual)

    Returns:
        Configured ChatOpenAI instance
    """
    kwargs = {
        "model": settings.openai_model,
        "api_key": settings.openai_api_key,
        "timeout": settings.openai_timeout,
        "max_retries": settings.openai_max_retries,
        "temperature": temperature,
        "use_responses_api": use_responses_api,
    }
    if settings.openai_base_url:
        logger.debug(f"Using custom base URL: {settings.openai_base_url}")
        kwargs["base_url"] = settings.openai_base_url

    return ChatOpenAI(**kwargs)


def classify_agent_error(error: BaseException) -> AgentError:
    """
    Map an upstream failure onto the agent exception hierarchy.

    Agent errors pass through unchanged. Timeouts become AgentTimeoutError;
    everything else becomes AgentError with a message naming the failure.

    Args:
        error: Exception raised while running the pipeline

    Returns:
        The typed agent error to raise in its place
    """
    if isinstance(error, AgentError):
        return error

    if isinstance(error, (asyncio.TimeoutError, TimeoutError)):
        return AgentTimeoutError("LLM call timed out")

    error_type = type(error).__name__
    error_msg = str(error)
    lowered = f"{error_type} {error_msg}".lower()

    if "timeout" in lowered or "timed out" in lowered:
        return AgentTimeoutError(f"LLM call timed out: {error_msg}")

    if "rate limit" in lowered or "ratelimit" in lowered or "429" in error_msg:
        return AgentError(f"API rate limit exceeded: {error_msg}")

    if "authentication" in lowered or "401" in error_msg:
        return AgentError(f"API authentication failed: {error_msg}")

    return AgentError(f"Plant analysis failed: {error_type}: {error_msg}")
