"""Model callbacks that log oracle prompts and answers."""
import os
from typing import Any, Callable, Dict, Optional

import structlog

logger = structlog.get_logger(__name__)

PREVIEW_CHARS = 300


def _content_text(content: Any) -> str:
    parts = getattr(content, "parts", None) or []
    return "".join(getattr(part, "text", None) or "" for part in parts)


def log_oracle_request_callback(callback_context: Any, **kwargs) -> None:
    """
    Callback triggered before the model is called.
    Logs the prompt sent to the oracle.

    Args:
        callback_context: ADK callback context
        **kwargs: Additional arguments including llm_request

    Returns:
        None to proceed with the original request
    """
    try:
        llm_request = kwargs.get("llm_request")
        if llm_request is None:
            return None

        agent_name = getattr(callback_context, "agent_name", "UnknownAgent")
        contents = getattr(llm_request, "contents", None) or []
        prompt = _content_text(contents[-1]) if contents else ""

        logger.debug(
            "oracle_request",
            agent=agent_name,
            prompt_chars=len(prompt),
            prompt_preview=prompt[:PREVIEW_CHARS],
        )
    except Exception as e:
        logger.error("Error in oracle request callback", error=str(e), exc_info=True)

    return None


def log_oracle_response_callback(callback_context: Any, **kwargs) -> None:
    """
    Callback triggered after the model generates a response.
    Logs the oracle's raw answer.

    Args:
        callback_context: ADK callback context
        **kwargs: Additional arguments including llm_response

    Returns:
        None to proceed with the original response
    """
    try:
        llm_response = kwargs.get("llm_response")
        if llm_response is None:
            return None

        agent_name = getattr(callback_context, "agent_name", "UnknownAgent")
        answer = _content_text(getattr(llm_response, "content", None))

        logger.debug(
            "oracle_response",
            agent=agent_name,
            answer_chars=len(answer),
            answer_preview=answer[:PREVIEW_CHARS],
        )
    except Exception as e:
        logger.error("Error in oracle response callback", error=str(e), exc_info=True)

    return None


def get_configured_callbacks() -> Dict[str, Optional[Callable]]:
    """
    Get dict of callbacks based on environment configuration.

    Returns:
        Dict mapping callback types to callback functions
    """
    callbacks = {}

    if os.getenv("MINECRAFT_PLANNER_LOG_ORACLE_PROMPTS", "true").lower() == "true":
        callbacks["before_model_callback"] = log_oracle_request_callback

    if os.getenv("MINECRAFT_PLANNER_LOG_ORACLE_ANSWERS", "true").lower() == "true":
        callbacks["after_model_callback"] = log_oracle_response_callback

    return callbacks
