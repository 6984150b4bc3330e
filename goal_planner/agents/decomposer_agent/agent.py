"""Decomposer Agent - splits a step into ordered sub-steps."""

from google.adk.agents import LlmAgent
from google.genai import types

from ...config import PlannerConfig, get_config
from ..callbacks import get_configured_callbacks
from .prompt import DECOMPOSER_PROMPT


def create_decomposer_agent(config: PlannerConfig = None) -> LlmAgent:
    """Create the decomposition oracle agent.

    Args:
        config: Planner configuration instance

    Returns:
        LlmAgent that answers with a JSON {"steps": [...]} object
    """
    config = config or get_config()
    callbacks = get_configured_callbacks()

    decomposer = LlmAgent(
        name="DecomposerAgent",
        model=config.default_model,
        instruction=DECOMPOSER_PROMPT,
        description="Breaks a Minecraft task into the next level of concrete steps",
        generate_content_config=types.GenerateContentConfig(
            temperature=config.agent_temperature,
            max_output_tokens=config.max_output_tokens,
            response_mime_type="application/json",
        ),
        **callbacks,
    )

    return decomposer
