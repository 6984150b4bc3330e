"""Action Agent - recognizes steps that are a single executable action."""

from google.adk.agents import LlmAgent
from google.genai import types

from ...config import PlannerConfig, get_config
from ..callbacks import get_configured_callbacks
from .prompt import ACTION_PROMPT


def create_action_agent(config: PlannerConfig = None) -> LlmAgent:
    """Create the action-recognition oracle agent.

    Args:
        config: Planner configuration instance

    Returns:
        LlmAgent that answers with one action call or "null"
    """
    config = config or get_config()
    callbacks = get_configured_callbacks()

    recognizer = LlmAgent(
        name="ActionAgent",
        model=config.default_model,
        instruction=ACTION_PROMPT,
        description="Maps a Minecraft step to a single bot action call",
        generate_content_config=types.GenerateContentConfig(
            temperature=0.0,
            max_output_tokens=128,
        ),
        **callbacks,
    )

    return recognizer
