"""Agents module - ADK-backed oracles for the goal planner"""

from typing import Tuple

from ..config import PlannerConfig, get_config
from ..planner import ActionRecognizer, Decomposer
from .action_agent import create_action_agent
from .adk_oracle import AdkTextOracle, OracleMetrics
from .decomposer_agent import create_decomposer_agent


def create_planner_oracles(config: PlannerConfig = None) -> Tuple[Decomposer, ActionRecognizer]:
    """Build the decomposition and action-recognition components on ADK agents.

    Credentials must already be configured (see setup_google_ai_credentials).
    """
    config = config or get_config()

    decomposer = Decomposer(
        AdkTextOracle(create_decomposer_agent(config), max_prompt_chars=config.max_prompt_chars)
    )
    recognizer = ActionRecognizer(
        AdkTextOracle(create_action_agent(config), max_prompt_chars=config.max_prompt_chars)
    )
    return decomposer, recognizer


__all__ = [
    "AdkTextOracle",
    "OracleMetrics",
    "create_decomposer_agent",
    "create_action_agent",
    "create_planner_oracles",
]
