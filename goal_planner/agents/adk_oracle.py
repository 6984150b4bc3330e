"""
ADK oracle adapter - answers planner prompts with a Google ADK LlmAgent
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

import structlog
from google.adk.agents import LlmAgent
from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from ..planner.errors import OracleError

logger = structlog.get_logger(__name__)

APP_NAME = "goal_planner"
ORACLE_USER_ID = "goal_planner"


@dataclass
class OracleMetrics:
    """Request counters for one oracle"""

    total_requests: int = 0
    failed_requests: int = 0
    total_input_chars: int = 0
    total_output_chars: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_requests": self.total_requests,
            "failed_requests": self.failed_requests,
            "total_input_chars": self.total_input_chars,
            "total_output_chars": self.total_output_chars,
        }


class AdkTextOracle:
    """Sends one prompt per call to an LlmAgent and returns its final text.

    Every question runs in a fresh session so earlier answers never leak
    into later prompts; the planner supplies all context explicitly.
    """

    def __init__(
        self,
        agent: LlmAgent,
        max_prompt_chars: int = 100000,
        session_service: Optional[InMemorySessionService] = None,
        app_name: str = APP_NAME,
    ):
        self.agent = agent
        self.max_prompt_chars = max_prompt_chars
        self.app_name = app_name
        self.session_service = session_service or InMemorySessionService()
        self.runner = Runner(agent=agent, app_name=app_name, session_service=self.session_service)
        self.metrics = OracleMetrics()

    async def ask(self, prompt: str) -> str:
        """Ask the agent one question.

        Args:
            prompt: Complete request text

        Returns:
            The agent's final response text

        Raises:
            OracleError: prompt too long, runner failure, or empty answer
        """
        if len(prompt) > self.max_prompt_chars:
            raise OracleError(
                f"Prompt length ({len(prompt)}) exceeds maximum allowed length of "
                f"{self.max_prompt_chars} characters"
            )

        self.metrics.total_requests += 1
        self.metrics.total_input_chars += len(prompt)

        session = await self.session_service.create_session(app_name=self.app_name, user_id=ORACLE_USER_ID)
        user_content = types.Content(role="user", parts=[types.Part(text=prompt)])

        final_response = ""
        try:
            async for event in self.runner.run_async(
                user_id=ORACLE_USER_ID, session_id=session.id, new_message=user_content
            ):
                if event.is_final_response() and event.content and event.content.parts:
                    final_response = "".join(part.text or "" for part in event.content.parts)
        except Exception as e:
            self.metrics.failed_requests += 1
            logger.error(f"{self.agent.name} call failed: {e}")
            raise OracleError(f"{self.agent.name} call failed: {e}") from e
        finally:
            await self.session_service.delete_session(
                app_name=self.app_name, user_id=ORACLE_USER_ID, session_id=session.id
            )

        if not final_response.strip():
            self.metrics.failed_requests += 1
            raise OracleError(f"{self.agent.name} returned an empty response")

        self.metrics.total_output_chars += len(final_response)
        return final_response
