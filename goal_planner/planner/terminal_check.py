"""
Terminal-action check - decides whether a step is already a single executable action
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from .oracle import TextOracle

logger = structlog.get_logger(__name__)

NOT_AN_ACTION = "null"


@dataclass(frozen=True)
class ActionCheck:
    """Outcome of one terminal-action check"""

    recognized_call: Optional[str]
    prompt_used: str

    @property
    def is_action(self) -> bool:
        return self.recognized_call is not None


def build_action_prompt(step: str) -> str:
    """Per-step request for the action-recognition oracle."""
    return f"This is the step: {step}"


def interpret_action_response(raw_response: str) -> Optional[str]:
    """Map a raw oracle answer to an action call, or None when it is not an action.

    Any answer containing "null" (case-insensitive) means "not an action";
    everything else is taken verbatim after trimming.
    """
    answer = raw_response.strip()
    if NOT_AN_ACTION in answer.lower():
        return None
    return answer


class ActionRecognizer:
    """Wraps the action-recognition oracle."""

    def __init__(self, oracle: TextOracle):
        self.oracle = oracle

    async def check(self, step: str) -> ActionCheck:
        prompt = build_action_prompt(step)
        raw_response = await self.oracle.ask(prompt)
        recognized = interpret_action_response(raw_response)

        if recognized is not None:
            logger.debug("Step recognized as action", step=step, func_call=recognized)
        return ActionCheck(recognized_call=recognized, prompt_used=prompt)
