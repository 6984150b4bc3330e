"""
Decomposition step - asks the decomposition oracle to split a step into sub-steps
"""

import json
import re
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

import structlog
from pydantic import BaseModel, StrictStr, ValidationError

from ..schemas import AgentContext
from .context import describe_environment, format_context
from .errors import OracleResponseError
from .inventory import format_inventory
from .oracle import TextOracle

logger = structlog.get_logger(__name__)

_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


class StepBreakdown(BaseModel):
    """Shape the decomposition oracle must answer with."""
    steps: List[StrictStr]


@dataclass(frozen=True)
class Decomposition:
    """Sub-steps of one step plus the prompt that produced them"""

    sub_steps: List[str]
    prompt_used: str


def build_breakdown_prompt(
    step: str,
    structured_context: Dict[str, List[str]],
    inventory: Mapping[str, int],
    agent_context: Optional[AgentContext] = None,
) -> str:
    """Compose the per-step request sent to the decomposition oracle."""
    sections = []

    context_text = format_context(structured_context)
    if context_text:
        sections.append(
            f'As you decide which steps to include in your breakdown of "{step}", keep in mind that '
            f"your character has already planned the following (listed as steps and substeps): "
            f"{context_text}Avoid redundant work. If a previous step acquires a resource that this "
            f"step needs, do not add a step to acquire it again."
        )

    if inventory:
        sections.append(f"At this time, your inventory includes: {format_inventory(inventory)}.")

    environment = describe_environment(agent_context)
    if environment:
        sections.append(f"Additional environment context:\n{environment}")

    sections.append(f'Here is the step for you to break down:\n"{step}"')
    return "\n\n".join(sections)


def parse_breakdown(raw_response: str) -> List[str]:
    """Extract the ordered sub-step list from a raw oracle answer.

    Raises:
        OracleResponseError: the answer is not a JSON object with a "steps" list of strings
    """
    text = raw_response.strip()
    fenced = _CODE_FENCE.match(text)
    if fenced:
        text = fenced.group(1)

    try:
        breakdown = StepBreakdown.model_validate(json.loads(text))
    except (json.JSONDecodeError, ValidationError) as exc:
        raise OracleResponseError(f"Decomposition answer is malformed: {exc}", raw_response) from exc

    return [sub_step.strip() for sub_step in breakdown.steps if sub_step.strip()]


class Decomposer:
    """Turns one step into zero or more child step strings."""

    def __init__(self, oracle: TextOracle):
        self.oracle = oracle

    async def decompose(
        self,
        step: str,
        structured_context: Dict[str, List[str]],
        inventory: Mapping[str, int],
        agent_context: Optional[AgentContext] = None,
    ) -> Decomposition:
        """Ask the oracle for the sub-steps of `step`.

        An empty list is a valid answer. Oracle and parse failures are not
        caught here; they end the whole search.

        Args:
            step: Step text to break down
            structured_context: Sibling work summary from summarize_context()
            inventory: Projected inventory at this node
            agent_context: Optional snapshot of the agent's surroundings

        Returns:
            Decomposition with the ordered sub-steps and the prompt used
        """
        prompt = build_breakdown_prompt(step, structured_context, inventory, agent_context)
        raw_response = await self.oracle.ask(prompt)
        sub_steps = parse_breakdown(raw_response)

        logger.debug("Step decomposed", step=step, sub_steps=sub_steps)
        return Decomposition(sub_steps=sub_steps, prompt_used=prompt)
