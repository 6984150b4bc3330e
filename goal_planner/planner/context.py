"""
Sibling-work summary handed to the decomposition oracle
"""

from typing import Dict, List, Optional, Protocol, Sequence

from ..schemas import AgentContext, StepNode


class ContextProvider(Protocol):
    """Read-only access to the agent's current state."""

    def snapshot(self) -> AgentContext:
        ...


class StaticContextProvider:
    """Context provider that always returns the same snapshot."""

    def __init__(self, context: AgentContext):
        self._context = context

    def snapshot(self) -> AgentContext:
        return self._context


def summarize_context(current: StepNode, nodes: Sequence[StepNode]) -> Dict[str, List[str]]:
    """Group work planned before `current` by the step text of its parent.

    Only non-root nodes created earlier than `current` (lower step number)
    at the same depth or deeper are included, so the oracle can skip
    gathering resources a previous branch already accounts for.

    Args:
        current: Node about to be decomposed
        nodes: Every node materialized so far

    Returns:
        Ordered mapping of parent step text to its planned child step texts
    """
    by_id = {node.id: node for node in nodes}
    summary: Dict[str, List[str]] = {}

    for node in nodes:
        if node.parent_id is None:
            continue
        if node.step_number >= current.step_number or node.level < current.level:
            continue
        parent = by_id.get(node.parent_id)
        if parent is None:
            continue
        summary.setdefault(parent.step, []).append(node.step)

    return summary


def format_context(summary: Dict[str, List[str]]) -> str:
    """Render a summary as "Parent : (child, child) ; Other : (child) ; "."""
    return "".join(f"{parent} : ({', '.join(children)}) ; " for parent, children in summary.items())


def describe_environment(context: Optional[AgentContext]) -> str:
    """Environment details worth telling the decomposition oracle about."""
    if context is None:
        return ""

    lines = []
    if context.players_nearby:
        lines.append(f"Players nearby: {', '.join(context.players_nearby)}.")
    if context.visible_block_types:
        lines.append(f"Visible block types include: {', '.join(context.visible_block_types)}.")
    if context.visible_mobs:
        lines.append(f"Visible mobs include: {', '.join(mob.name for mob in context.visible_mobs)}.")
    if context.health is not None and context.hunger is not None:
        lines.append(f"Your health is {context.health:g} and your hunger is {context.hunger:g}.")
    if "home" in context.memory:
        lines.append(f"Your home is at {context.memory['home']}.")
    return "\n".join(lines)
