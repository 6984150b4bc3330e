"""Terminal rendering of plan trees."""
import os
from collections import defaultdict
from typing import Dict, List, Optional

from .planner.inventory import format_inventory
from .schemas import StepNode

# ANSI color codes for node kinds
NODE_COLORS = {
    "root": "\033[94m",  # Blue
    "action": "\033[92m",  # Green
    "step": "\033[96m",  # Cyan
    "inventory": "\033[90m",  # Grey
}

RESET_COLOR = "\033[0m"

NODE_ICONS = {"root": "🎯", "action": "⚙️", "step": "•"}

# Fallback for non-emoji terminals
NODE_LABELS = {"root": "[Goal]", "action": "[Action]", "step": "-"}


def _use_color() -> bool:
    return os.getenv("NO_COLOR") is None


def _node_kind(node: StepNode) -> str:
    if node.is_root:
        return "root"
    if node.is_terminal:
        return "action"
    return "step"


def format_node(node: StepNode, show_inventory: bool = False) -> str:
    """
    Format one node as a single terminal line (without indentation).

    Args:
        node: Node to format
        show_inventory: Append the projected inventory of action nodes

    Returns:
        Formatted string, with ANSI codes unless NO_COLOR is set
    """
    kind = _node_kind(node)
    use_emoji = os.getenv("MINECRAFT_PLANNER_USE_EMOJI", "true").lower() == "true"
    marker = NODE_ICONS[kind] if use_emoji else NODE_LABELS[kind]

    text = node.step
    if node.is_terminal:
        text = f"{node.step} -> {node.func_call}"

    if _use_color():
        line = f"{NODE_COLORS[kind]}{marker} {text}{RESET_COLOR}"
    else:
        line = f"{marker} {text}"

    if show_inventory and node.is_terminal and node.projected_inventory:
        inventory = f"[{format_inventory(node.projected_inventory)}]"
        if _use_color():
            inventory = f"{NODE_COLORS['inventory']}{inventory}{RESET_COLOR}"
        line += f" {inventory}"

    return line


def render_tree(nodes: List[StepNode], show_inventory: bool = False, indent: str = "  ") -> str:
    """
    Render a flat node list as an indented tree.

    Children are listed in step-number order under their parent; the input
    order does not matter.

    Args:
        nodes: Flat node list
        show_inventory: Show projected inventory next to action nodes
        indent: Indentation per tree level

    Returns:
        Multi-line string, empty when there is no root
    """
    children: Dict[Optional[str], List[StepNode]] = defaultdict(list)
    for node in sorted(nodes, key=lambda n: n.step_number):
        children[node.parent_id].append(node)

    lines: List[str] = []
    stack = list(reversed(children.get(None, [])))
    while stack:
        node = stack.pop()
        lines.append(f"{indent * node.level}{format_node(node, show_inventory)}")
        stack.extend(reversed(children.get(node.id, [])))

    return "\n".join(lines)
