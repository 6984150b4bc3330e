"""
Tests for terminal rendering of plan trees
"""

import pytest

from goal_planner.schemas import StepNode
from goal_planner.terminal_render import format_node, render_tree


@pytest.fixture
def plain_terminal(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("MINECRAFT_PLANNER_USE_EMOJI", "false")


@pytest.fixture
def tree():
    root = StepNode(id="r", step="get wood", level=0, step_number=0)
    find = StepNode(id="f", parent_id="r", step="find a tree", level=1, step_number=1)
    mine = StepNode(
        id="m",
        parent_id="r",
        step="mine 4 oak logs",
        func_call="mine(oak_log,4)",
        level=1,
        step_number=2,
        projected_inventory={"oak_log": 4},
    )
    walk = StepNode(id="w", parent_id="f", step="walk to forest", level=2, step_number=3)
    return [root, find, mine, walk]


class TestFormatNode:
    def test_plain_labels(self, plain_terminal, tree):
        root, find, mine, _ = tree
        assert format_node(root) == "[Goal] get wood"
        assert format_node(find) == "- find a tree"
        assert format_node(mine) == "[Action] mine 4 oak logs -> mine(oak_log,4)"

    def test_inventory_on_actions(self, plain_terminal, tree):
        mine = tree[2]
        assert format_node(mine, show_inventory=True).endswith("[oak_log(4)]")

    def test_colors(self, monkeypatch, tree):
        monkeypatch.delenv("NO_COLOR", raising=False)
        line = format_node(tree[2])
        assert line.startswith("\033[92m")
        assert line.endswith("\033[0m")


class TestRenderTree:
    def test_indented_by_level(self, plain_terminal, tree):
        assert render_tree(tree).splitlines() == [
            "[Goal] get wood",
            "  - find a tree",
            "    - walk to forest",
            "  [Action] mine 4 oak logs -> mine(oak_log,4)",
        ]

    def test_input_order_does_not_matter(self, plain_terminal, tree):
        assert render_tree(list(reversed(tree))) == render_tree(tree)

    def test_empty(self):
        assert render_tree([]) == ""
