"""
Tests for the sibling-work summary and environment description
"""

from goal_planner.planner import StaticContextProvider, format_context, summarize_context
from goal_planner.planner.context import describe_environment
from goal_planner.schemas import AgentContext, Position3D, StepNode, VisibleMob


def make_tree():
    """Root with two children, the first of which has two children of its own"""
    root = StepNode(step="get an iron sword", level=0, step_number=0)
    wood = StepNode(parent_id=root.id, step="get wood", level=1, step_number=1)
    iron = StepNode(parent_id=root.id, step="get iron", level=1, step_number=2)
    logs = StepNode(parent_id=wood.id, step="mine logs", func_call="mine(oak_log, 4)", level=2, step_number=3)
    planks = StepNode(parent_id=wood.id, step="craft planks", level=2, step_number=4)
    return [root, wood, iron, logs, planks]


class TestSummarizeContext:
    """Test which earlier nodes are shown to the decomposition oracle"""

    def test_root_has_empty_context(self):
        nodes = make_tree()
        assert summarize_context(nodes[0], nodes) == {}

    def test_first_child_sees_nothing_earlier(self):
        root, wood, *_ = make_tree()
        assert summarize_context(wood, [root, wood]) == {}

    def test_sibling_sees_earlier_sibling(self):
        root, wood, iron, *_ = make_tree()
        assert summarize_context(iron, [root, wood, iron]) == {"get an iron sword": ["get wood"]}

    def test_shallower_nodes_are_excluded(self):
        nodes = make_tree()
        planks = nodes[4]
        # Level-1 nodes are above planks; only the level-2 sibling counts
        assert summarize_context(planks, nodes) == {"get wood": ["mine logs"]}

    def test_deeper_nodes_are_included(self):
        nodes = make_tree()
        iron = nodes[2]
        late = StepNode(parent_id=iron.id, step="mine iron ore", level=2, step_number=5)
        assert summarize_context(late, nodes + [late]) == {"get wood": ["mine logs", "craft planks"]}

    def test_later_nodes_are_excluded(self):
        nodes = make_tree()
        wood = nodes[1]
        assert summarize_context(wood, nodes) == {}

    def test_parents_with_same_text_are_merged(self):
        root = StepNode(step="goal", level=0, step_number=0)
        a = StepNode(parent_id=root.id, step="get wood", level=1, step_number=1)
        b = StepNode(parent_id=root.id, step="get wood", level=1, step_number=2)
        a1 = StepNode(parent_id=a.id, step="mine oak", level=2, step_number=3)
        b1 = StepNode(parent_id=b.id, step="mine birch", level=2, step_number=4)
        current = StepNode(parent_id=b.id, step="craft", level=2, step_number=5)

        nodes = [root, a, b, a1, b1, current]
        assert summarize_context(current, nodes) == {"get wood": ["mine oak", "mine birch"]}


class TestFormatContext:
    def test_format(self):
        summary = {"get wood": ["mine logs", "craft planks"], "get iron": ["mine iron ore"]}
        assert format_context(summary) == "get wood : (mine logs, craft planks) ; get iron : (mine iron ore) ; "

    def test_empty(self):
        assert format_context({}) == ""


class TestDescribeEnvironment:
    """Test the environment section given to the decomposition oracle"""

    def test_none(self):
        assert describe_environment(None) == ""

    def test_empty_context(self):
        assert describe_environment(AgentContext()) == ""

    def test_full_context(self):
        context = AgentContext(
            position=Position3D(x=0, y=64, z=0),
            players_nearby=["Steve"],
            visible_block_types={"oak_log": Position3D(x=3, y=64, z=1)},
            visible_mobs=[VisibleMob(name="cow", distance=4.5)],
            health=18,
            hunger=20,
            memory={"home": "(10, 64, -3)"},
        )
        description = describe_environment(context)

        assert "Players nearby: Steve." in description
        assert "Visible block types include: oak_log." in description
        assert "Visible mobs include: cow." in description
        assert "Your health is 18 and your hunger is 20." in description
        assert "Your home is at (10, 64, -3)." in description

    def test_static_provider(self):
        context = AgentContext(players_nearby=["Alex"])
        provider = StaticContextProvider(context)
        assert provider.snapshot() is context
