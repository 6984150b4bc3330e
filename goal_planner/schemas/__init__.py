"""Schema definitions for plan trees, agent context and observer events."""

from .agent_context import *
from .plan_events import *
from .step_node import *

__all__ = [
    # Plan tree
    "StepNode",
    "new_node_id",
    "tree_to_wire",
    # Agent context
    "Position3D",
    "VisibleMob",
    "AgentContext",
    # Observer messages
    "StartGoalPlanRequest",
    "HeartbeatRequest",
    "ObserverRequest",
    "GoalPlanProgressEvent",
    "GoalPlanCompleteEvent",
    "GoalPlanErrorEvent",
    "HeartbeatAckEvent",
]
