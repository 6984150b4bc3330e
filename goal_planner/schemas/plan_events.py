"""Messages exchanged with a remote plan observer."""

from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from .step_node import StepNode, tree_to_wire


# Requests from the observer
class StartGoalPlanRequest(BaseModel):
    """Ask the server to plan a goal."""
    type: Literal["startGoalPlan"] = "startGoalPlan"
    goal: str = Field(..., min_length=1)
    mode: Literal["bfs", "dfs"] = "bfs"


class HeartbeatRequest(BaseModel):
    """Keepalive ping."""
    type: Literal["heartbeat"] = "heartbeat"


# "type" selects the request model and must be present
ObserverRequest = TypeAdapter(
    Annotated[Union[StartGoalPlanRequest, HeartbeatRequest], Field(discriminator="type")],
)


# Events sent to the observer
class GoalPlanProgressEvent(BaseModel):
    """In-progress flat tree, sent after every expansion."""
    type: Literal["goalPlanProgress"] = "goalPlanProgress"
    tree: List[Dict[str, Any]]

    @classmethod
    def from_nodes(cls, nodes: List[StepNode]) -> "GoalPlanProgressEvent":
        return cls(tree=tree_to_wire(nodes))


class GoalPlanCompleteEvent(BaseModel):
    """Final flat tree once the search terminates normally."""
    type: Literal["goalPlanComplete"] = "goalPlanComplete"
    tree: List[Dict[str, Any]]

    @classmethod
    def from_nodes(cls, nodes: List[StepNode]) -> "GoalPlanCompleteEvent":
        return cls(tree=tree_to_wire(nodes))


class GoalPlanErrorEvent(BaseModel):
    """Fatal planning failure."""
    type: Literal["goalPlanError"] = "goalPlanError"
    message: str


class HeartbeatAckEvent(BaseModel):
    type: Literal["heartbeat_ack"] = "heartbeat_ack"
