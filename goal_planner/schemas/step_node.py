"""Plan tree node schema and its wire representation."""

import uuid
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


def new_node_id() -> str:
    """Process-unique node identifier."""
    return str(uuid.uuid4())


class StepNode(BaseModel):
    """One unit of work in a goal plan tree."""
    id: str = Field(default_factory=new_node_id, description="Unique node identifier")
    parent_id: Optional[str] = Field(None, alias="parentId", description="Owning node id, None for the root")
    step: str = Field(..., description="Natural-language or structured description of the work")
    func_call: Optional[str] = Field(None, alias="funcCall", description="Action call for terminal nodes")
    completion_criteria: Optional[str] = Field(None, alias="completionCriteria")
    level: int = Field(..., ge=0, description="Depth in the tree, root is 0")
    step_number: int = Field(..., ge=0, alias="stepNumber", description="Materialization order")
    projected_inventory: Dict[str, int] = Field(default_factory=dict, alias="projectedInventory")
    debug_prompt: Optional[str] = Field(None, alias="debugPrompt", description="Prompt that produced this node")

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator("projected_inventory")
    @classmethod
    def _counts_not_negative(cls, value: Dict[str, int]) -> Dict[str, int]:
        for item, count in value.items():
            if count < 0:
                raise ValueError(f"inventory count for {item} is negative: {count}")
        return value

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def is_terminal(self) -> bool:
        return self.func_call is not None

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready dict using the observer's camelCase field names."""
        data = self.model_dump(by_alias=True)
        if data["debugPrompt"] is None:
            del data["debugPrompt"]
        return data


def tree_to_wire(nodes: List[StepNode]) -> List[Dict[str, Any]]:
    """Serialize a flat node list for a remote observer."""
    return [node.to_wire() for node in nodes]
