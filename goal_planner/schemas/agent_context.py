"""Read-only agent state consulted when building decomposition prompts."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class Position3D(BaseModel):
    """3D position in the Minecraft world."""
    x: float
    y: float
    z: float


class VisibleMob(BaseModel):
    """A mob the agent can currently see."""
    name: str
    distance: float = Field(..., ge=0)


class AgentContext(BaseModel):
    """Snapshot of the agent's surroundings and memory."""
    position: Optional[Position3D] = None
    players_nearby: List[str] = Field(default_factory=list)
    visible_block_types: Dict[str, Position3D] = Field(
        default_factory=dict, description="Block type name to nearest known position"
    )
    visible_mobs: List[VisibleMob] = Field(default_factory=list)
    health: Optional[float] = Field(None, ge=0, le=20)
    hunger: Optional[float] = Field(None, ge=0, le=20)
    memory: Dict[str, Any] = Field(default_factory=dict, description="Named memories, e.g. home location")

    class Config:
        frozen = True
