"""Bridge module - relays planning events to remote observers"""

from .plan_stream import PlanStreamServer

__all__ = ["PlanStreamServer"]
