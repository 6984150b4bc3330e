from .agent import create_action_agent

__all__ = ["create_action_agent"]
