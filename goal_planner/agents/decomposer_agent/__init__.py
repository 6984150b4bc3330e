from .agent import create_decomposer_agent

__all__ = ["create_decomposer_agent"]
