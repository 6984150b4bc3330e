"""Minecraft goal planner - breaks natural-language goals into executable action trees"""

__version__ = "0.1.0"
