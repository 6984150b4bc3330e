"""
Main entry point for the Minecraft Goal Planner
"""

from goal_planner.__main__ import run

if __name__ == "__main__":
    run()
