"""
Command line interface for the Minecraft goal planner
Plans a goal with ADK oracles and prints the growing tree, or serves plans over WebSocket
"""

import argparse
import json
import sys
from functools import partial
from typing import List, Optional

from .agents import create_planner_oracles
from .bridge import PlanStreamServer
from .config import PlannerConfig, get_config, setup_google_ai_credentials
from .logging_config import get_logger, setup_logging
from .planner import GoalTreeSearch, PlannerError
from .planner.context import ContextProvider
from .schemas import StepNode, tree_to_wire
from .terminal_render import render_tree

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None, config: Optional[PlannerConfig] = None):
    """Parse command line arguments

    Returns:
        Parsed arguments
    """
    config = config or get_config()
    parser = argparse.ArgumentParser(description="Minecraft Goal Planner - break a goal into executable steps")
    parser.add_argument("goal", nargs="?", help="Goal to plan (e.g., 'get an iron sword')")
    parser.add_argument(
        "--mode", "-m", choices=["bfs", "dfs"], default=config.search_mode, help="Frontier traversal order"
    )
    parser.add_argument("--json", action="store_true", help="Print the final tree as wire-format JSON")
    parser.add_argument("--quiet", "-q", action="store_true", help="Only print the final tree")
    parser.add_argument("--inventory", action="store_true", help="Show projected inventory on action steps")
    parser.add_argument("--serve", action="store_true", help="Serve plans to WebSocket observers")
    return parser.parse_args(argv)


def make_planner_factory(config: PlannerConfig, context_provider: Optional[ContextProvider] = None):
    """Build a per-request GoalTreeSearch factory on ADK oracles"""
    decomposer, recognizer = create_planner_oracles(config)

    def factory(mode: str) -> GoalTreeSearch:
        return GoalTreeSearch(
            decomposer,
            recognizer,
            mode=mode,
            context_provider=context_provider,
            oracle_timeout_s=config.oracle_timeout_s,
        )

    return factory


def print_progress(nodes: List[StepNode], show_inventory: bool = False) -> None:
    print(f"\n--- {len(nodes)} steps planned ---", file=sys.stderr)
    print(render_tree(nodes, show_inventory=show_inventory), file=sys.stderr)


async def plan_goal(search: GoalTreeSearch, args) -> List[StepNode]:
    """Run one search, echoing progress unless --quiet or --json was given"""
    progress = None
    if not (args.quiet or args.json):
        progress = partial(print_progress, show_inventory=args.inventory)

    nodes = await search.run(args.goal, progress_callback=progress)

    if args.json:
        print(json.dumps(tree_to_wire(nodes), indent=2))
    else:
        print(render_tree(nodes, show_inventory=args.inventory))
    return nodes


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the goal planner"""
    config = get_config()
    args = parse_args(argv, config)

    setup_logging(
        log_level=config.log_level,
        log_file=config.log_file,
        console_output=True,
        json_format=config.log_json_format,
        google_log_level=config.google_log_level,
    )

    if not args.serve and not args.goal:
        print("Examples:")
        print("  python main.py 'get an iron sword'")
        print("  python main.py 'build a house' --mode dfs --inventory")
        print("  python main.py --serve")
        return 2

    try:
        setup_google_ai_credentials(config)
        logger.info("Google AI credentials configured successfully")
    except ValueError as e:
        logger.error(f"Failed to setup Google AI credentials: {e}")
        return 1

    factory = make_planner_factory(config)

    if args.serve:
        server = PlanStreamServer(
            factory, host=config.stream_host, port=config.stream_port, queue_size=config.progress_queue_size
        )
        await server.serve_forever()
        return 0

    try:
        await plan_goal(factory(args.mode), args)
    except PlannerError as e:
        logger.error(f"Goal planning failed: {e}")
        return 1
    return 0
