"""Goal decomposition planner - incremental tree search over oracle answers"""

from .action_calls import ActionKind, ParsedCall, RecognizedCall, UnrecognizedCall, parse_action_call
from .cancellation import CancelToken
from .context import ContextProvider, StaticContextProvider, format_context, summarize_context
from .decomposition import Decomposer, Decomposition, build_breakdown_prompt, parse_breakdown
from .errors import OracleError, OracleResponseError, OracleTimeoutError, PlanCancelledError, PlannerError
from .inventory import apply_action, format_inventory
from .oracle import TextOracle
from .terminal_check import ActionCheck, ActionRecognizer, interpret_action_response
from .tree_search import GoalTreeSearch, PlanSnapshot, build_goal_tree, stream_goal_tree

__all__ = [
    "ActionKind",
    "ParsedCall",
    "RecognizedCall",
    "UnrecognizedCall",
    "parse_action_call",
    "apply_action",
    "format_inventory",
    "CancelToken",
    "ContextProvider",
    "StaticContextProvider",
    "summarize_context",
    "format_context",
    "TextOracle",
    "Decomposer",
    "Decomposition",
    "build_breakdown_prompt",
    "parse_breakdown",
    "ActionCheck",
    "ActionRecognizer",
    "interpret_action_response",
    "GoalTreeSearch",
    "PlanSnapshot",
    "build_goal_tree",
    "stream_goal_tree",
    "PlannerError",
    "OracleError",
    "OracleResponseError",
    "OracleTimeoutError",
    "PlanCancelledError",
]
