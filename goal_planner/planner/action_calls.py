"""
Action call grammar - turns oracle action strings into a closed set of variants
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union

_CALL_PATTERN = re.compile(r"^\s*([A-Za-z_][A-Za-z0-9_]*)\s*\((.*)\)\s*;?\s*$", re.DOTALL)
_QUOTES = "\"'`"


class ActionKind(str, Enum):
    """Action calls whose inventory effect is simulated"""

    MINE = "mine"
    LOOT_FROM_MOB = "lootfrommob"
    CRAFT = "craft"
    SMELT = "smelt"
    HARVEST_CROP = "harvestcrop"


# Accepted argument counts per action, as (minimum, maximum)
_ARITY: Dict[ActionKind, Tuple[int, int]] = {
    ActionKind.MINE: (2, 2),
    ActionKind.LOOT_FROM_MOB: (3, 3),
    ActionKind.CRAFT: (1, 2),
    ActionKind.SMELT: (3, 3),
    ActionKind.HARVEST_CROP: (2, 2),
}


@dataclass(frozen=True)
class RecognizedCall:
    """A call with a known name and a valid number of arguments"""

    kind: ActionKind
    args: Tuple[str, ...]

    def count_arg(self, index: int, default: int = 0) -> int:
        """Integer argument at `index`; unparseable or negative values count as zero."""
        if index >= len(self.args):
            return default
        try:
            value = int(self.args[index])
        except ValueError:
            return 0
        return max(value, 0)


@dataclass(frozen=True)
class UnrecognizedCall:
    """Anything the grammar does not model; passes through the simulator untouched"""

    raw: str


ParsedCall = Union[RecognizedCall, UnrecognizedCall]


def _split_args(arg_text: str) -> Tuple[str, ...]:
    if not arg_text.strip():
        return ()
    return tuple(arg.strip().strip(_QUOTES).strip() for arg in arg_text.split(","))


def parse_action_call(action_call: str) -> ParsedCall:
    """Parse `name(arg, ...)` into a RecognizedCall or an UnrecognizedCall.

    Call names match case-insensitively. Wrong argument counts and unknown
    names are unrecognized, never errors.
    """
    match = _CALL_PATTERN.match(action_call)
    if not match:
        return UnrecognizedCall(action_call)

    name, arg_text = match.groups()
    try:
        kind = ActionKind(name.lower())
    except ValueError:
        return UnrecognizedCall(action_call)

    args = _split_args(arg_text)
    low, high = _ARITY[kind]
    if not low <= len(args) <= high:
        return UnrecognizedCall(action_call)

    return RecognizedCall(kind, args)
