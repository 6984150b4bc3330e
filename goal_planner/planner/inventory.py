"""
Inventory projection - simulated resource effects of recognized action calls
"""

from typing import Dict, Mapping

from .action_calls import ActionKind, ParsedCall, UnrecognizedCall, parse_action_call


def _add(inventory: Dict[str, int], item: str, count: int) -> None:
    if count > 0:
        inventory[item] = inventory.get(item, 0) + count


def apply_parsed(call: ParsedCall, inventory: Mapping[str, int]) -> Dict[str, int]:
    """Apply an already-parsed call to a copy of `inventory`."""
    projected = dict(inventory)

    if isinstance(call, UnrecognizedCall):
        return projected

    if call.kind is ActionKind.MINE:
        _add(projected, call.args[0], call.count_arg(1))
    elif call.kind is ActionKind.LOOT_FROM_MOB:
        # The mob argument does not affect the inventory
        _add(projected, call.args[1], call.count_arg(2))
    elif call.kind is ActionKind.CRAFT:
        # Ingredients are not consumed; only the crafted output is projected
        _add(projected, call.args[0], call.count_arg(1, default=1))
    elif call.kind is ActionKind.SMELT:
        source, output = call.args[0], call.args[1]
        moved = min(projected.get(source, 0), call.count_arg(2))
        if source in projected:
            projected[source] -= moved
        _add(projected, output, moved)
    elif call.kind is ActionKind.HARVEST_CROP:
        _add(projected, call.args[0], call.count_arg(1))

    return projected


def apply_action(action_call: str, inventory: Mapping[str, int]) -> Dict[str, int]:
    """Project `inventory` forward through one action call.

    Pure: the input mapping is never modified and a new dict is always
    returned. Unknown call shapes pass the inventory through unchanged.

    Args:
        action_call: Action string such as "smelt(iron_ore, iron_ingot, 5)"
        inventory: Current item name to count mapping

    Returns:
        New item name to count mapping after the action
    """
    return apply_parsed(parse_action_call(action_call), inventory)


def format_inventory(inventory: Mapping[str, int]) -> str:
    """Render an inventory as "item(qty), item(qty)" for prompts."""
    return ", ".join(f"{item}({count})" for item, count in inventory.items())
