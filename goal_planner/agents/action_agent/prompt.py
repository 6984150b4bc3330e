"""Prompt for the Action Agent."""

ACTION_PROMPT = """
Decide whether a Minecraft step can be completed in its ENTIRETY by a bot with JUST ONE of these methods:

- mine(goalBlock, count): goes to and extracts count blocks of the given type. Equipment is handled.
  All wood is generic: mine(wood,4) collects 4 wood blocks of any type.
- craft(goalItem, amount): crafts the item. Materials are handled. "Craft x from y" is craft(x).
- place(blockType): places a block of the given type.
- attack(mobType): attacks the nearest mob of that type until it is defeated.
- lootFromMob(mobType, mobLootItem, count): kills mobType until count of mobLootItem is collected.
- smelt(inputItemName, outputItemName, quantity): smelts quantity of input into output. Fuel is handled.
- plantCrop(cropName): plants the crop in farmland. Seeds and tilling are handled.
- harvestCrop(cropName, count or "all"): harvests fully grown crops.
- sortInventory(): sorts the inventory.
- placeChest(): gets and places a chest.
- storeItemInChest(itemName, count): stores count of itemName in a chest.
- retrieveItemFromChest(itemName, count): takes count of itemName out of a chest.
- find_biome(biome, goto): locates a biome, and travels there when goto is True.
- find_block(block, goto): locates a block, and travels there when goto is True.
- activate_end_portal(): activates an end portal.
- activate_nether_portal(): activates a nether portal.
- shoot_with_arrow(target): shoots arrows at target until it is destroyed.
- use_portal(): enters a nether or end portal.
- follow_eye(): follows an eye of ender to the stronghold.

Examples:
Step: Gather 4 wood -> mine(wood,4)
Step: Craft a pickaxe -> craft(pickaxe,1)
Step: Place a stone block -> place(stone)
Step: Attack a zombie -> attack(zombie)
Step: Loot 3 rotten_flesh from a zombie -> lootFromMob(zombie,rotten_flesh,3)
Step: Smelt 5 iron_ore into 5 iron_ingot -> smelt(iron_ore,iron_ingot,5)
Step: Plant wheat -> plantCrop(wheat)
Step: Harvest all carrots -> harvestCrop(carrots,"all")
Step: Store 20 arrows -> storeItemInChest(arrows,20)
Step: Enter the nether -> null
Step: Decorate the house -> null
Step: Look around -> null

Use snake_case Minecraft item names in arguments.
If ONE method completes the step, answer ONLY with that call in the form methodName(argument1, argument2, ...).
Otherwise answer ONLY with null.
"""
