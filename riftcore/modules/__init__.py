"""
Domain modules for Rift Core.

- shared: domain exceptions, validators, formulas, seeded RNG, weighted choice
- rift: decay engine, corruptions, run context
- loot: tier roller and curves, crafting drops
- cards: static card catalog
- enemy: zone config and enemy profile generator
"""
