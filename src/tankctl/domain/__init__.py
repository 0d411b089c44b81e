"""Domain layer — unit conversion, calculators, and rule tables.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
