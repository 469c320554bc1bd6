"""Domain layer — wire primitives, message families, and validation rules.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
