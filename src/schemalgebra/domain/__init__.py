"""Domain layer — descriptor model, JSON value kinds, membership.

This layer depends only on stdlib and pydantic.
It must never import from algebra, services, commands, config, or output.
"""
