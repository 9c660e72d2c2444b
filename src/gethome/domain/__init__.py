"""Domain layer — account types and path rules.

This layer depends only on stdlib and pydantic.
It must never import from infrastructure, commands, config, or output.
"""
