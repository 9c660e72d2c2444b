"""Infrastructure layer — access to the OS identity database.

This layer depends on stdlib and the domain models it fills.
It must never import from services, commands, config, or output.
"""
