"""gethome — resolve an account name to its home directory."""

from __future__ import annotations

from gethome.domain.tilde import expand_tilde
from gethome.services.resolver import HomeLookup, lookup_home, resolve_home

__version__ = "0.1.0"

__all__ = ["HomeLookup", "__version__", "expand_tilde", "lookup_home", "resolve_home"]
