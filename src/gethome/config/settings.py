"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``GETHOME_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class GetHomeSettings(BaseSettings):
    """Settings for the ``get-home`` CLI, frozen after construction.

    Stored on the :class:`~gethome.commands._context.AppContext` created
    by the root command.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GETHOME_",
    }

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> GetHomeSettings:
        """Construct settings from a CLI invocation.

        Flags left at their off value are dropped so they don't mask
        values coming from the environment.
        """
        overrides = {name: value for name, value in cli_flags.items() if value}
        return cls(**overrides)
