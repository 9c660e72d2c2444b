"""AppContext — settings, logging setup, and result emission for the CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gethome.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from gethome.config.settings import GetHomeSettings
    from gethome.services.result import ServiceResult


class AppContext:
    """Per-invocation context built by the root command."""

    def __init__(self, settings: GetHomeSettings) -> None:
        self.settings = settings

        from gethome.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Write a successful result to stdout, or a failure to stderr and exit 1."""
        output = format_result(
            result, settings=OutputSettings(json_output=self.settings.json_output)
        )
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
