"""Root ``get-home`` command: print a user's home directory."""

from __future__ import annotations

import click

from gethome import __version__
from gethome.commands._context import AppContext
from gethome.config.settings import GetHomeSettings


@click.command()
@click.version_option(version=__version__, prog_name="get-home")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.argument("username", required=False)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    username: str | None,
) -> None:
    """Print the home directory of USERNAME."""
    if username is None:
        ctx.exit(1)

    settings = GetHomeSettings.from_cli(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)

    from gethome.services.resolver import HomeService

    app.emit(HomeService().lookup(username))
