"""Allow ``python -m gethome``."""

from gethome.cli import cli

cli()
