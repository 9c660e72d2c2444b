"""Human and JSON rendering of ServiceResult.

Human mode produces the fixed line formats of the ``get-home`` tool:
``home: <path>`` on success, ``Error: <message>`` (plus ``errno: <code>``
when the OS reported one) on failure.  Paths are written exactly as the
account database returned them.  JSON mode dumps the whole result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gethome.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode flags taken from the CLI settings."""

    json_output: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display, without a trailing newline."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        return f"home: {result.data.get('home', '')}"

    if result.error is None:
        return "Error: Unknown error"
    lines = [f"Error: {result.error.message}"]
    errno = result.error.detail.get("errno")
    if errno is not None:
        lines.append(f"errno: {errno}")
    return "\n".join(lines)
