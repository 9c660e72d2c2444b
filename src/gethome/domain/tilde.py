"""Tilde expansion for shell-style paths.

``~`` and ``~/...`` expand from ``$HOME``; ``~user`` and ``~user/...``
expand from that user's account entry.  Anything that can't be expanded
is returned untouched.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping


def expand_tilde(
    text: str,
    *,
    resolve: Callable[[str], str | None] | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Expand a leading ``~`` or ``~user`` prefix in *text*.

    Args:
        text: The word to expand.
        resolve: Username to home directory lookup. Defaults to
            :func:`gethome.services.resolver.resolve_home`.
        environ: Environment used for bare ``~``. Defaults to ``os.environ``.
    """
    if not text.startswith("~"):
        return text

    slash = text.find("/")
    if slash == 1 or text == "~":
        env = os.environ if environ is None else environ
        home = env.get("HOME")
        if home is None:
            return text
        return home + text[1:]

    if resolve is None:
        from gethome.services.resolver import resolve_home

        resolve = resolve_home

    end = slash if slash != -1 else len(text)
    home = resolve(text[1:end])
    if home is None:
        return text
    return home + text[end:]
