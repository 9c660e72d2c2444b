"""Home directory resolver.

``lookup_home`` performs one query against the identity database and
returns a :class:`HomeLookup` carrying either the home path or the
absence value, plus the OS error code when the query itself failed.
``resolve_home`` is the plain ``str | None`` form for embedding, and
:class:`HomeService` adapts the lookup to a :class:`ServiceResult` for
the CLI.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel

from gethome.infrastructure.identity import IdentityDatabase, IdentityLookupError
from gethome.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

LOOKUP_FAILED_MESSAGE = "can't retrieve user's home directory."


class HomeLookup(BaseModel):
    """Outcome of a single home directory query.

    ``errno`` is set only when the OS reported an error for this lookup;
    a plain "no such account" leaves it as None.
    """

    model_config = {"frozen": True}

    username: str
    home: str | None = None
    errno: int | None = None

    @property
    def ok(self) -> bool:
        return self.home is not None


def lookup_home(username: str, database: IdentityDatabase | None = None) -> HomeLookup:
    """Query the identity database for *username*'s home directory."""
    try:
        db = database if database is not None else IdentityDatabase()
        account = db.get_account(username)
    except IdentityLookupError as exc:
        logger.debug("Home lookup for %r failed: %s", username, exc)
        return HomeLookup(username=username, errno=exc.errno)
    if account is None:
        return HomeLookup(username=username)
    return HomeLookup(username=username, home=account.home)


def resolve_home(username: str, database: IdentityDatabase | None = None) -> str | None:
    """Return *username*'s home directory, or None when it can't be found."""
    return lookup_home(username, database).home


class HomeService:
    """Resolve home directories for the command layer."""

    def __init__(self, database: IdentityDatabase | None = None) -> None:
        self._database = database

    def lookup(self, username: str) -> ServiceResult:
        op = "lookup_home"
        found = lookup_home(username, self._database)
        if found.ok:
            return ServiceResult(
                ok=True,
                op=op,
                data={"username": username, "home": found.home},
            )

        detail: dict[str, object] = {"username": username}
        if found.errno is not None:
            detail["errno"] = found.errno
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code="LOOKUP_FAILED" if found.errno is not None else "ACCOUNT_NOT_FOUND",
                message=LOOKUP_FAILED_MESSAGE,
                detail=detail,
            ),
        )
