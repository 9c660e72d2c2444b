"""Identity database adapter over the POSIX ``pwd`` module.

This is the only module that talks to the account database.  Every entry
is copied into an :class:`AccountRecord` before it leaves here, and a
failed lookup is reported either as ``None`` (no such account) or as an
:class:`IdentityLookupError` carrying the OS error code.

``pwd.getpwnam`` folds every ``getpwnam_r`` failure except ENOMEM into
``KeyError``, so ENOMEM is the only error code that can be surfaced.
"""

from __future__ import annotations

import errno
import logging
from typing import Any

from gethome.domain.account import AccountRecord

try:
    import pwd
except ImportError:  # pragma: no cover - non-POSIX hosts
    pwd = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)


class IdentityLookupError(Exception):
    """The OS failed to answer an account query.

    Attributes:
        username: The name that was being looked up.
        errno: The system error code, or None when the OS gave none.
    """

    def __init__(self, username: str, errno: int | None, message: str) -> None:
        super().__init__(message)
        self.username = username
        self.errno = errno


class IdentityDatabase:
    """Read-only view of the host's user/account database."""

    def __init__(self) -> None:
        if pwd is None:
            raise IdentityLookupError("", None, "pwd module is not available on this platform")

    def get_account(self, username: str) -> AccountRecord | None:
        """Look up *username*, returning a copied record or None if absent."""
        try:
            entry = pwd.getpwnam(username)
        except KeyError:
            logger.debug("No account entry for %r", username)
            return None
        except ValueError:
            # Names the OS cannot represent (embedded NUL) match no account.
            logger.debug("Unrepresentable username %r", username)
            return None
        except MemoryError as exc:
            raise IdentityLookupError(
                username, errno.ENOMEM, "out of memory during account lookup"
            ) from exc

        logger.debug("Resolved account %r", username)
        return _to_record(entry)


def _to_record(entry: Any) -> AccountRecord:
    return AccountRecord(
        name=str(entry.pw_name),
        uid=int(entry.pw_uid),
        gid=int(entry.pw_gid),
        gecos=str(entry.pw_gecos or ""),
        home=str(entry.pw_dir),
        shell=str(entry.pw_shell or ""),
    )
