"""AccountRecord — an owned copy of one identity-database entry."""

from __future__ import annotations

from pydantic import BaseModel


class AccountRecord(BaseModel):
    """Snapshot of a user account as reported by the OS.

    Values are copied out of the lookup result, so a record stays valid
    no matter how many lookups happen after it was built.
    """

    model_config = {"frozen": True}

    name: str
    uid: int
    gid: int
    gecos: str = ""
    home: str
    shell: str = ""
