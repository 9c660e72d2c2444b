"""Shared pytest fixtures and test helpers for gethome tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from gethome.domain.account import AccountRecord
from gethome.infrastructure.identity import IdentityLookupError

ACCOUNTS = {
    "root": AccountRecord(name="root", uid=0, gid=0, gecos="root", home="/root", shell="/bin/sh"),
    "alice": AccountRecord(name="alice", uid=1000, gid=1000, home="/home/alice"),
}


class FakeIdentityDatabase:
    """Dict-backed stand-in for the OS account database."""

    def __init__(self, failures: dict[str, int] | None = None) -> None:
        self.accounts = dict(ACCOUNTS)
        self.failures = failures or {}
        self.calls: list[str] = []

    def get_account(self, username: str) -> AccountRecord | None:
        self.calls.append(username)
        if username in self.failures:
            raise IdentityLookupError(username, self.failures[username], "lookup failed")
        return self.accounts.get(username)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fake_db() -> FakeIdentityDatabase:
    return FakeIdentityDatabase(failures={"flaky": 12})


@pytest.fixture
def _fake_identity(fake_db: FakeIdentityDatabase, monkeypatch: pytest.MonkeyPatch) -> None:
    """Route every default-constructed IdentityDatabase to ``fake_db``."""
    monkeypatch.setattr("gethome.services.resolver.IdentityDatabase", lambda: fake_db)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the gethome logger after each test."""
    pkg = logging.getLogger("gethome")
    handlers = pkg.handlers[:]
    level = pkg.level
    propagate = pkg.propagate
    yield
    pkg.handlers = handlers
    pkg.setLevel(level)
    pkg.propagate = propagate


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GETHOME_JSON_OUTPUT", "GETHOME_VERBOSE", "GETHOME_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
