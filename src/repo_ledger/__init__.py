"""In-memory version-history ledger."""

from repo_ledger.config import DEFAULT_SETTINGS, LedgerSettings
from repo_ledger.core.ids import (
    CommitIdGenerator,
    reset_identifier_generator,
    shared_generator,
)
from repo_ledger.core.repository import Repository
from repo_ledger.errors import InvalidArgument, LedgerError
from repo_ledger.models.commit import Commit

__all__ = [
    "Commit",
    "CommitIdGenerator",
    "DEFAULT_SETTINGS",
    "InvalidArgument",
    "LedgerError",
    "LedgerSettings",
    "Repository",
    "reset_identifier_generator",
    "shared_generator",
]
