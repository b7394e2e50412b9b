"""Exceptions raised by the ledger."""


class LedgerError(Exception):
    """Base class for ledger errors."""


class InvalidArgument(LedgerError, ValueError):
    """Raised when an operation receives a malformed argument."""
