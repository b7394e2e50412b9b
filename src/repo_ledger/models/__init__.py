"""Data models for the ledger."""

from .commit import Clock, Commit, utc_now

__all__ = ["Clock", "Commit", "utc_now"]
