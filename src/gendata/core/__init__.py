"""Owning collections for attached records."""

from gendata.core.store import DataStore

__all__ = ["DataStore"]
