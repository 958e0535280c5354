"""Snapshot storage for fetched bug records."""

from .manager import StorageManager

__all__ = ["StorageManager"]
