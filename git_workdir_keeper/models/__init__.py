"""Data models for git-workdir-keeper."""

from .sync import SyncAction, SyncResult

__all__ = ["SyncAction", "SyncResult"]
