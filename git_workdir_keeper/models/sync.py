"""Sync result model and related enums"""
from enum import Enum
from dataclasses import dataclass

class SyncAction(Enum):
    """How a working directory's objects were brought up to date."""
    CLONE = "clone"
    FETCH = "fetch"

@dataclass
class SyncResult:
    """Outcome of a successful working directory sync."""
    path: str
    ref: str
    commit: str
    action: SyncAction
    cache_path: str

    def __str__(self) -> str:
        """String representation of the sync result."""
        return f"{self.ref} @ {self.commit[:7]} -> {self.path} ({self.action.value})"
