"""Git-related services for git-workdir-keeper."""

from .executor import GitExecutor
from .cache import ObjectCache
from .registry import CacheRegistry
from .working_dir import WorkingDir

__all__ = [
    "GitExecutor",
    "ObjectCache",
    "CacheRegistry",
    "WorkingDir",
]
