"""Shared bare object cache for a single git remote."""

import os
import re
from typing import Optional

from git_workdir_keeper.services.git.executor import GitExecutor
from git_workdir_keeper.logging_config import get_logger

logger = get_logger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def sanitize_remote(remote: str) -> str:
    """Turn a remote URL into a single filesystem-safe directory name.

    Examples:
        https://github.com/user/repo.git -> https---github.com-user-repo.git
        git@github.com:user/repo.git -> git-github.com-user-repo.git
    """
    name = remote.strip()
    name = re.sub(r"[/:@]", "-", name)
    name = _UNSAFE_CHARS.sub("-", name)
    # Avoid hidden or relative-looking directory names
    return name.strip("-.") or "-"


class ObjectCache:
    """A bare mirror of one remote, used as a reference for working directories.

    The cache owns ``cache_dir/<sanitized remote>``. Working directories
    borrow objects from it through git alternates and fetch from it as a
    regular remote; only :meth:`sync` ever writes to it.
    """

    def __init__(self, remote: str, cache_dir: str, executor: Optional[GitExecutor] = None):
        """Initialize the cache.

        Args:
            remote: URL of the upstream repository
            cache_dir: Directory holding all object caches
            executor: Git command runner (a default one is created if omitted)
        """
        self.remote = remote
        self.cache_dir = cache_dir
        self.executor = executor or GitExecutor()

    @property
    def path(self) -> str:
        """Path of the bare object store for this remote."""
        # Absolute, since working directories store it as a remote URL
        return os.path.abspath(os.path.join(self.cache_dir, sanitize_remote(self.remote)))

    def cached(self) -> bool:
        """Check whether the object store has been created."""
        return os.path.isdir(self.path)

    def sync(self):
        """Bring the object store up to date with the remote.

        Mirrors the remote on first use and fetches with pruning afterwards.

        Raises:
            ExecutionError: If cloning or fetching fails
        """
        if self.cached():
            logger.info(f"Fetching {self.remote} into cache {self.path}")
            self.executor.run(["fetch", "--prune"], git_dir=self.path)
        else:
            logger.info(f"Creating cache for {self.remote} at {self.path}")
            os.makedirs(self.cache_dir, exist_ok=True)
            self.executor.run(["clone", "--mirror", "--", self.remote, self.path])

    def __repr__(self) -> str:
        return f"ObjectCache(remote={self.remote!r}, path={self.path!r})"
