"""Registry handing out one ObjectCache per remote."""

import threading
from typing import Dict, Optional
from urllib.parse import urlparse, urlunparse

from git_workdir_keeper.services.git.cache import ObjectCache
from git_workdir_keeper.services.git.executor import GitExecutor
from git_workdir_keeper.logging_config import get_logger

logger = get_logger(__name__)


def normalize_remote(url: str) -> str:
    """
    Normalize a remote URL into a registry key.

    Examples:
        https://GitHub.com/user/repo.git/ -> https://github.com/user/repo
        git@github.com:user/repo.git -> git@github.com:user/repo

    Args:
        url: Git repository URL or path

    Returns:
        Normalized form used to compare remotes
    """
    url = url.strip().rstrip("/")
    if url.endswith(".git"):
        url = url[:-4]

    parsed = urlparse(url)
    if parsed.scheme and parsed.netloc:
        url = urlunparse(parsed._replace(netloc=parsed.netloc.lower()))

    return url


class CacheRegistry:
    """Keeps a single ObjectCache per normalized remote URL."""

    def __init__(self, cache_dir: str, executor: Optional[GitExecutor] = None):
        self.cache_dir = cache_dir
        self.executor = executor or GitExecutor()
        self._caches: Dict[str, ObjectCache] = {}
        self._lock = threading.Lock()

    def get(self, remote: str) -> ObjectCache:
        """Return the cache for a remote, creating it on first request."""
        key = normalize_remote(remote)
        with self._lock:
            cache = self._caches.get(key)
            if cache is None:
                logger.debug(f"Registering object cache for {key}")
                cache = ObjectCache(remote, self.cache_dir, executor=self.executor)
                self._caches[key] = cache
            return cache

    def __contains__(self, remote: str) -> bool:
        with self._lock:
            return normalize_remote(remote) in self._caches

    def __len__(self) -> int:
        with self._lock:
            return len(self._caches)

    def clear(self):
        """Forget all registered caches (on-disk stores are left alone)."""
        with self._lock:
            self._caches.clear()
