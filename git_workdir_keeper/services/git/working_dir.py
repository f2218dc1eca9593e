"""Working directory synchronization service"""

import os
from typing import Optional

from git_workdir_keeper.config import DEFAULT_CACHE_DIR, DEFAULT_REMOTE_ALIAS
from git_workdir_keeper.exceptions import ExecutionError, ResolutionError
from git_workdir_keeper.models.sync import SyncAction, SyncResult
from git_workdir_keeper.services.git.cache import ObjectCache
from git_workdir_keeper.services.git.executor import GitExecutor
from git_workdir_keeper.logging_config import get_logger

logger = get_logger(__name__)


class WorkingDir:
    """A checked-out copy of one remote at one ref, backed by a shared object cache.

    The working directory is cloned with ``--reference`` so its object data
    lives in the cache through git alternates; only checked out files and
    metadata are stored in the working directory itself.
    """

    def __init__(
        self,
        ref: str,
        remote: str,
        basedir: str,
        dirname: Optional[str] = None,
        cache: Optional[ObjectCache] = None,
        executor: Optional[GitExecutor] = None,
        cache_dir: Optional[str] = None,
        remote_alias: str = DEFAULT_REMOTE_ALIAS,
    ):
        """Initialize the working directory.

        Args:
            ref: Branch, tag or revision expression to check out
            remote: URL of the upstream repository
            basedir: Directory the working directory lives under
            dirname: Name of the working directory (defaults to ref)
            cache: Object cache to use; one is created for remote if omitted
            executor: Git command runner (a default one is created if omitted)
            cache_dir: Where a created cache lives (ignored when cache is given)
            remote_alias: Name of the remote pointing at the cache
        """
        self._ref = ref
        self._remote = remote
        self._basedir = basedir
        self._dirname = dirname or ref
        self._full_path = os.path.join(self._basedir, self._dirname)

        self.executor = executor or GitExecutor()
        if cache is None:
            cache_dir = os.path.expanduser(cache_dir or DEFAULT_CACHE_DIR)
            cache = ObjectCache(remote, cache_dir, executor=self.executor)
        self._cache = cache
        self.remote_alias = remote_alias

    @property
    def ref(self) -> str:
        return self._ref

    @property
    def remote(self) -> str:
        return self._remote

    @property
    def basedir(self) -> str:
        return self._basedir

    @property
    def dirname(self) -> str:
        return self._dirname

    @property
    def full_path(self) -> str:
        return self._full_path

    @property
    def cache(self) -> ObjectCache:
        return self._cache

    def sync(self) -> SyncResult:
        """Synchronize the working directory with the ref.

        Refreshes the object cache, clones or fetches depending on whether
        the directory already holds a repository, and hard-resets the tree
        to the commit the ref resolves to in the cache.

        Returns:
            SyncResult describing what was done

        Raises:
            ResolutionError: If the ref does not resolve to a commit
            ExecutionError: If any git command fails
        """
        # TODO: skip the cache refresh when it was already synced recently
        self._cache.sync()

        if self.cloned():
            self._fetch()
            action = SyncAction.FETCH
        else:
            self._clone()
            action = SyncAction.CLONE

        commit = self._reset()
        logger.info(f"Synced {self._full_path} to {self._ref} ({commit[:7]}) via {action.value}")

        return SyncResult(
            path=self._full_path,
            ref=self._ref,
            commit=commit,
            action=action,
            cache_path=self._cache.path,
        )

    def cloned(self) -> bool:
        """Check if the repository has been cloned into the working directory.

        Returns:
            True if a .git directory exists in the working directory
        """
        return os.path.isdir(os.path.join(self._full_path, ".git"))

    def head(self) -> Optional[str]:
        """Get the commit currently checked out, or None if not cloned."""
        if not self.cloned():
            return None
        return self.executor.run(["rev-parse", "HEAD"], path=self._full_path).strip()

    def _clone(self):
        """Perform a non-bare clone that borrows objects from the cache."""
        # Clone from the real remote so that origin stays usable for a
        # normal pull, with objects supplied by the cache
        cache_path = self._cache.path
        logger.debug(f"Cloning {self._remote} into {self._full_path} with reference {cache_path}")
        self.executor.run(["clone", "--reference", cache_path, "--", self._remote, self._full_path])
        self.executor.run(["remote", "add", self.remote_alias, cache_path], path=self._full_path)

    def _fetch(self):
        """Fetch from the cache remote into an existing clone."""
        # The cache path is derived from the remote and may have moved
        # since the clone, so repoint the alias every time
        cache_path = self._cache.path
        logger.debug(f"Fetching {self.remote_alias} ({cache_path}) into {self._full_path}")
        self.executor.run(["remote", "set-url", self.remote_alias, cache_path], path=self._full_path)
        self.executor.run(["fetch", "--prune", self.remote_alias], path=self._full_path)

    def _reset(self) -> str:
        """Hard-reset the working tree to the commit the ref resolves to.

        Returns:
            The commit the working tree was reset to
        """
        commit = self._resolve_commit(self._ref)

        try:
            self.executor.run(["reset", "--hard", commit], path=self._full_path)
        except ExecutionError:
            logger.error(f"Unable to locate commit object {commit} in git repo {self._full_path}")
            raise

        return commit

    def _resolve_commit(self, ref: str) -> str:
        """Resolve a ref to a commit hash using the cache's object store.

        The ref must name exactly one object that peels to a commit; ambiguous
        or non-commit refs fail like missing ones.

        Args:
            ref: Branch, tag or revision expression

        Returns:
            The full hash of the commit ref points to
        """
        cache_path = self._cache.path
        try:
            commit = self.executor.run(
                ["rev-parse", "--verify", f"{ref}^{{commit}}"],
                git_dir=cache_path,
            )
        except ExecutionError as e:
            logger.error(f"Could not resolve ref {ref!r} for git cache {cache_path}")
            raise ResolutionError(ref, cache_path, cause=e) from e

        return commit.strip()

    def __repr__(self) -> str:
        return f"WorkingDir(ref={self._ref!r}, remote={self._remote!r}, path={self._full_path!r})"
