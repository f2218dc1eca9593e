"""Custom exceptions for git-workdir-keeper"""

from typing import Optional, Sequence


class GitWorkdirKeeperError(Exception):
    """Base exception for all git-workdir-keeper errors."""
    pass


class ConfigError(GitWorkdirKeeperError):
    """Exception raised for invalid configuration values."""
    pass


class ExecutionError(GitWorkdirKeeperError):
    """Exception raised when a git invocation exits with a failure status."""

    def __init__(
        self,
        command: Sequence[str],
        status: Optional[int] = None,
        stderr: Optional[str] = None,
        path: Optional[str] = None,
    ):
        self.command = list(command)
        self.status = status
        self.stderr = (stderr or "").strip()
        self.path = path

        subcommand = next((arg for arg in self.command if not arg.startswith("-")), "git")
        error_msg = f"Git command '{subcommand}' failed"
        if path:
            error_msg += f" in '{path}'"
        if status is not None:
            error_msg += f" (exit status {status})"
        if self.stderr:
            error_msg += f": {self.stderr}"

        super().__init__(error_msg)


class ResolutionError(ExecutionError):
    """Exception raised when a ref cannot be dereferenced to a commit."""

    def __init__(self, ref: str, cache_path: str, cause: Optional[ExecutionError] = None):
        self.ref = ref
        self.cache_path = cache_path
        super().__init__(
            cause.command if cause else ["rev-parse", f"{ref}^{{commit}}"],
            status=cause.status if cause else None,
            stderr=cause.stderr if cause else None,
            path=cache_path,
        )
        # Replace the generic message with one naming the ref
        self.args = (f"Could not resolve ref {ref!r} for git cache {cache_path}",)
