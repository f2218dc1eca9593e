"""Git command execution service"""

import git
from typing import List, Optional, Sequence

from git_workdir_keeper.exceptions import ExecutionError
from git_workdir_keeper.logging_config import get_logger

logger = get_logger(__name__)


class GitExecutor:
    """Runs git commands built from explicit argument lists.

    Arguments are never joined into a shell string, so remotes, refs and
    paths containing spaces or shell metacharacters reach git unchanged.
    """

    def __init__(self, git_executable: Optional[str] = None):
        """Initialize the executor.

        Args:
            git_executable: Path to the git binary (defaults to GitPython's)
        """
        self.git_executable = git_executable

    def build(self, args: Sequence[str], git_dir: Optional[str] = None) -> List[str]:
        """Build the full argv for a git command.

        Args:
            args: Git subcommand and its arguments
            git_dir: Optional object store to run against (--git-dir)

        Returns:
            List of arguments starting with the git executable
        """
        executable = self.git_executable or git.Git.GIT_PYTHON_GIT_EXECUTABLE or "git"
        command = [executable]
        if git_dir is not None:
            command.append(f"--git-dir={git_dir}")
        command.extend(str(arg) for arg in args)
        return command

    def run(self, args: Sequence[str], path: Optional[str] = None, git_dir: Optional[str] = None) -> str:
        """Run a git command and return its output.

        Args:
            args: Git subcommand and its arguments
            path: Working directory for the command
            git_dir: Optional object store to run against (--git-dir)

        Returns:
            Standard output with the trailing newline stripped

        Raises:
            ExecutionError: If git could not be started or exited non-zero
        """
        command = self.build(args, git_dir=git_dir)
        logger.debug(f"Running {' '.join(command)}" + (f" in {path}" if path else ""))

        try:
            status, stdout, stderr = git.Git(path).execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
            )
        except git.exc.GitCommandNotFound as e:
            logger.debug(f"Git executable not found: {e}")
            raise ExecutionError(command[1:], status=None, stderr=str(e), path=path or git_dir) from e

        if status != 0:
            logger.debug(f"Command {' '.join(command)} exited with {status}: {stderr}")
            raise ExecutionError(command[1:], status=status, stderr=stderr, path=path or git_dir)

        return stdout
