"""Pytest fixtures for git-workdir-keeper tests"""
import logging
import tempfile
from pathlib import Path
from unittest.mock import Mock
import pytest
import git

from git_workdir_keeper.services.git import GitExecutor, ObjectCache


def commit_file(repo, name, content, message):
    """Write a file into a repository and commit it."""
    path = Path(repo.working_dir) / name
    path.write_text(content)
    repo.index.add([name])
    return repo.index.commit(message)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def upstream_repo(temp_dir):
    """Create a real upstream repository with a branch and an annotated tag.

    History:
        main:    Initial commit -> Release 1.2.0 (tag v1.2.0) -> Post-release work
        develop: branches from Release 1.2.0 with one extra commit
    """
    repo_path = temp_dir / "upstream"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits and tags
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    commit_file(repo, "README.md", "# Test Repository\n", "Initial commit")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except Exception:
        pass

    commit_file(repo, "VERSION", "1.2.0\n", "Release 1.2.0")
    repo.create_tag('v1.2.0', message='Version 1.2.0')

    repo.git.checkout('-b', 'develop')
    commit_file(repo, "feature.txt", "Feature content\n", "Add feature")

    repo.git.checkout('main')
    commit_file(repo, "VERSION", "1.3.0-dev\n", "Post-release work")

    yield repo

    repo.close()


@pytest.fixture
def remote_url(upstream_repo):
    """The upstream repository as a remote URL (a plain local path)."""
    return upstream_repo.working_dir


@pytest.fixture
def cache_dir(temp_dir):
    """Directory holding object caches."""
    return str(temp_dir / "cache")


@pytest.fixture
def basedir(temp_dir):
    """Directory holding working directories."""
    path = temp_dir / "environments"
    path.mkdir()
    return str(path)


@pytest.fixture
def object_cache(remote_url, cache_dir):
    """Create a real object cache for the upstream repository."""
    return ObjectCache(remote_url, cache_dir)


@pytest.fixture
def mock_cache():
    """Create a mock ObjectCache that never touches the disk."""
    cache = Mock(spec=ObjectCache)
    cache.path = "/fake/cache/repo.git"
    cache.remote = "https://example/repo.git"
    return cache


@pytest.fixture
def mock_executor():
    """Create a mock GitExecutor that pretends every ref resolves."""
    executor = Mock(spec=GitExecutor)

    def fake_run(args, path=None, git_dir=None):
        if args[0] == "rev-parse":
            return "0123456789abcdef0123456789abcdef01234567\n"
        return ""

    executor.run.side_effect = fake_run
    return executor


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            handler.close()
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def make_commit():
    """Provide a helper that writes a file into a repository and commits it."""
    return commit_file
