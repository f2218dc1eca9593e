"""Command-line argument parsing for git-workdir-keeper."""

import argparse
from git_workdir_keeper.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Synchronize a git working directory to a ref using a shared object cache",
        epilog="The cache directory can also be set with the GIT_WORKDIR_KEEPER_CACHE_DIR "
        "environment variable.",
    )
    parser.add_argument("remote", help="URL of the upstream repository")
    parser.add_argument("ref", help="Branch, tag or revision to check out")
    parser.add_argument(
        "--basedir", default=".", help="Directory the working directory lives under (default: .)"
    )
    parser.add_argument(
        "--dirname", default=None, help="Name of the working directory (default: the ref)"
    )
    parser.add_argument(
        "--cache-dir",
        default=None,
        help="Directory holding the shared object caches (default: ~/.git-workdir-keeper/cache)",
    )
    parser.add_argument("--git", dest="git_executable", default=None, help="Path to the git binary")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument("--version", action="version", version=f"git-workdir-keeper {__version__}")

    return parser.parse_args(argv)
