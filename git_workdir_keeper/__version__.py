"""Version information for git-workdir-keeper."""

try:
    from git_workdir_keeper._version import __version__
except ImportError:
    from importlib.metadata import PackageNotFoundError, version

    try:
        __version__ = version("git-workdir-keeper")
    except PackageNotFoundError:
        # Fallback when running from source without an install
        __version__ = "0.0.0+unknown"
