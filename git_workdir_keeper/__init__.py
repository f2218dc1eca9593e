"""
git-workdir-keeper - Keep many git working directories in sync from a shared object cache
"""

from .__version__ import __version__
from .services.git import CacheRegistry, GitExecutor, ObjectCache, WorkingDir
from .cli.main import main

__all__ = ["WorkingDir", "ObjectCache", "CacheRegistry", "GitExecutor", "main", "__version__"]
