"""Configuration handling for git-workdir-keeper"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from git_workdir_keeper.exceptions import ConfigError


DEFAULT_CACHE_DIR = os.path.join("~", ".git-workdir-keeper", "cache")
DEFAULT_REMOTE_ALIAS = "cache"

ENV_CACHE_DIR = "GIT_WORKDIR_KEEPER_CACHE_DIR"
ENV_GIT_EXECUTABLE = "GIT_WORKDIR_KEEPER_GIT"


@dataclass
class Config:
    """Configuration for git-workdir-keeper with validation."""

    # Object cache location
    cache_dir: str = DEFAULT_CACHE_DIR

    # Git invocation
    git_executable: Optional[str] = None
    remote_alias: str = DEFAULT_REMOTE_ALIAS

    # Output
    verbose: bool = False
    debug: bool = False

    _fields = (
        "cache_dir",
        "git_executable",
        "remote_alias",
        "verbose",
        "debug",
    )

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_cache_dir()
        self._validate_remote_alias()

    def _validate_cache_dir(self):
        """Validate cache_dir is not empty and expand the user directory."""
        if not self.cache_dir or not str(self.cache_dir).strip():
            raise ConfigError("cache_dir cannot be empty")
        self.cache_dir = os.path.expanduser(str(self.cache_dir).strip())

    def _validate_remote_alias(self):
        """Validate remote_alias is a usable git remote name."""
        if not self.remote_alias or any(ch.isspace() for ch in self.remote_alias):
            raise ConfigError(f"remote_alias must be a non-empty name without whitespace, got {self.remote_alias!r}")

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {key: getattr(self, key) for key in self._fields}

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in config_dict.items() if k in cls._fields}
        return cls(**filtered)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "Config":
        """Create Config from environment variables, then apply overrides.

        Overrides whose value is None are ignored so that unset CLI options
        do not mask the environment.
        """
        environ = os.environ if environ is None else environ
        values = {}
        if environ.get(ENV_CACHE_DIR):
            values["cache_dir"] = environ[ENV_CACHE_DIR]
        if environ.get(ENV_GIT_EXECUTABLE):
            values["git_executable"] = environ[ENV_GIT_EXECUTABLE]
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_dict(values)
