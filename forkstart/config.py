"""
Configuration management for Forkstart.

Resolves command-line options against environment defaults:
- Process environment
- .env file in the current directory (or --env-file), never overriding
  variables the process environment already defines
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import click
from dotenv import load_dotenv

from .git import clone_destination, fork_remote_url, upstream_remote_url

logger = logging.getLogger(__name__)

DEFAULT_EDITOR = "code"


@dataclass(frozen=True)
class RequiredOption:
    """A required option and the environment variable it falls back to."""
    field: str
    flag: str
    envvar: str | None = None


REQUIRED_OPTIONS = (
    RequiredOption("repo", "--repo"),
    RequiredOption("git_ssh_str", "--gitSshStr", "DEFAULT_GIT_SSH_STR"),
    RequiredOption("org", "--org", "DEFAULT_ORG"),
    RequiredOption("fork", "--fork", "DEFAULT_FORK"),
    RequiredOption("path", "--path", "HOME"),
    RequiredOption(
        "project_manager_path",
        "--projectManagerPath",
        "DEFAULT_PROJECT_MANAGER_CONFIG_PATH",
    ),
)

SKIP_FLAGS = ("skip_clone", "skip_upstream", "skip_open", "skip_project_manager")


class MissingOptionError(click.UsageError):
    """A required option was given neither on the command line nor in the environment."""

    def __init__(self, option: RequiredOption):
        if option.envvar:
            message = f"Missing option '{option.flag}' (or set {option.envvar})."
        else:
            message = f"Missing option '{option.flag}'."
        super().__init__(message)
        self.option = option


@dataclass(frozen=True)
class ForkConfig:
    """Resolved settings for one run."""
    repo: str
    git_ssh_str: str
    org: str
    fork: str
    path: str
    project_manager_path: str
    editor: str = DEFAULT_EDITOR
    skip_clone: bool = False
    skip_upstream: bool = False
    skip_open: bool = False
    skip_project_manager: bool = False

    @property
    def fork_remote(self) -> str:
        return fork_remote_url(self.git_ssh_str, self.fork, self.repo)

    @property
    def upstream_remote(self) -> str:
        return upstream_remote_url(self.git_ssh_str, self.org, self.repo)

    @property
    def clone_path(self) -> Path:
        return clone_destination(self.path, self.repo)

    @property
    def skips_everything(self) -> bool:
        return all(getattr(self, flag) for flag in SKIP_FLAGS)


def load_environment(env_file: Path | None = None) -> bool:
    """Load a .env file into the process environment.

    Variables already set in the environment take precedence.
    Returns True if a file was found and loaded.
    """
    if env_file is None:
        env_file = Path.cwd() / ".env"
    loaded = load_dotenv(env_file, override=False)
    logger.debug("Loaded environment from %s: %s", env_file, loaded)
    return loaded


def resolve_config(options: Mapping[str, Any], environ: Mapping[str, str] | None = None) -> ForkConfig:
    """Build a ForkConfig from parsed CLI options with environment fallback.

    Raises:
        MissingOptionError: if a required value is absent from both sources
    """
    if environ is None:
        environ = os.environ

    values: dict[str, Any] = {}
    for option in REQUIRED_OPTIONS:
        value = options.get(option.field)
        if value is None and option.envvar:
            value = environ.get(option.envvar)
        if value is None:
            raise MissingOptionError(option)
        values[option.field] = value

    values["editor"] = options.get("editor") or environ.get("DEFAULT_EDITOR") or DEFAULT_EDITOR
    for flag in SKIP_FLAGS:
        values[flag] = bool(options.get(flag, False))

    return ForkConfig(**values)
