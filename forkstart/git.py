"""
Git operations for Forkstart.

Clones the fork and registers the canonical repository as "upstream".
Both commands run with inherited stdio so the user sees git's own progress.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .process import ProcessRunner

logger = logging.getLogger(__name__)

UPSTREAM_REMOTE_NAME = "upstream"


class GitCommandError(Exception):
    """A git child process exited with a non-zero status."""
    def __init__(self, message: str, returncode: int):
        super().__init__(message)
        self.returncode = returncode


def fork_remote_url(git_ssh_str: str, fork: str, repo: str) -> str:
    return f"{git_ssh_str}:{fork}/{repo}.git"


def upstream_remote_url(git_ssh_str: str, org: str, repo: str) -> str:
    return f"{git_ssh_str}:{org}/{repo}.git"


def clone_destination(base_path: str | Path, repo: str) -> Path:
    """Absolute path of the clone, resolved against the current directory."""
    return (Path(base_path) / repo).absolute()


def clone_fork(
    runner: ProcessRunner,
    repo: str,
    git_ssh_str: str,
    fork: str,
    base_path: str | Path,
) -> Path:
    """Clone ``<git_ssh_str>:<fork>/<repo>.git`` into ``<base_path>/<repo>``.

    Returns:
        Path of the new clone

    Raises:
        GitCommandError: if git exits non-zero
    """
    remote = fork_remote_url(git_ssh_str, fork, repo)
    destination = clone_destination(base_path, repo)
    logger.info("Cloning %s into %s", remote, destination)

    returncode = runner.run(["git", "clone", remote, str(destination)])
    if returncode != 0:
        raise GitCommandError(f"git clone {remote} failed with exit code {returncode}", returncode)
    return destination


def add_upstream(
    runner: ProcessRunner,
    repo: str,
    git_ssh_str: str,
    org: str,
    base_path: str | Path,
) -> str:
    """Add ``<git_ssh_str>:<org>/<repo>.git`` as the upstream remote of the clone.

    Returns:
        The upstream remote URL

    Raises:
        GitCommandError: if the clone directory is missing or git exits non-zero
    """
    fork_path = clone_destination(base_path, repo)
    remote = upstream_remote_url(git_ssh_str, org, repo)

    if not fork_path.is_dir():
        raise GitCommandError(f"Clone directory not found: {fork_path}", 1)

    logger.info("Adding %s remote %s in %s", UPSTREAM_REMOTE_NAME, remote, fork_path)
    returncode = runner.run(["git", "remote", "add", UPSTREAM_REMOTE_NAME, remote], cwd=fork_path)
    if returncode != 0:
        raise GitCommandError(
            f"git remote add {UPSTREAM_REMOTE_NAME} {remote} failed with exit code {returncode}",
            returncode,
        )
    return remote
