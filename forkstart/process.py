"""
Child process launching for Forkstart.

Every external command (git, the editor) goes through a ProcessRunner so the
pipeline can be exercised without touching git or the network.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

logger = logging.getLogger(__name__)

# Executables with these suffixes are batch scripts and must go through the shell
SHELL_SUFFIXES = {".cmd", ".bat"}


def needs_shell(executable: str) -> bool:
    """Return True if launching ``executable`` requires shell interpretation.

    On Windows, command-line entry points such as ``code`` are installed as
    ``code.cmd``; CreateProcess cannot run those directly.
    """
    resolved = shutil.which(executable)
    if resolved is None:
        return False
    return Path(resolved).suffix.lower() in SHELL_SUFFIXES


class ProcessRunner(ABC):
    """Interface for launching child processes."""

    @abstractmethod
    def run(self, args: list[str], cwd: Path | None = None) -> int:
        """Run a command to completion with inherited stdio.

        Returns:
            The child's exit code
        """
        ...

    @abstractmethod
    def spawn(self, args: list[str], cwd: Path | None = None) -> None:
        """Start a command and return without waiting for it."""
        ...


class RealProcessRunner(ProcessRunner):
    """Launch commands with subprocess. No timeouts are applied."""

    def run(self, args: list[str], cwd: Path | None = None) -> int:
        logger.debug("Running %s (cwd=%s)", args, cwd)
        result = subprocess.run(args, cwd=cwd, check=False)
        logger.debug("%s exited with %d", args[0], result.returncode)
        return result.returncode

    def spawn(self, args: list[str], cwd: Path | None = None) -> None:
        shell = needs_shell(args[0])
        logger.debug("Spawning %s (shell=%s)", args, shell)
        if shell:
            subprocess.Popen(subprocess.list2cmdline(args), cwd=cwd, shell=True)
        else:
            subprocess.Popen(args, cwd=cwd)
