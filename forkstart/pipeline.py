"""
Fork setup pipeline.

Runs each step in order, skipping those turned off in the config:

    clone -> upstream -> project manager -> open

A failing step raises and nothing after it runs.
"""

from __future__ import annotations

from typing import Callable

import click

from .config import ForkConfig
from .editor import open_in_editor
from .git import add_upstream, clone_fork
from .process import ProcessRunner
from .project_manager import add_project


class NothingToDoError(Exception):
    """Every step was skipped."""


def setup_fork(
    config: ForkConfig,
    runner: ProcessRunner,
    echo: Callable[..., None] = click.echo,
) -> None:
    """Set up a fork according to ``config``.

    Raises:
        NothingToDoError: if every step is skipped
        GitCommandError: if clone or remote add fails
        ProjectManagerError: if the registry file cannot be read
    """
    if config.skips_everything:
        raise NothingToDoError("Nothing to do")

    clone_path = config.clone_path

    if not config.skip_clone:
        echo(f"📦 Cloning {config.fork_remote}...")
        clone_fork(runner, config.repo, config.git_ssh_str, config.fork, config.path)

    if not config.skip_upstream:
        echo(f"🌎 Adding upstream {config.upstream_remote}...")
        add_upstream(runner, config.repo, config.git_ssh_str, config.org, config.path)

    if not config.skip_project_manager:
        echo(f"📁 Adding {config.repo} to Project Manager...")
        if not add_project(config.project_manager_path, config.repo, clone_path):
            echo(f"📁 {config.repo} already exists in Project Manager", err=True)

    echo(f"🎉 Done! {config.repo} is ready to go!")

    if not config.skip_open:
        echo(f"💿 Opening in {config.editor}...")
        open_in_editor(runner, clone_path, config.editor)
