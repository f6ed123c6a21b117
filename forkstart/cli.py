"""
Forkstart CLI - Clone a fork, add its upstream, and register it with VS Code.

Defaults for most options come from the environment or a .env file:
    DEFAULT_GIT_SSH_STR                  --gitSshStr
    DEFAULT_ORG                          --org
    DEFAULT_FORK                         --fork
    HOME                                 --path
    DEFAULT_PROJECT_MANAGER_CONFIG_PATH  --projectManagerPath
    DEFAULT_EDITOR                       --editor
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import load_environment, resolve_config
from .git import GitCommandError
from .pipeline import NothingToDoError, setup_fork
from .process import RealProcessRunner
from .project_manager import ProjectManagerError


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option("-r", "--repo", "repo", help="The name of the forked repository (required)")
@click.option("-g", "--gitSshStr", "git_ssh_str", help="Git SSH string, e.g. git@github.com [DEFAULT_GIT_SSH_STR]")
@click.option("-o", "--org", "org", help="Organization owning the upstream repository [DEFAULT_ORG]")
@click.option("-f", "--fork", "fork", help="Owner of the fork [DEFAULT_FORK]")
@click.option("-p", "--path", "path", help="Directory to clone into [HOME]")
@click.option(
    "-pm", "--projectManagerPath", "project_manager_path",
    help="Path to VS Code Project Manager projects.json [DEFAULT_PROJECT_MANAGER_CONFIG_PATH]",
)
@click.option("-e", "--editor", "editor", help="Editor command to open the clone with [DEFAULT_EDITOR, or 'code']")
@click.option("-sc", "--skipClone", "skip_clone", is_flag=True, help="Skip cloning the repository")
@click.option("-su", "--skipUpstream", "skip_upstream", is_flag=True, help="Skip adding upstream to list of remotes")
@click.option("-so", "--skipOpen", "skip_open", is_flag=True, help="Skip opening new repo in the editor")
@click.option(
    "-spm", "--skipProjectManager", "skip_project_manager", is_flag=True,
    help="Skip adding an entry to Project Manager",
)
@click.option(
    "--env-file", "env_file", type=click.Path(dir_okay=False, path_type=Path),
    help="Load defaults from this file instead of ./.env",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(env_file: Path | None, verbose: bool, **options):
    """Set up a fork: clone it, add upstream, register it, and open it.

    Examples:

        forkstart -r my-repo                   # All steps, defaults from .env

        forkstart -r my-repo -sc -su           # Already cloned: register and open

        forkstart -r my-repo -o acme -f alice  # Explicit org and fork owner
    """
    configure_logging(verbose)
    load_environment(env_file)
    config = resolve_config(options)

    try:
        setup_fork(config, RealProcessRunner(), echo=click.echo)
    except NothingToDoError:
        click.echo("🤔 Nothing to do. Exiting...", err=True)
        sys.exit(1)
    except GitCommandError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(e.returncode)
    except ProjectManagerError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
