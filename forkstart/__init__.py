"""
Forkstart - Set up a freshly forked repository in one command.

A CLI tool that:
1. Clones your fork of a repository
2. Adds the canonical organization's copy as the "upstream" remote
3. Registers the clone with the VS Code Project Manager extension
4. Opens the clone in a new editor window

Usage:
    forkstart -r my-repo                  # Everything, using .env defaults
    forkstart -r my-repo -sc -su          # Only register and open
    forkstart -r my-repo -o acme -f me    # Override org and fork owner
"""

__version__ = "0.1.0"
__author__ = "Forkstart"
