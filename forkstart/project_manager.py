"""
VS Code Project Manager registry for Forkstart.

The Project Manager extension keeps its saved projects in a JSON array:

    [
      {"name": "my-repo", "rootPath": "/home/me/my-repo", ...}
    ]

Only ``name`` and ``rootPath`` are read or written; any other keys on
existing entries are preserved as-is.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class ProjectManagerError(Exception):
    """The registry file could not be read or parsed."""
    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


@dataclass
class ProjectEntry:
    """A saved project."""
    name: str
    root_path: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "rootPath": self.root_path}


def load_projects(path: str | Path) -> list[dict[str, Any]]:
    """Read the registry file.

    Raises:
        ProjectManagerError: if the file is missing, unreadable, or not a JSON array
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ProjectManagerError(f"Project Manager config not found: {path}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ProjectManagerError(f"Cannot read Project Manager config {path}: {e}", path) from e

    try:
        projects = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProjectManagerError(f"Invalid JSON in {path}: {e}", path) from e

    if not isinstance(projects, list):
        raise ProjectManagerError(f"Expected a JSON array in {path}", path)
    return projects


def find_project(projects: list[dict[str, Any]], entry: ProjectEntry) -> dict[str, Any] | None:
    """Return the first project matching by name or by root path."""
    for project in projects:
        if not isinstance(project, dict):
            continue
        if project.get("name") == entry.name or project.get("rootPath") == entry.root_path:
            return project
    return None


def save_projects(path: str | Path, projects: list[dict[str, Any]]) -> None:
    path = Path(path)
    try:
        path.write_text(json.dumps(projects, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        raise ProjectManagerError(f"Cannot write Project Manager config {path}: {e}", path) from e


def add_project(path: str | Path, name: str, root_path: str | Path) -> bool:
    """Append ``{name, rootPath}`` to the registry unless it is already there.

    The whole file is rewritten; concurrent writers are not guarded against.

    Returns:
        True if the entry was added, False if a project with the same name
        or root path already exists
    """
    entry = ProjectEntry(name=name, root_path=str(root_path))
    projects = load_projects(path)

    existing = find_project(projects, entry)
    if existing is not None:
        logger.info(
            "%s already exists in Project Manager (%s -> %s)",
            name, existing.get("name"), existing.get("rootPath"),
        )
        return False

    projects.append(entry.to_dict())
    save_projects(path, projects)
    logger.info("Added %s (%s) to %s", entry.name, entry.root_path, path)
    return True
