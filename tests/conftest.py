from __future__ import annotations

from pathlib import Path

import pytest

from forkstart.process import ProcessRunner


class FakeProcessRunner(ProcessRunner):
    """Records commands instead of running them."""

    def __init__(self, exit_codes: dict[str, int] | None = None, spawn_error: OSError | None = None):
        # Keyed by git subcommand ("clone", "remote"); anything else exits 0
        self.exit_codes = exit_codes or {}
        self.spawn_error = spawn_error
        self.runs: list[tuple[list[str], Path | None]] = []
        self.spawns: list[tuple[list[str], Path | None]] = []

    def run(self, args, cwd=None):
        self.runs.append((list(args), cwd))
        return self.exit_codes.get(args[1], 0)

    def spawn(self, args, cwd=None):
        if self.spawn_error is not None:
            raise self.spawn_error
        self.spawns.append((list(args), cwd))


@pytest.fixture
def fake_runner():
    return FakeProcessRunner()


@pytest.fixture
def projects_file(tmp_path):
    path = tmp_path / "projects.json"
    path.write_text("[]", encoding="utf-8")
    return path
