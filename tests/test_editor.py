from __future__ import annotations

from unittest.mock import patch

from conftest import FakeProcessRunner
from forkstart.editor import open_in_editor
from forkstart.process import RealProcessRunner, needs_shell


def test_open_in_editor_requests_new_window(fake_runner):
    open_in_editor(fake_runner, "/base/repo")

    assert fake_runner.spawns == [(["code", "-n", "/base/repo"], None)]


def test_open_in_editor_custom_editor(fake_runner):
    open_in_editor(fake_runner, "/base/repo", editor="codium")

    assert fake_runner.spawns[0][0][0] == "codium"


def test_open_in_editor_ignores_launch_failure():
    runner = FakeProcessRunner(spawn_error=FileNotFoundError("code"))

    open_in_editor(runner, "/base/repo")

    assert runner.spawns == []


def test_needs_shell_for_batch_scripts():
    with patch("forkstart.process.shutil.which", return_value=r"C:\Program Files\VS Code\bin\code.CMD"):
        assert needs_shell("code") is True
    with patch("forkstart.process.shutil.which", return_value="/usr/bin/code"):
        assert needs_shell("code") is False
    with patch("forkstart.process.shutil.which", return_value=None):
        assert needs_shell("code") is False


def test_real_runner_spawn_through_shell():
    with patch("forkstart.process.needs_shell", return_value=True), \
            patch("forkstart.process.subprocess.Popen") as popen:
        RealProcessRunner().spawn(["code", "-n", "/base/repo"])

    args, kwargs = popen.call_args
    assert kwargs["shell"] is True
    assert isinstance(args[0], str)
    assert "/base/repo" in args[0]


def test_real_runner_spawn_direct():
    with patch("forkstart.process.needs_shell", return_value=False), \
            patch("forkstart.process.subprocess.Popen") as popen:
        RealProcessRunner().spawn(["code", "-n", "/base/repo"])

    popen.assert_called_once_with(["code", "-n", "/base/repo"], cwd=None)


def test_real_runner_run_returns_exit_code():
    with patch("forkstart.process.subprocess.run") as run:
        run.return_value.returncode = 128
        assert RealProcessRunner().run(["git", "clone", "x", "y"]) == 128

    run.assert_called_once_with(["git", "clone", "x", "y"], cwd=None, check=False)
