"""Open a clone in the editor without waiting for it."""

from __future__ import annotations

import logging
from pathlib import Path

from .process import ProcessRunner

logger = logging.getLogger(__name__)

NEW_WINDOW_FLAG = "-n"


def open_in_editor(runner: ProcessRunner, clone_path: str | Path, editor: str = "code") -> None:
    """Launch ``<editor> -n <clone_path>`` and return immediately.

    Launch failures are logged and otherwise ignored; opening the editor is a
    convenience and never fails the run.
    """
    try:
        runner.spawn([editor, NEW_WINDOW_FLAG, str(clone_path)])
    except OSError as e:
        logger.debug("Could not launch %s: %s", editor, e)
