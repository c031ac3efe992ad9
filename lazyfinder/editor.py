"""Editor launch helper for the committed candidate.

Runs ``$VISUAL``/``$EDITOR`` while temporarily leaving raw/alternate-screen
mode, and restores the terminal whatever the editor does.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import Callable

from .errors import EditorLaunchError

logger = logging.getLogger(__name__)

FALLBACK_EDITORS = ("vi", "nano")


def resolve_editor_command() -> list[str]:
    """Return the editor argv prefix from the environment or PATH.

    Raises ``EditorLaunchError`` when no editor can be found.
    """
    for name in ("VISUAL", "EDITOR"):
        value = os.environ.get(name, "").strip()
        if not value:
            continue
        try:
            cmd = shlex.split(value)
        except ValueError as exc:
            raise EditorLaunchError(f"Cannot parse ${name}: {exc}") from exc
        if cmd:
            return cmd
    for candidate in FALLBACK_EDITORS:
        if shutil.which(candidate) is not None:
            return [candidate]
    raise EditorLaunchError("Cannot edit: neither $VISUAL nor $EDITOR is set and no fallback editor was found.")


def launch_editor(
    target: Path,
    disable_tui_mode: Callable[[], None],
    enable_tui_mode: Callable[[], None],
) -> None:
    cmd = resolve_editor_command()
    logger.info("opening %s with %s", target, cmd[0])

    disable_tui_mode()
    try:
        subprocess.run([*cmd, str(target)], check=False)
    except OSError as exc:
        logger.warning("editor launch failed: %s", exc)
        raise EditorLaunchError(f"Failed to launch editor: {exc}") from exc
    finally:
        enable_tui_mode()
