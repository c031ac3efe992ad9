"""Gitignore lookup for the ``os.walk`` enumeration fallback.

``rg --files`` applies ignore rules itself; the walk asks git once for the
ignored entries below the root instead.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)


def git_ignored_labels(root: Path) -> frozenset[str]:
    """Return root-relative POSIX labels that git ignores below ``root``.

    Ignored directories are reported once, with a trailing ``/``, so the walk
    can prune them without descending. The set is empty when git is missing,
    ``root`` is outside a work tree, or git fails.
    """
    if shutil.which("git") is None:
        return frozenset()
    try:
        proc = subprocess.run(
            ["git", "-C", str(root), "ls-files", "-z", "--others", "--ignored", "--exclude-standard", "--directory"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        logger.debug("git ls-files unavailable under %s; not filtering ignored files", root)
        return frozenset()
    return frozenset(os.fsdecode(raw) for raw in proc.stdout.split(b"\x00") if raw)
