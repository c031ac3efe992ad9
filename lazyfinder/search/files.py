"""Candidate enumeration for a project root.

Lists files once at startup, preferring ``rg --files`` and falling back to
``os.walk``. Hidden entries are dropped unless requested.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from ..errors import StartupError
from ..highlight import sanitize_terminal_text
from .gitignore import git_ignored_labels
from .types import Candidate

logger = logging.getLogger(__name__)


def to_project_relative(path: Path, root: Path) -> str:
    """Return the label for ``path``: its POSIX path below ``root``.

    Symlinks are not followed, so a link keeps its own name. Control
    characters are escaped so labels are safe to paint.
    """
    try:
        relative = path.relative_to(root).as_posix()
    except ValueError:
        relative = path.name
    return sanitize_terminal_text(relative)


def _collect_files_walk(root: Path, show_hidden: bool, skip_gitignored: bool) -> list[Path]:
    def on_error(exc: OSError) -> None:
        # Unreadable subdirectories are skipped; an unreadable root is fatal.
        if exc.filename is not None and Path(exc.filename).resolve() == root:
            raise StartupError(f"Cannot read directory: {root}: {exc.strerror}") from exc
        logger.debug("skipping unreadable directory %s", exc.filename)

    files: list[Path] = []
    ignored = git_ignored_labels(root) if skip_gitignored else frozenset()
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        base = Path(dirpath)
        prefix = base.relative_to(root).as_posix()
        prefix = "" if prefix == "." else prefix + "/"
        if not show_hidden:
            dirnames[:] = [name for name in dirnames if not name.startswith(".")]
            filenames = [name for name in filenames if not name.startswith(".")]
        if ignored:
            dirnames[:] = [name for name in dirnames if f"{prefix}{name}/" not in ignored]
            filenames = [name for name in filenames if f"{prefix}{name}" not in ignored]
        dirnames.sort(key=str.lower)
        filenames.sort(key=str.lower)
        for filename in filenames:
            path = base / filename
            if path.is_file():
                files.append(path)
    return files


def _collect_files_rg(root: Path, show_hidden: bool, skip_gitignored: bool) -> list[Path] | None:
    if shutil.which("rg") is None:
        return None

    cmd = ["rg", "--files"]
    if not skip_gitignored:
        cmd.append("--no-ignore")
    if show_hidden:
        cmd.append("--hidden")

    try:
        proc = subprocess.run(
            cmd,
            cwd=root,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        logger.debug("rg --files failed under %s; falling back to os.walk", root)
        return None

    files: list[Path] = []
    for raw in proc.stdout.splitlines():
        if not raw:
            continue
        path = root / raw
        if not show_hidden and any(part.startswith(".") for part in Path(raw).parts):
            continue
        if path.is_file():
            files.append(path)
    return files


def collect_candidates(
    root: Path,
    include_hidden: bool,
    skip_gitignored: bool = False,
) -> list[Candidate]:
    """Enumerate every file below ``root`` as a sorted candidate list.

    Raises ``StartupError`` when ``root`` is missing, is not a directory, or
    cannot be listed.
    """
    if not root.exists():
        raise StartupError(f"Path not found: {root}")
    if not root.is_dir():
        raise StartupError(f"Not a directory: {root}")
    root = root.resolve()

    files = _collect_files_rg(root, include_hidden, skip_gitignored)
    source = "rg"
    if files is None:
        files = _collect_files_walk(root, include_hidden, skip_gitignored)
        source = "walk"

    candidates = [Candidate(path=path, label=to_project_relative(path, root)) for path in files]
    candidates.sort(key=lambda candidate: candidate.label.casefold())
    logger.info("enumerated %d candidates under %s via %s", len(candidates), root, source)
    return candidates
