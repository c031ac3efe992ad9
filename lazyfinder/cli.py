"""Command-line front door for lazyfinder.

Parses CLI options, loads config, enumerates candidates under the root,
then dispatches into the interactive finder runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .config import FinderConfig, load_finder_config
from .errors import EditorLaunchError, StartupError
from .runtime import run_finder
from .search import collect_candidates

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: FinderConfig) -> None:
    """Attach a file handler when ``log_file`` is configured.

    Without one, records stop at the package ``NullHandler`` so the raw-mode
    screen is never written to.
    """
    if config.log_file is None:
        return
    package_logger = logging.getLogger("lazyfinder")
    try:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(config.log_file, encoding="utf-8")
    except OSError as exc:
        print(f"lazyfinder: cannot open log file {config.log_file}: {exc}", file=sys.stderr)
        return
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(config.log_level)


def main(default_path: Path | None = None) -> int:
    """Parse CLI arguments and run the finder over a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Startup and editor failures exit with status 1.
    """
    parser = argparse.ArgumentParser(
        prog="lazyfinder",
        description="Fuzzy-find files under a directory with a live syntax-highlighted preview.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Root directory to search. Defaults to current directory.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args()

    config = load_finder_config()
    configure_logging(config)

    if default_path is None:
        default_path = Path.cwd()
    root = Path(args.path).expanduser() if args.path is not None else default_path

    try:
        candidates = collect_candidates(root, config.show_hidden, config.skip_gitignored)
        run_finder(root.resolve(), candidates, config)
    except StartupError as exc:
        logger.error("startup failed: %s", exc)
        raise SystemExit(str(exc)) from exc
    except EditorLaunchError as exc:
        logger.error("editor failed: %s", exc)
        raise SystemExit(str(exc)) from exc
    return 0


if __name__ == "__main__":
    sys.exit(main())
