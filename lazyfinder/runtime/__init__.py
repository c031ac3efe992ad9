"""Public runtime orchestration entry points.

This package groups the session bootstrap (`run_finder`) and the lower-level
event loop contracts used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import RuntimeLoopCallbacks


def run_finder(*args, **kwargs):
    """Lazily import the session entrypoint to keep ``lazyfinder.cli`` imports light."""
    from .app import run_finder as _run_finder

    return _run_finder(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "RuntimeLoopCallbacks":
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "run_finder",
    "run_main_loop",
    "RuntimeLoopCallbacks",
]
