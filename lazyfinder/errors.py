"""Error taxonomy for the finder session."""

from __future__ import annotations


class LazyfinderError(Exception):
    """Base class for lazyfinder failures."""


class StartupError(LazyfinderError):
    """Candidate enumeration or terminal setup failed; the session never starts."""


class PreviewError(LazyfinderError):
    """A candidate could not be read for preview.

    Always recovered by the preview loader, which caches a placeholder.
    """


class EditorLaunchError(LazyfinderError):
    """The external editor could not be resolved or spawned."""


__all__ = [
    "LazyfinderError",
    "StartupError",
    "PreviewError",
    "EditorLaunchError",
]
