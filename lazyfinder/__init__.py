"""Public package surface for lazyfinder.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``lazyfinder``.
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Nothing may reach stderr while the terminal is in raw mode.
logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["__version__", "main"]
