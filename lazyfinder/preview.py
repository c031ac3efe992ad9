"""Preview cache and lazy preview loading.

The cache is a plain lookup table keyed by candidate path. Entries are
created the first time a candidate is selected and never replaced, so a
file is read at most once per session even if it changes on disk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .errors import PreviewError
from .highlight import DEFAULT_STYLE, highlight_lines, read_preview_text

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_MAX_LINES = 50
UNAVAILABLE_TEXT = "No preview available"


@dataclass(frozen=True)
class Preview:
    lines: tuple[str, ...]
    available: bool = True


UNAVAILABLE_PREVIEW = Preview(lines=(UNAVAILABLE_TEXT,), available=False)


class PreviewCache:
    """At most one rendered preview per candidate path."""

    def __init__(self) -> None:
        self._entries: dict[Path, Preview] = {}

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._entries)

    def get(self, path: Path) -> Preview | None:
        return self._entries.get(path)

    def put(self, path: Path, preview: Preview) -> Preview:
        """Store ``preview`` unless ``path`` already has an entry.

        Returns the entry that ends up cached.
        """
        return self._entries.setdefault(path, preview)

    def clear(self) -> None:
        self._entries.clear()


@dataclass
class PreviewLoader:
    """Reads and renders one candidate's preview.

    ``read_text`` and ``highlight`` are the file-reader and highlighter
    collaborators; tests swap them for counting stubs.
    """

    max_lines: int = DEFAULT_PREVIEW_MAX_LINES
    style: str = DEFAULT_STYLE
    width: int = 0
    read_text: Callable[[Path], str] = read_preview_text
    highlight: Callable[..., tuple[str, ...]] = highlight_lines

    def load(self, path: Path) -> Preview:
        """Return a rendered preview, or the placeholder when reading fails."""
        try:
            text = self.read_text(path)
        except PreviewError as exc:
            logger.debug("preview unavailable: %s", exc)
            return UNAVAILABLE_PREVIEW
        lines = self.highlight(path, text, self.max_lines, self.width, style=self.style)
        return Preview(lines=tuple(lines[: self.max_lines]))
