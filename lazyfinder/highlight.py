"""Preview text loading, sanitization, and Pygments highlighting.

Reads at most a bounded prefix of a file, rejects binary content, and
renders the first lines as ANSI-styled rows for the preview pane.
"""

from __future__ import annotations

import re
from pathlib import Path

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .ansi import clip_ansi_line
from .errors import PreviewError

DEFAULT_STYLE = "monokai"
BINARY_PROBE_BYTES = 4_096
PREVIEW_MAX_BYTES = 256_000

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_FORMATTERS: dict[str, TerminalFormatter] = {}


def read_preview_text(path: Path, max_bytes: int = PREVIEW_MAX_BYTES) -> str:
    """Read the leading ``max_bytes`` of ``path`` as text.

    Decodes UTF-8, dropping a BOM, else latin-1. Raises ``PreviewError`` when
    the file cannot be read or looks binary (NUL byte in the first block).
    """
    try:
        with path.open("rb") as handle:
            data = handle.read(max_bytes)
    except OSError as exc:
        raise PreviewError(f"{path}: {exc.strerror or exc}") from exc
    if b"\x00" in data[:BINARY_PROBE_BYTES]:
        raise PreviewError(f"{path}: binary file")
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError:
        # latin-1 maps every byte.
        return data.decode("latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def normalize_style(style: str | None) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    if not style:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = TerminalFormatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def highlight_lines(
    path: Path,
    text: str,
    max_lines: int,
    width: int = 0,
    style: str = DEFAULT_STYLE,
) -> tuple[str, ...]:
    """Render the first ``max_lines`` lines of ``text`` as ANSI rows.

    The lexer is picked from the file name, falling back to plain text. Rows
    are clipped to ``width`` display columns when ``width`` is positive.
    """
    if max_lines <= 0:
        return ()
    head = sanitize_terminal_text("\n".join(text.splitlines()[:max_lines]))
    if not head:
        return ()

    try:
        lexer = get_lexer_for_filename(path.name, head, stripnl=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False)
    rendered = pygments_highlight(head, lexer, _formatter_for_style(normalize_style(style)))

    rows = rendered.splitlines()[:max_lines]
    if width > 0:
        rows = [clip_ansi_line(row, width) for row in rows]
    return tuple(rows)


def plain_lines(
    path: Path,
    text: str,
    max_lines: int,
    width: int = 0,
    style: str = DEFAULT_STYLE,
) -> tuple[str, ...]:
    """Uncolored counterpart of :func:`highlight_lines` for ``NO_COLOR`` sessions."""
    if max_lines <= 0:
        return ()
    rows = sanitize_terminal_text("\n".join(text.splitlines()[:max_lines])).splitlines()
    if width > 0:
        rows = [clip_ansi_line(row, width) for row in rows]
    return tuple(rows)
