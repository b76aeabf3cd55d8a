"""Reading documents and committing rewritten text to disk.

Documents are decoded with ``surrogateescape`` so bytes that are invalid in
the configured encoding (a Latin-1 page read as UTF-8, say) survive the
round trip unchanged instead of aborting the run.
"""

from __future__ import annotations

import os
from pathlib import Path
from tempfile import NamedTemporaryFile

TEXT_ERRORS = "surrogateescape"


def read_document(path: Path, *, encoding: str = "utf-8") -> str:
    """Read the whole document without newline translation.

    Line endings survive untouched so that a document without data URIs is
    copied byte for byte.
    """
    with path.open("r", encoding=encoding, errors=TEXT_ERRORS, newline="") as f:
        return f.read()


def open_output(path: Path, *, encoding: str = "utf-8"):
    """Open ``path`` for streaming the rewritten document."""
    return path.open("w", encoding=encoding, errors=TEXT_ERRORS, newline="")


def atomic_write_text(path: Path, data: str, *, encoding: str = "utf-8") -> None:
    """Atomically write text to a file by writing to a temp file then replacing.

    Ensures parent directories exist and minimizes risk of partial writes.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile(
        "w",
        encoding=encoding,
        errors=TEXT_ERRORS,
        newline="",
        dir=str(path.parent),
        delete=False,
    ) as tmp:
        tmp.write(data)
        tmp.flush()
        os.fsync(tmp.fileno())
        tmp_path = Path(tmp.name)
    os.replace(tmp_path, path)


__all__ = [
    "TEXT_ERRORS",
    "atomic_write_text",
    "open_output",
    "read_document",
]
