"""Obtain raw message text from strings, bytes and files.

No parsing happens here.  Read errors are logged and re-raised unchanged.
"""

from __future__ import annotations

import os

import structlog

logger = structlog.get_logger()


def load_from_string(content: str) -> str:
    """Return *content* as-is."""
    if not isinstance(content, str):
        raise TypeError(f"expected str, got {type(content).__name__}")
    return content


def load_from_bytes(data: bytes, encoding: str = "utf-8") -> str:
    """Decode raw message bytes; a ``UnicodeDecodeError`` propagates."""
    return bytes(data).decode(encoding)


def load_from_file(path: str | os.PathLike[str], encoding: str = "utf-8") -> str:
    """Read the whole file at *path* as text.

    Newline translation is disabled, so CRLF input stays CRLF.  The file
    handle is opened and closed within this call.

    Raises
    ------
    OSError
        If the file cannot be opened or read.
    UnicodeDecodeError
        If the contents are not valid in *encoding*.
    """
    try:
        with open(path, encoding=encoding, newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(
            "eml_file_read_failed",
            path=os.fspath(path),
            error_type=type(exc).__name__,
            error=str(exc),
        )
        raise
