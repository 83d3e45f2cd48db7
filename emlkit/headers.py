"""Header storage and the header-block tokenizer.

Header names are matched case-insensitively everywhere.  Each name keeps
the spelling it was first seen with, so a message can be written back out
without changing how its headers look.
"""

from __future__ import annotations

import email.message
import email.utils
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum

import structlog

logger = structlog.get_logger()


class Header(str, Enum):
    """Well-known header names."""

    DATE = "Date"
    SUBJECT = "Subject"
    FROM = "From"
    TO = "To"
    CC = "Cc"
    BCC = "Bcc"
    REPLY_TO = "Reply-To"
    SENDER = "Sender"
    ENVELOPE_FROM = "Envelope-From"
    MESSAGE_ID = "Message-ID"
    MIME_VERSION = "MIME-Version"
    CONTENT_TYPE = "Content-Type"
    CONTENT_TRANSFER_ENCODING = "Content-Transfer-Encoding"
    USER_AGENT = "User-Agent"
    X_MAILER = "X-Mailer"

    def __str__(self) -> str:
        return self.value


def _key(name: str) -> str:
    return str(name).strip().lower()


class HeaderMap:
    """Case-insensitive, order-preserving mapping of header name to values."""

    def __init__(self) -> None:
        # lower-cased name -> (original name, values)
        self._entries: dict[str, tuple[str, list[str]]] = {}

    def add(self, name: str, value: str) -> None:
        """Append *value* to the values of *name*."""
        key = _key(name)
        entry = self._entries.get(key)
        if entry is None:
            self._entries[key] = (str(name).strip(), [value])
        else:
            entry[1].append(value)

    def set(self, name: str, values: Iterable[str]) -> None:
        """Replace every value of *name*; an empty iterable removes it."""
        values = list(values)
        key = _key(name)
        if not values:
            self._entries.pop(key, None)
            return
        original = self._entries[key][0] if key in self._entries else str(name).strip()
        self._entries[key] = (original, values)

    def get(self, name: str) -> list[str]:
        """Return a copy of the values for *name*, or ``[]``."""
        entry = self._entries.get(_key(name))
        return list(entry[1]) if entry else []

    def first(self, name: str, default: str | None = None) -> str | None:
        entry = self._entries.get(_key(name))
        return entry[1][0] if entry else default

    def remove(self, name: str) -> None:
        self._entries.pop(_key(name), None)

    def original_name(self, name: str) -> str | None:
        entry = self._entries.get(_key(name))
        return entry[0] if entry else None

    def items(self) -> Iterator[tuple[str, list[str]]]:
        """Yield ``(original name, values)`` in first-occurrence order."""
        for original, values in self._entries.values():
            yield original, list(values)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _key(name) in self._entries

    def __iter__(self) -> Iterator[str]:
        return (original for original, _ in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderMap):
            return NotImplemented
        return {k: v[1] for k, v in self._entries.items()} == {
            k: v[1] for k, v in other._entries.items()
        }

    def __repr__(self) -> str:
        return f"HeaderMap({dict(self.items())!r})"


def parse_header_block(lines: Iterable[str]) -> HeaderMap:
    """Tokenize header lines into a :class:`HeaderMap`.

    A line starting with a space or tab continues the previous header and
    is joined to it with a single space.  Lines that are neither a
    continuation nor ``Name: Value`` are skipped.
    """
    headers = HeaderMap()
    name: str | None = None
    value = ""

    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r")
        if line[:1] in (" ", "\t"):
            if name is None:
                logger.debug("eml_header_line_skipped", line=lineno, reason="orphan_continuation")
                continue
            extra = line.strip()
            if extra:
                value = f"{value} {extra}" if value else extra
            continue

        if name is not None:
            headers.add(name, value)
            name = None

        head, sep, tail = line.partition(":")
        if not sep or not head.strip():
            logger.debug("eml_header_line_skipped", line=lineno, reason="no_colon")
            continue
        name, value = head.strip(), tail.strip()

    if name is not None:
        headers.add(name, value)
    return headers


@dataclass(frozen=True)
class ContentType:
    """A parsed ``Content-Type`` header."""

    mime_type: str = "text/plain"
    params: dict[str, str] = field(default_factory=dict)

    @property
    def charset(self) -> str | None:
        return self.params.get("charset")


def parse_content_type(value: str | None) -> ContentType:
    """Split a ``Content-Type`` value into media type and parameters.

    Parameter parsing is delegated to :mod:`email.message`, so quoted
    values may contain ``;`` and RFC 2231 continuations are collapsed.
    Parameter names come back lower-cased.  An empty or missing value
    yields ``text/plain`` with no parameters.
    """
    if not value or not value.strip():
        return ContentType()

    holder = email.message.Message()
    holder[Header.CONTENT_TYPE.value] = value
    params: dict[str, str] = {}
    for key, raw in (holder.get_params() or [])[1:]:
        val = email.utils.collapse_rfc2231_value(raw)
        if key and val:
            params[key.lower()] = val
    return ContentType(mime_type=holder.get_content_type(), params=params)
