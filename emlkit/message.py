"""The parsed message model."""

from __future__ import annotations

import email.utils
from dataclasses import dataclass, field
from datetime import datetime

from .dates import parse_date
from .encoding import TransferEncoding
from .errors import InvalidDateError
from .headers import ContentType, Header, HeaderMap


@dataclass
class Message:
    """A single-part email message.

    ``headers`` holds every header of the source document, ``encoding`` the
    resolved Content-Transfer-Encoding and ``body`` the decoded text.  The
    parser builds a Message in one go; afterwards it belongs to the caller,
    who may change it freely (e.g. before re-composing it).
    """

    headers: HeaderMap = field(default_factory=HeaderMap)
    encoding: TransferEncoding = TransferEncoding.EIGHT_BIT
    body: str = ""
    content_type: ContentType = field(default_factory=ContentType)

    def get_generic_header(self, name: str | Header) -> list[str]:
        """All values of header *name* in source order; ``[]`` if absent."""
        return self.headers.get(str(name))

    def set_generic_header(self, name: str | Header, *values: str) -> None:
        """Replace the values of header *name*; no values removes it."""
        self.headers.set(str(name), values)

    @property
    def subject(self) -> str:
        return self.headers.first(Header.SUBJECT.value, "") or ""

    @property
    def message_id(self) -> str:
        return self.headers.first(Header.MESSAGE_ID.value, "") or ""

    @property
    def charset(self) -> str | None:
        charset = self.content_type.charset
        return charset.lower() if charset else None

    @property
    def date(self) -> datetime | None:
        """The ``Date`` header as a datetime, or ``None`` if absent or invalid."""
        value = self.headers.first(Header.DATE.value)
        if value is None:
            return None
        try:
            return parse_date(value)
        except InvalidDateError:
            return None

    def get_addresses(self, name: str | Header) -> list[tuple[str, str]]:
        """Parse an address-list header into ``(display name, address)`` pairs.

        Entries without an address part are dropped.
        """
        values = self.get_generic_header(name)
        if not values:
            return []
        return [(display, addr) for display, addr in email.utils.getaddresses(values) if addr]

    def get_sender(self) -> str | None:
        """Envelope sender if present, else the first ``From`` address."""
        for header in (Header.ENVELOPE_FROM, Header.FROM):
            addresses = self.get_addresses(header)
            if addresses:
                return addresses[0][1]
        return None

    def get_recipients(self) -> list[str]:
        """Addresses from To, Cc and Bcc, de-duplicated in order of appearance."""
        seen: dict[str, None] = {}
        for header in (Header.TO, Header.CC, Header.BCC):
            for _, addr in self.get_addresses(header):
                seen.setdefault(addr, None)
        return list(seen)
