"""EML parser — raw RFC 5322 text to a populated :class:`Message`."""

from __future__ import annotations

import os

import structlog

from .config import MissingDatePolicy, ParserSettings
from .dates import now_header_value, parse_date
from .encoding import decode_body, resolve_transfer_encoding
from .errors import EmlError
from .headers import Header, HeaderMap, parse_content_type, parse_header_block
from .loader import load_from_bytes, load_from_file, load_from_string
from .message import Message

logger = structlog.get_logger()


def split_message(text: str) -> tuple[list[str], str]:
    """Split raw text at the first blank line.

    Returns the header lines (line breaks removed, trailing ``\\r`` kept)
    and the body exactly as it appears after the blank line.  Text
    without a blank line is all headers.  A leading byte-order mark is
    dropped.
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    header_lines: list[str] = []
    pos = 0
    length = len(text)
    while pos < length:
        end = text.find("\n", pos)
        if end == -1:
            line, next_pos = text[pos:], length
        else:
            line, next_pos = text[pos:end], end + 1
        if line.rstrip("\r") == "":
            return header_lines, text[next_pos:]
        header_lines.append(line)
        pos = next_pos
    return header_lines, ""


class EmlParser:
    """Stateless parser: raw EML text → Message.

    One instance can be shared between threads; every call works on its
    own buffer and returns a Message nobody else holds a reference to.
    """

    def __init__(self, settings: ParserSettings | None = None) -> None:
        self._settings = settings or ParserSettings()

    @property
    def settings(self) -> ParserSettings:
        return self._settings

    def parse(self, text: str) -> Message:
        """Parse a complete message held in memory.

        Raises
        ------
        InvalidDateError
            If a ``Date`` header is present but malformed.
        InvalidEncodingPayloadError
            If the body does not decode under its transfer encoding.
        """
        text = load_from_string(text)
        header_lines, raw_body = split_message(text)
        headers = parse_header_block(header_lines)

        try:
            self._apply_date_policy(headers)

            encoding = resolve_transfer_encoding(
                headers.first(Header.CONTENT_TRANSFER_ENCODING.value),
                self._settings.default_encoding,
            )
            content_type = parse_content_type(headers.first(Header.CONTENT_TYPE.value))
            body = decode_body(
                raw_body,
                encoding,
                content_type.charset or self._settings.default_charset,
            )
        except EmlError as exc:
            logger.warning("eml_parse_failed", error_type=type(exc).__name__, error=exc.message)
            raise

        logger.debug(
            "eml_parsed",
            encoding=encoding.value,
            header_count=len(headers),
            body_length=len(body),
        )
        return Message(headers=headers, encoding=encoding, body=body, content_type=content_type)

    def parse_bytes(self, data: bytes) -> Message:
        """Decode *data* with the configured file encoding, then parse it."""
        return self.parse(load_from_bytes(data, self._settings.file_encoding))

    def parse_file(self, path: str | os.PathLike[str]) -> Message:
        """Read the whole file at *path*, then parse it.

        ``OSError`` and ``UnicodeDecodeError`` from reading propagate as-is.
        """
        return self.parse(load_from_file(path, self._settings.file_encoding))

    def _apply_date_policy(self, headers: HeaderMap) -> None:
        value = headers.first(Header.DATE.value)
        if value is not None:
            parse_date(value)
            return
        if self._settings.missing_date is MissingDatePolicy.SYNTHESIZE:
            synthesized = now_header_value()
            headers.add(Header.DATE.value, synthesized)
            logger.debug("eml_date_synthesized", value=synthesized)


def parse_from_string(text: str, settings: ParserSettings | None = None) -> Message:
    """Parse an in-memory message.  See :meth:`EmlParser.parse`."""
    return EmlParser(settings).parse(text)


def parse_from_bytes(data: bytes, settings: ParserSettings | None = None) -> Message:
    """Parse a message held as bytes.  See :meth:`EmlParser.parse_bytes`."""
    return EmlParser(settings).parse_bytes(data)


def parse_from_file(path: str | os.PathLike[str], settings: ParserSettings | None = None) -> Message:
    """Parse the message stored at *path*.  See :meth:`EmlParser.parse_file`."""
    return EmlParser(settings).parse_file(path)
