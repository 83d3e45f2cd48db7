"""Content-Transfer-Encoding resolution and body decoding."""

from __future__ import annotations

import base64
import binascii
import codecs
import quopri
from enum import Enum

import structlog

from .errors import InvalidEncodingPayloadError

logger = structlog.get_logger()


class TransferEncoding(str, Enum):
    """MIME transfer encodings understood by the parser."""

    SEVEN_BIT = "7bit"
    EIGHT_BIT = "8bit"
    QUOTED_PRINTABLE = "quoted-printable"
    BASE64 = "base64"

    def __str__(self) -> str:
        return self.value


def resolve_transfer_encoding(
    value: str | None,
    default: TransferEncoding = TransferEncoding.EIGHT_BIT,
) -> TransferEncoding:
    """Map a raw header value to a known token, falling back to *default*.

    Matching is case-insensitive and ignores surrounding whitespace.
    """
    if value is None:
        return default
    token = value.strip().lower()
    try:
        return TransferEncoding(token)
    except ValueError:
        logger.warning("eml_unknown_transfer_encoding", value=value, fallback=default.value)
        return default


def decode_body(body: str, encoding: TransferEncoding, charset: str = "utf-8") -> str:
    """Undo the transfer encoding of *body* and return text.

    ``7bit`` and ``8bit`` bodies are returned untouched.  Quoted-printable
    and base64 yield bytes, which are decoded with *charset*; bytes that
    are invalid in that charset become U+FFFD.

    Raises
    ------
    InvalidEncodingPayloadError
        If a base64 body holds characters outside the alphabet or has
        broken padding.
    """
    if encoding in (TransferEncoding.SEVEN_BIT, TransferEncoding.EIGHT_BIT):
        return body

    if encoding is TransferEncoding.QUOTED_PRINTABLE:
        raw = _decode_quoted_printable(body)
    else:
        raw = _decode_base64(body)
    return raw.decode(_usable_charset(charset), errors="replace")


def _decode_quoted_printable(body: str) -> bytes:
    # Raw non-ASCII characters are not legal QP but do occur; keep them as UTF-8.
    # Soft breaks may be "=\n" or "=\r\n"; hard line breaks are kept as found.
    return quopri.decodestring(body.encode("utf-8"))


def _decode_base64(body: str) -> bytes:
    compact = "".join(body.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        logger.warning("eml_invalid_base64_body", error=str(exc), length=len(compact))
        raise InvalidEncodingPayloadError(TransferEncoding.BASE64.value, exc) from exc


def _usable_charset(charset: str) -> str:
    try:
        return codecs.lookup(charset).name
    except LookupError:
        logger.warning("eml_unknown_charset", charset=charset, fallback="utf-8")
        return "utf-8"
