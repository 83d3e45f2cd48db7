"""emlkit — parse raw .eml documents into structured messages.

Public API re-exported here for convenience::

    from emlkit import parse_from_file, parse_from_string, Message
"""

from .config import MissingDatePolicy, ParserSettings
from .dates import format_date, parse_date
from .encoding import TransferEncoding, decode_body, resolve_transfer_encoding
from .errors import EmlError, InvalidDateError, InvalidEncodingPayloadError
from .headers import ContentType, Header, HeaderMap, parse_content_type, parse_header_block
from .loader import load_from_bytes, load_from_file, load_from_string
from .logging import setup_logging
from .message import Message
from .parser import EmlParser, parse_from_bytes, parse_from_file, parse_from_string, split_message

__all__ = [
    "ContentType",
    "EmlError",
    "EmlParser",
    "Header",
    "HeaderMap",
    "InvalidDateError",
    "InvalidEncodingPayloadError",
    "Message",
    "MissingDatePolicy",
    "ParserSettings",
    "TransferEncoding",
    "decode_body",
    "format_date",
    "load_from_bytes",
    "load_from_file",
    "load_from_string",
    "parse_content_type",
    "parse_date",
    "parse_from_bytes",
    "parse_from_file",
    "parse_from_string",
    "parse_header_block",
    "resolve_transfer_encoding",
    "setup_logging",
    "split_message",
]
