"""Exceptions raised while turning raw EML text into a Message.

File-system and text-decoding failures are not wrapped: ``OSError`` and
``UnicodeDecodeError`` reach the caller exactly as the loader saw them.
"""

from __future__ import annotations


class EmlError(Exception):
    """Base class for parse failures raised by emlkit itself."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InvalidDateError(EmlError):
    """A ``Date`` header is present but does not hold a valid date."""

    def __init__(self, value: str, original_error: Exception | None = None) -> None:
        super().__init__(f"invalid Date header value: {value!r}", original_error)
        self.value = value


class InvalidEncodingPayloadError(EmlError):
    """The body cannot be decoded under its Content-Transfer-Encoding."""

    def __init__(self, encoding: str, original_error: Exception | None = None) -> None:
        reason = f": {original_error}" if original_error else ""
        super().__init__(f"body is not valid {encoding}{reason}", original_error)
        self.encoding = encoding
