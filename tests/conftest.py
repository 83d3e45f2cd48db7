"""Shared test fixtures for the emlkit test suite."""

from __future__ import annotations

import base64
import quopri
from pathlib import Path

import pytest

from emlkit.config import ParserSettings

PLAIN_BODY = """Dear Customer,

This is a test mail. Please do not reply to this. Also this line is very long so it
should be wrapped.


Thank your for your business!
The go-mail team

--
This is a signature"""

QP_BODY = """Dear Customer,

This is a test mail. Please do not reply to this. Also this line is very lo=
ng so it
should be wrapped.


Thank your for your business!
The go-mail team

--
This is a signature"""

B64_BODY = """RGVhciBDdXN0b21lciwKClRoaXMgaXMgYSB0ZXN0IG1haWwuIFBsZWFzZSBkbyBub3QgcmVwbHkg
dG8gdGhpcy4gQWxzbyB0aGlzIGxpbmUgaXMgdmVyeSBsb25nIHNvIGl0CnNob3VsZCBiZSB3cmFw
cGVkLgoKClRoYW5rIHlvdXIgZm9yIHlvdXIgYnVzaW5lc3MhClRoZSBnby1tYWlsIHRlYW0KCi0t
ClRoaXMgaXMgYSBzaWduYXR1cmU="""

DEFAULT_DATE = "Wed, 01 Nov 2023 00:00:00 +0000"


# ------------------------------------------------------------------
# Sample EML builders
# ------------------------------------------------------------------


def _build_eml(
    *,
    subject: str = "Example mail // plain text without encoding",
    body: str = PLAIN_BODY,
    encoding: str | None = "8bit",
    date: str | None = DEFAULT_DATE,
    content_type: str | None = "text/plain; charset=UTF-8",
    extra_headers: list[tuple[str, str]] | None = None,
    newline: str = "\n",
) -> str:
    """Build a single-part message in the layout go-mail writes."""
    headers: list[tuple[str, str]] = []
    if date is not None:
        headers.append(("Date", date))
    headers += [
        ("MIME-Version", "1.0"),
        ("Message-ID", "<1305604950.683004066175.AAAAAAAAaaaaaaaaB@go-mail.dev>"),
        ("Subject", subject),
        ("User-Agent", "go-mail v0.4.0 // https://github.com/wneessen/go-mail"),
        ("X-Mailer", "go-mail v0.4.0 // https://github.com/wneessen/go-mail"),
        ("From", '"Toni Tester" <go-mail@go-mail.dev>'),
        ("To", "<go-mail+test@go-mail.dev>"),
        ("Cc", "<go-mail+cc@go-mail.dev>"),
    ]
    if content_type is not None:
        headers.append(("Content-Type", content_type))
    if encoding is not None:
        headers.append(("Content-Transfer-Encoding", encoding))
    headers += extra_headers or []

    lines = [f"{name}: {value}" for name, value in headers]
    lines.append("")
    lines.extend(body.split("\n"))
    return newline.join(lines)


def _qp_encode(text: str, charset: str = "utf-8") -> str:
    return quopri.encodestring(text.encode(charset)).decode("ascii")


def _b64_encode(text: str, charset: str = "utf-8") -> str:
    encoded = base64.b64encode(text.encode(charset)).decode("ascii")
    return "\n".join(encoded[i : i + 76] for i in range(0, len(encoded), 76))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("EML_MISSING_DATE", "EML_DEFAULT_ENCODING", "EML_DEFAULT_CHARSET", "EML_FILE_ENCODING"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def settings() -> ParserSettings:
    return ParserSettings()


@pytest.fixture
def plain_eml() -> str:
    return _build_eml()


@pytest.fixture
def qp_eml() -> str:
    return _build_eml(
        subject="Example mail // plain text quoted-printable",
        body=QP_BODY,
        encoding="quoted-printable",
    )


@pytest.fixture
def b64_eml() -> str:
    return _build_eml(
        subject="Example mail // plain text base64",
        body=B64_BODY,
        encoding="base64",
    )


@pytest.fixture
def invalid_date_eml() -> str:
    return _build_eml(date="Inv, 99 Nov 9999 99:99:00 +0000")


@pytest.fixture
def no_date_eml() -> str:
    return _build_eml(date=None)


@pytest.fixture
def write_eml(tmp_path: Path):
    """Write text to a .eml file under tmp_path and return its path."""

    def _write(text: str, name: str = "message.eml", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode(encoding))
        return path

    return _write
