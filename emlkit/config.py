"""Parser configuration loaded from environment variables.

Uses pydantic-settings so every field can be overridden with an
``EML_``-prefixed env var, or passed explicitly to :class:`EmlParser`.
"""

from __future__ import annotations

import codecs
from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .encoding import TransferEncoding


class MissingDatePolicy(str, Enum):
    """What the parser does when a message has no ``Date`` header."""

    SYNTHESIZE = "synthesize"
    OMIT = "omit"


class ParserSettings(BaseSettings):
    """Knobs for how lenient the parser is with incomplete messages."""

    model_config = {"env_prefix": "EML_"}

    missing_date: MissingDatePolicy = Field(
        default=MissingDatePolicy.SYNTHESIZE,
        description="Insert the current time when Date is absent, or leave it absent",
    )
    default_encoding: TransferEncoding = Field(
        default=TransferEncoding.EIGHT_BIT,
        description="Transfer encoding assumed when the header is missing or unknown",
    )
    default_charset: str = Field(
        default="utf-8",
        description="Charset assumed when Content-Type does not declare a usable one",
    )
    file_encoding: str = Field(
        default="utf-8",
        description="Text codec used to read .eml files",
    )

    @field_validator("default_charset", "file_encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"unknown codec: {value}") from exc
