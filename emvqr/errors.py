"""Codec error definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class CodecError(Exception):
    code: str
    message: str
    status_code: int = 422

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


class MalformedFramingError(CodecError):
    """TLV header or declared length does not fit the input."""


class MalformedAmountError(CodecError):
    """Tag 54 value is not a non-negative amount."""


class ChecksumMismatchError(CodecError):
    """Trailing CRC does not match the recomputed checksum."""


class InvalidFieldError(CodecError):
    """Payment record fails structural checks before encoding."""


def err_malformed_framing(message: str | None = None) -> MalformedFramingError:
    return MalformedFramingError(code="ERR_MALFORMED_FRAMING", message=message or "Invalid TLV framing")


def err_malformed_amount(message: str | None = None) -> MalformedAmountError:
    return MalformedAmountError(code="ERR_MALFORMED_AMOUNT", message=message or "Invalid transaction amount")


def err_checksum_mismatch(message: str | None = None) -> ChecksumMismatchError:
    return ChecksumMismatchError(code="ERR_CHECKSUM_MISMATCH", message=message or "CRC does not match payload")


def err_invalid_field(message: str | None = None) -> InvalidFieldError:
    return InvalidFieldError(code="ERR_INVALID_FIELD", message=message or "Invalid payment field")
