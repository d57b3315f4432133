"""Payload CRC verification."""
from __future__ import annotations

from .crc import crc16_ccitt, format_crc
from .encoder import CRC_MARKER
from .errors import ChecksumMismatchError, MalformedFramingError, err_checksum_mismatch, err_malformed_framing
from .models import EmvTag
from .tlv import HEADER_LENGTH, TLVItem, parse_tlv

CRC_VALUE_LENGTH = 4
CRC_FIELD_LENGTH = HEADER_LENGTH + CRC_VALUE_LENGTH


def _trailing_crc_field(raw: str) -> TLVItem | None:
    # Fixed-position read of the last 8 characters, used when the body does not frame.
    if len(raw) < CRC_FIELD_LENGTH or raw[-CRC_FIELD_LENGTH:-CRC_VALUE_LENGTH] != CRC_MARKER:
        return None
    return TLVItem(EmvTag.CRC.value, raw[-CRC_VALUE_LENGTH:], offset=len(raw) - CRC_FIELD_LENGTH)


def locate_crc_field(raw: str) -> TLVItem | None:
    """Return the trailing ``6304`` field of ``raw``.

    A framing scan decides when the whole payload frames: the last top-level
    field must be a 4-character tag 63 and tag 63 must not appear earlier.
    When the body does not frame, the CRC field is read from the final eight
    characters instead, so the checksum still decides.
    """

    try:
        items = list(parse_tlv(raw))
    except MalformedFramingError:
        return _trailing_crc_field(raw)
    if not items:
        return None
    *body, last = items
    if last.tag != EmvTag.CRC.value or len(last.value) != CRC_VALUE_LENGTH:
        return None
    if any(item.tag == EmvTag.CRC.value for item in body):
        return None
    return last


def verify_payload(raw: str) -> None:
    """Raise unless ``raw`` ends with a CRC field matching its contents."""

    crc_field = locate_crc_field(raw)
    if crc_field is None:
        raise err_malformed_framing("Payload does not end with a single 6304 CRC field")
    expected = format_crc(crc16_ccitt(raw[: crc_field.offset + HEADER_LENGTH]))
    if crc_field.value.upper() != expected:
        raise err_checksum_mismatch(f"Expected CRC {expected}, payload carries {crc_field.value}")


def validate_payload(raw: str) -> bool:
    try:
        verify_payload(raw)
    except (MalformedFramingError, ChecksumMismatchError):
        return False
    return True
