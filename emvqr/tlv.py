"""Utility helpers to build and parse EMV-style TLV payloads."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .errors import err_invalid_field, err_malformed_framing

MAX_VALUE_LENGTH = 99
HEADER_LENGTH = 4

_ASCII_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class TLVItem:
    tag: str
    value: str
    # Position of the tag within the scanned string; -1 for items built in code.
    offset: int = field(default=-1, compare=False)

    def serialize(self) -> str:
        if len(self.value) > MAX_VALUE_LENGTH:
            raise err_invalid_field(f"Tag {self.tag} value is {len(self.value)} characters, limit is {MAX_VALUE_LENGTH}")
        length = f"{len(self.value):02d}"
        return f"{self.tag}{length}{self.value}"


def build_tlv(items: Iterable[TLVItem]) -> str:
    """Serialize iterable of TLV items into EMV string."""

    return "".join(item.serialize() for item in items)


def parse_tlv(payload: str) -> Iterator[TLVItem]:
    """Parse TLV payload string into TLV items.

    Raises ``MalformedFramingError`` when a header is truncated, a length is
    not two decimal digits, or a value runs past the end of ``payload``.
    """

    idx = 0
    total = len(payload)
    while idx < total:
        if idx + HEADER_LENGTH > total:
            raise err_malformed_framing(f"Truncated TLV header at offset {idx}")
        tag = payload[idx : idx + 2]
        length_str = payload[idx + 2 : idx + HEADER_LENGTH]
        if not set(length_str) <= _ASCII_DIGITS:
            raise err_malformed_framing(f"Non-numeric length {length_str!r} for tag {tag} at offset {idx}")
        value_start = idx + HEADER_LENGTH
        value_end = value_start + int(length_str)
        if value_end > total:
            raise err_malformed_framing(f"Tag {tag} length {length_str} exceeds payload at offset {idx}")
        yield TLVItem(tag=tag, value=payload[value_start:value_end], offset=idx)
        idx = value_end
