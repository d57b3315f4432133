"""EMV merchant-presented payload decoder."""
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Final

from .errors import CodecError, MalformedAmountError, MalformedFramingError, err_malformed_amount, err_malformed_framing
from .models import EmvTag, MerchantAccountTag, PaymentPayload
from .tlv import TLVItem, parse_tlv

_TAGS: Final = MappingProxyType({tag.value: tag for tag in EmvTag})

# Tags copied verbatim into a PaymentPayload field.
_FIELD_BY_TAG: Final = MappingProxyType(
    {
        EmvTag.PAYLOAD_FORMAT_INDICATOR: "payload_format_indicator",
        EmvTag.POINT_OF_INITIATION_METHOD: "point_of_initiation_method",
        EmvTag.MERCHANT_CATEGORY_CODE: "merchant_category_code",
        EmvTag.TRANSACTION_CURRENCY: "currency_code",
        EmvTag.COUNTRY_CODE: "country_code",
        EmvTag.MERCHANT_NAME: "merchant_name",
        EmvTag.MERCHANT_CITY: "merchant_city",
        EmvTag.ADDITIONAL_DATA: "additional_data",
        EmvTag.CRC: "crc",
    }
)

_AMOUNT_RE = re.compile(r"[0-9]+(?:\.[0-9]*)?")


@dataclass(frozen=True)
class DecodeResult:
    payload: PaymentPayload
    error: CodecError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_amount(value: str) -> Decimal:
    """Parse a tag 54 value.

    Plain digits are minor units (``"1250"`` -> ``12.50``). A value with a
    decimal point is taken literally (``"10.00"`` -> ``10.00``). Both forms
    are built from the string, so no digits are lost to context precision.
    """

    if not _AMOUNT_RE.fullmatch(value):
        raise err_malformed_amount(f"Amount {value!r} is not a non-negative number")
    if "." in value:
        return Decimal(value)
    digits = value.zfill(3)
    return Decimal(f"{digits[:-2]}.{digits[-2:]}")


def _decode_merchant_account(value: str) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    try:
        for item in parse_tlv(value):
            if item.tag == MerchantAccountTag.GLOBALLY_UNIQUE_IDENTIFIER.value:
                fields["merchant_guid"] = item.value
            elif item.tag == MerchantAccountTag.MERCHANT_IDENTIFIER.value:
                fields["merchant_identifier"] = item.value
    except MalformedFramingError as exc:
        raise err_malformed_framing(f"Merchant account information: {exc.message}") from exc
    return fields


def _decode(raw: str) -> DecodeResult:
    # Stops at the first bad field; what was read before it is kept.
    fields: dict[str, Any] = {
        "payload_format_indicator": "",
        "point_of_initiation_method": "",
        "merchant_category_code": "",
        "currency_code": "",
        "country_code": "",
    }
    unknown: list[TLVItem] = []
    error: CodecError | None = None
    try:
        for item in parse_tlv(raw):
            tag = _TAGS.get(item.tag)
            if tag is EmvTag.MERCHANT_ACCOUNT_INFO:
                fields.update(_decode_merchant_account(item.value))
            elif tag is EmvTag.TRANSACTION_AMOUNT:
                fields["amount"] = parse_amount(item.value)
            elif tag is not None:
                fields[_FIELD_BY_TAG[tag]] = item.value
            else:
                unknown.append(item)
    except (MalformedFramingError, MalformedAmountError) as exc:
        error = exc
    return DecodeResult(payload=PaymentPayload(**fields, unknown_fields=tuple(unknown)), error=error)


def decode_payload(raw: str) -> PaymentPayload:
    """Decode an EMV payload string into a ``PaymentPayload``.

    Fields are dispatched by tag; order is irrelevant and unknown tags are
    kept in ``unknown_fields``. Fields absent from ``raw`` decode as empty
    strings. The CRC is stored but not verified, see ``integrity``.
    Raises on the first malformed field.
    """

    result = _decode(raw)
    if result.error is not None:
        raise result.error
    return result.payload


def try_decode(raw: str) -> DecodeResult:
    """Decode without raising for malformed input.

    On failure ``error`` is set and ``payload`` holds the fields read before
    the malformed one.
    """

    return _decode(raw)
