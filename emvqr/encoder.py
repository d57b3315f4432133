"""EMV merchant-presented payload encoder."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterator

from .crc import crc16_ccitt, format_crc
from .errors import err_invalid_field
from .models import EmvTag, PaymentPayload
from .tlv import TLVItem, build_tlv

CRC_MARKER = f"{EmvTag.CRC.value}04"

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class EncodedPayload:
    payload: str
    crc: str


def format_amount(amount: Decimal) -> str:
    """Render ``amount`` as a minor-unit digit string, e.g. ``12.5`` -> ``"1250"``."""

    if not amount.is_finite() or amount < 0:
        raise err_invalid_field(f"Amount must be zero or positive, got {amount}")
    with localcontext() as ctx:
        # Room for every integer digit plus the two minor-unit digits.
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        minor_units = amount.quantize(_CENT, rounding=ROUND_HALF_UP).scaleb(2)
    return str(int(minor_units))


def iter_fields(payload: PaymentPayload) -> Iterator[TLVItem]:
    """Yield top-level fields in canonical order, excluding the CRC."""

    yield TLVItem(tag=EmvTag.PAYLOAD_FORMAT_INDICATOR.value, value=payload.payload_format_indicator)
    yield TLVItem(tag=EmvTag.POINT_OF_INITIATION_METHOD.value, value=payload.point_of_initiation_method)
    yield TLVItem(tag=EmvTag.MERCHANT_ACCOUNT_INFO.value, value=build_tlv(payload.merchant_account_subitems()))
    yield TLVItem(tag=EmvTag.MERCHANT_CATEGORY_CODE.value, value=payload.merchant_category_code)
    yield TLVItem(tag=EmvTag.TRANSACTION_CURRENCY.value, value=payload.currency_code)
    yield TLVItem(tag=EmvTag.TRANSACTION_AMOUNT.value, value=format_amount(payload.amount))
    yield TLVItem(tag=EmvTag.COUNTRY_CODE.value, value=payload.country_code)
    yield TLVItem(tag=EmvTag.MERCHANT_NAME.value, value=payload.merchant_name)
    yield TLVItem(tag=EmvTag.MERCHANT_CITY.value, value=payload.merchant_city)
    if payload.additional_data:
        yield TLVItem(tag=EmvTag.ADDITIONAL_DATA.value, value=payload.additional_data)
    yield from payload.unknown_fields


def encode_payload(payload: PaymentPayload) -> EncodedPayload:
    """Serialize ``payload`` and append the CRC-16 field.

    Structural checks are the caller's job (``PaymentPayload.ensure_valid``).
    """

    body = build_tlv(iter_fields(payload))
    crc_input = f"{body}{CRC_MARKER}"
    crc = format_crc(crc16_ccitt(crc_input))
    return EncodedPayload(payload=f"{crc_input}{crc}", crc=crc)
