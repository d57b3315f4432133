"""Scanned payload handling services."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ..codes import describe_currency, describe_merchant_category
from ..decoder import decode_payload
from ..errors import CodecError
from ..integrity import validate_payload
from ..models import PaymentPayload
from ..monitoring import record_scanned

logger = logging.getLogger("emvqr.services.scan")


@dataclass(slots=True)
class ScanResult:
    payload: PaymentPayload
    crc_valid: bool
    currency_description: str
    merchant_category_description: str


class PaymentScanner:
    """Decode scanned payloads and check their CRC separately.

    Malformed framing or amounts raise ``CodecError``; a well-formed payload
    with a bad checksum is returned with ``crc_valid=False`` so callers can
    tell tampering apart from garbage.
    """

    def scan(self, raw: str) -> ScanResult:
        try:
            payload = decode_payload(raw)
        except CodecError as exc:
            record_scanned("malformed")
            logger.info("payload rejected", extra={"code": exc.code, "payload_length": len(raw)})
            raise

        crc_valid = validate_payload(raw)
        record_scanned("valid" if crc_valid else "checksum_mismatch")
        if not crc_valid:
            logger.warning("payload checksum mismatch", extra={"crc": payload.crc, "payload_length": len(raw)})

        return ScanResult(
            payload=payload,
            crc_valid=crc_valid,
            currency_description=describe_currency(payload.currency_code),
            merchant_category_description=describe_merchant_category(payload.merchant_category_code),
        )
