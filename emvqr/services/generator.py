"""Payment payload generation and QR building services."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from ..config import Settings, settings
from ..encoder import EncodedPayload, encode_payload
from ..models import InitiationMethod, PaymentPayload
from ..monitoring import record_encoded
from ..renderer import render_qr_payload

logger = logging.getLogger("emvqr.services.generator")


@dataclass(slots=True)
class GenerateResult:
    payload: PaymentPayload
    encoded: EncodedPayload
    qr_png_base64: str | None = None


class PaymentQRGenerator:
    def __init__(self, app_settings: Settings | None = None):
        self.settings = app_settings or settings

    def build_payload(
        self,
        *,
        merchant_name: str,
        merchant_city: str,
        amount: Decimal,
        merchant_guid: str | None = None,
        merchant_identifier: str | None = None,
        merchant_category_code: str | None = None,
        currency_code: str | None = None,
        country_code: str | None = None,
        initiation_method: InitiationMethod | None = None,
        additional_data: str | None = None,
    ) -> PaymentPayload:
        """Assemble a payment record, filling merchant defaults from settings."""

        return PaymentPayload(
            point_of_initiation_method=(initiation_method or InitiationMethod.DYNAMIC).value,
            merchant_guid=merchant_guid or self.settings.default_merchant_guid,
            merchant_identifier=merchant_identifier,
            merchant_category_code=merchant_category_code or self.settings.default_merchant_category_code,
            currency_code=currency_code or self.settings.default_currency_code,
            amount=amount,
            country_code=country_code or self.settings.default_country_code,
            merchant_name=merchant_name,
            merchant_city=merchant_city,
            additional_data=additional_data,
        )

    def generate(self, payload: PaymentPayload, *, render: bool = False) -> GenerateResult:
        """Validate and encode ``payload``; optionally render it as a PNG.

        Raises ``InvalidFieldError`` when the record fails structural checks.
        """

        payload.ensure_valid()
        encoded = encode_payload(payload)
        record_encoded(payload.point_of_initiation_method)
        logger.info(
            "payload encoded",
            extra={
                "crc": encoded.crc,
                "payload_length": len(encoded.payload),
                "currency_code": payload.currency_code,
                "initiation_method": payload.point_of_initiation_method,
            },
        )

        qr_png_base64 = None
        if render:
            rendered = render_qr_payload(
                encoded.payload,
                title=payload.merchant_name,
                error_correction=self.settings.qr_error_correction,
                box_size=self.settings.qr_box_size,
                border=self.settings.qr_border,
            )
            qr_png_base64 = rendered["png_base64"]

        return GenerateResult(payload=payload, encoded=encoded, qr_png_base64=qr_png_base64)
