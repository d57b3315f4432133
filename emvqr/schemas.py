"""Pydantic schemas for API contracts."""
from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from .models import InitiationMethod, PaymentPayload


class TLVField(BaseModel):
    tag: str
    value: str


class PaymentPayloadSchema(BaseModel):
    payload_format_indicator: str
    point_of_initiation_method: str
    merchant_guid: str
    merchant_identifier: str | None = None
    merchant_category_code: str
    currency_code: str
    amount: Decimal
    country_code: str
    merchant_name: str
    merchant_city: str
    additional_data: str | None = None
    crc: str | None = None
    unknown_fields: list[TLVField] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: PaymentPayload) -> "PaymentPayloadSchema":
        return cls(
            payload_format_indicator=payload.payload_format_indicator,
            point_of_initiation_method=payload.point_of_initiation_method,
            merchant_guid=payload.merchant_guid,
            merchant_identifier=payload.merchant_identifier,
            merchant_category_code=payload.merchant_category_code,
            currency_code=payload.currency_code,
            amount=payload.amount,
            country_code=payload.country_code,
            merchant_name=payload.merchant_name,
            merchant_city=payload.merchant_city,
            additional_data=payload.additional_data,
            crc=payload.crc,
            unknown_fields=[TLVField(tag=item.tag, value=item.value) for item in payload.unknown_fields],
        )


class GeneratePayloadRequest(BaseModel):
    merchant_name: str
    merchant_city: str
    amount: Decimal = Field(ge=0, max_digits=15, decimal_places=2)
    merchant_guid: str | None = Field(default=None, max_length=32)
    merchant_identifier: str | None = Field(default=None, max_length=32)
    merchant_category_code: str | None = Field(default=None, pattern=r"^[0-9]{4}$")
    currency_code: str | None = Field(default=None, pattern=r"^[0-9]{3}$")
    country_code: str | None = Field(default=None, pattern=r"^[A-Z]{2}$")
    initiation_method: InitiationMethod | None = None
    additional_data: str | None = None
    render_png: bool = False


class GeneratePayloadResponse(BaseModel):
    payload: str
    crc: str
    merchant_info: str
    qr_png_base64: str | None = None


class DecodePayloadRequest(BaseModel):
    payload: str = Field(min_length=1, description="Scanned EMV payload string")


class DecodePayloadResponse(BaseModel):
    data: PaymentPayloadSchema
    crc_valid: bool
    currency_description: str
    merchant_category_description: str


class ValidatePayloadRequest(BaseModel):
    payload: str


class ValidatePayloadResponse(BaseModel):
    valid: bool


class CodeDescriptionResponse(BaseModel):
    code: str
    description: str
    alpha: str | None = None
