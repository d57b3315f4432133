"""Payment payload record, tag identifiers and field rules."""
from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Iterable, Mapping

from .errors import err_invalid_field
from .tlv import TLVItem, build_tlv

DEFAULT_MERCHANT_GUID = "A000000677010111"
DEFAULT_COUNTRY_CODE = "SN"
DEFAULT_CURRENCY_CODE = "952"
DEFAULT_MERCHANT_CATEGORY_CODE = "5999"

# Empty and absent are the same for these; both are left out on encode.
_OPTIONAL_TEXT_FIELDS = ("merchant_identifier", "additional_data", "merchant_website", "merchant_email")


class EmvTag(str, enum.Enum):
    PAYLOAD_FORMAT_INDICATOR = "00"
    POINT_OF_INITIATION_METHOD = "01"
    MERCHANT_ACCOUNT_INFO = "29"
    MERCHANT_CATEGORY_CODE = "52"
    TRANSACTION_CURRENCY = "53"
    TRANSACTION_AMOUNT = "54"
    COUNTRY_CODE = "58"
    MERCHANT_NAME = "59"
    MERCHANT_CITY = "60"
    ADDITIONAL_DATA = "62"
    CRC = "63"


class MerchantAccountTag(str, enum.Enum):
    GLOBALLY_UNIQUE_IDENTIFIER = "00"
    MERCHANT_IDENTIFIER = "01"


class InitiationMethod(str, enum.Enum):
    STATIC = "11"
    DYNAMIC = "12"


def build_additional_data(subfields: Mapping[str, str | None]) -> str:
    """Compose a tag 62 sub-TLV blob from ``{sub_tag: value}``, skipping empty values."""

    return build_tlv(TLVItem(tag=tag, value=value) for tag, value in subfields.items() if value)


@dataclass(frozen=True)
class PaymentPayload:
    """Structured EMV merchant-presented payment data.

    ``amount`` is coerced to ``Decimal``. ``crc`` is only populated by the
    decoder; the encoder always computes a fresh checksum. ``merchant_website``
    and ``merchant_email`` are display metadata and never serialized.
    """

    payload_format_indicator: str = "01"
    point_of_initiation_method: str = InitiationMethod.DYNAMIC.value
    merchant_guid: str = ""
    merchant_identifier: str | None = None
    merchant_category_code: str = "0000"
    currency_code: str = DEFAULT_CURRENCY_CODE
    amount: Decimal = Decimal("0")
    country_code: str = DEFAULT_COUNTRY_CODE
    merchant_name: str = ""
    merchant_city: str = ""
    additional_data: str | None = None
    crc: str | None = None
    unknown_fields: tuple[TLVItem, ...] = ()
    merchant_website: str | None = None
    merchant_email: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if not isinstance(self.unknown_fields, tuple):
            object.__setattr__(self, "unknown_fields", tuple(self.unknown_fields))
        for name in _OPTIONAL_TEXT_FIELDS:
            if getattr(self, name) == "":
                object.__setattr__(self, name, None)

    @classmethod
    def create_default(cls, merchant_name: str, merchant_city: str, amount: Decimal | int | str) -> "PaymentPayload":
        return cls.create_for_country(merchant_name, merchant_city, amount, DEFAULT_COUNTRY_CODE, DEFAULT_CURRENCY_CODE)

    @classmethod
    def create_for_country(
        cls,
        merchant_name: str,
        merchant_city: str,
        amount: Decimal | int | str,
        country_code: str,
        currency_code: str,
        merchant_category_code: str = DEFAULT_MERCHANT_CATEGORY_CODE,
    ) -> "PaymentPayload":
        return cls(
            merchant_guid=DEFAULT_MERCHANT_GUID,
            merchant_category_code=merchant_category_code,
            currency_code=currency_code,
            country_code=country_code,
            merchant_name=merchant_name,
            merchant_city=merchant_city,
            amount=amount,
        )

    @classmethod
    def create_mobile_money(
        cls,
        merchant_name: str,
        merchant_city: str,
        amount: Decimal | int | str,
        phone_number: str,
        provider: str,
        country_code: str = DEFAULT_COUNTRY_CODE,
        currency_code: str = DEFAULT_CURRENCY_CODE,
    ) -> "PaymentPayload":
        """Mobile money payment; phone and provider travel in tag 62 sub-tags 01 and 02."""

        return replace(
            cls.create_for_country(merchant_name, merchant_city, amount, country_code, currency_code, "6012"),
            additional_data=build_additional_data({"01": phone_number, "02": provider}),
        )

    @classmethod
    def create_ecommerce(
        cls,
        merchant_name: str,
        merchant_city: str,
        amount: Decimal | int | str,
        country_code: str,
        currency_code: str,
        website: str,
        email: str,
    ) -> "PaymentPayload":
        return replace(
            cls.create_for_country(merchant_name, merchant_city, amount, country_code, currency_code, "5399"),
            point_of_initiation_method=InitiationMethod.DYNAMIC.value,
            merchant_website=website,
            merchant_email=email,
        )

    @classmethod
    def create_retail(
        cls,
        merchant_name: str,
        merchant_city: str,
        amount: Decimal | int | str,
        country_code: str,
        currency_code: str,
        retail_category: str = "5411",
    ) -> "PaymentPayload":
        return cls.create_for_country(
            merchant_name, merchant_city, amount, country_code, currency_code, retail_category
        ).as_static()

    @classmethod
    def create_restaurant(
        cls,
        merchant_name: str,
        merchant_city: str,
        amount: Decimal | int | str,
        country_code: str,
        currency_code: str,
    ) -> "PaymentPayload":
        return cls.create_for_country(merchant_name, merchant_city, amount, country_code, currency_code, "5812").as_static()

    @classmethod
    def create_transportation(
        cls,
        merchant_name: str,
        merchant_city: str,
        amount: Decimal | int | str,
        country_code: str,
        currency_code: str,
        transport_type: str = "4121",
    ) -> "PaymentPayload":
        return cls.create_for_country(
            merchant_name, merchant_city, amount, country_code, currency_code, transport_type
        ).as_static()

    def as_static(self) -> "PaymentPayload":
        return replace(self, point_of_initiation_method=InitiationMethod.STATIC.value)

    def as_dynamic(self) -> "PaymentPayload":
        return replace(self, point_of_initiation_method=InitiationMethod.DYNAMIC.value)

    @property
    def is_static(self) -> bool:
        return self.point_of_initiation_method == InitiationMethod.STATIC.value

    def merchant_account_subitems(self) -> Iterable[TLVItem]:
        yield TLVItem(tag=MerchantAccountTag.GLOBALLY_UNIQUE_IDENTIFIER.value, value=self.merchant_guid)
        if self.merchant_identifier:
            yield TLVItem(tag=MerchantAccountTag.MERCHANT_IDENTIFIER.value, value=self.merchant_identifier)

    def validation_errors(self) -> list[str]:
        problems: list[str] = []
        if not self.merchant_guid:
            problems.append("merchant_guid is required")
        if not self.merchant_name:
            problems.append("merchant_name is required")
        if not self.merchant_city:
            problems.append("merchant_city is required")
        if len(self.merchant_category_code) != 4:
            problems.append("merchant_category_code must be 4 characters")
        if len(self.currency_code) != 3:
            problems.append("currency_code must be 3 characters")
        if len(self.country_code) != 2:
            problems.append("country_code must be 2 characters")
        if not self.amount.is_finite() or self.amount < 0:
            problems.append("amount must be zero or positive")
        return problems

    def is_valid(self) -> bool:
        return not self.validation_errors()

    def ensure_valid(self) -> None:
        problems = self.validation_errors()
        if problems:
            raise err_invalid_field("; ".join(problems))

    def merchant_info(self) -> str:
        info = f"{self.merchant_name} - {self.merchant_city}"
        if self.merchant_website:
            info += f" | {self.merchant_website}"
        if self.merchant_email:
            info += f" | {self.merchant_email}"
        return info
