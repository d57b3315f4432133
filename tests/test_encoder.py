import re
from dataclasses import replace
from decimal import Decimal

import pytest

from emvqr.crc import crc16_ccitt, format_crc
from emvqr.encoder import CRC_MARKER, encode_payload, format_amount
from emvqr.errors import InvalidFieldError
from emvqr.models import PaymentPayload, build_additional_data
from emvqr.tlv import TLVItem


class TestFormatAmount:
    def test_two_decimal_convention(self):
        assert format_amount(Decimal("12.50")) == "1250"
        assert format_amount(Decimal("12.5")) == "1250"

    def test_whole_amount(self):
        assert format_amount(Decimal("1000")) == "100000"

    def test_zero(self):
        assert format_amount(Decimal("0")) == "0"

    def test_rounds_half_up(self):
        assert format_amount(Decimal("0.005")) == "1"
        assert format_amount(Decimal("1.234")) == "123"

    def test_negative_rejected(self):
        with pytest.raises(InvalidFieldError):
            format_amount(Decimal("-1"))

    def test_amount_beyond_default_precision(self):
        assert format_amount(Decimal("1E+30")) == "1" + "0" * 32
        assert format_amount(Decimal("12345678901234567890123456789.015")) == "1234567890123456789012345678902"

    def test_non_finite_rejected(self):
        with pytest.raises(InvalidFieldError):
            format_amount(Decimal("Infinity"))


class TestEncodePayload:
    def test_dakar_scenario(self, dakar_payload):
        encoded = encode_payload(dakar_payload).payload

        assert encoded.startswith("000201")
        assert "52045411" in encoded
        assert "5303952" in encoded
        assert re.search(r"6304[0-9A-F]{4}$", encoded)

    def test_exact_layout(self, dakar_payload):
        expected_body = (
            "000201"
            "010212"
            "29200016A000000677010111"
            "52045411"
            "5303952"
            "5406100000"
            "5802SN"
            "5909Test Shop"
            "6005Dakar"
            "6304"
        )
        encoded = encode_payload(dakar_payload)

        assert encoded.payload == expected_body + encoded.crc
        assert encoded.crc == format_crc(crc16_ccitt(expected_body))

    def test_crc_field_is_last(self, dakar_payload):
        encoded = encode_payload(dakar_payload)
        assert encoded.payload[-8:] == CRC_MARKER + encoded.crc

    def test_merchant_identifier_nested(self, dakar_payload):
        payload = replace(dakar_payload, merchant_identifier="MID42")
        encoded = encode_payload(payload).payload
        assert "29290016A0000006770101110105MID42" in encoded

    def test_additional_data_optional(self, dakar_payload):
        assert "6005Dakar6304" in encode_payload(dakar_payload).payload

        payload = replace(dakar_payload, additional_data=build_additional_data({"05": "INV-1"}))
        assert "6005Dakar62090505INV-16304" in encode_payload(payload).payload

    def test_unknown_fields_emitted_before_crc(self, dakar_payload):
        payload = replace(dakar_payload, unknown_fields=(TLVItem(tag="64", value="xy"),))
        assert "6005Dakar6402xy6304" in encode_payload(payload).payload

    def test_static_initiation(self, dakar_payload):
        assert encode_payload(dakar_payload.as_static()).payload.startswith("000201010211")

    def test_overlong_name_rejected(self, dakar_payload):
        with pytest.raises(InvalidFieldError):
            encode_payload(replace(dakar_payload, merchant_name="n" * 100))

    def test_pure(self, dakar_payload):
        assert encode_payload(dakar_payload) == encode_payload(dakar_payload)
