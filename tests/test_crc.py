from emvqr.crc import CRC16_INIT, crc16_ccitt, format_crc


class TestCrc16Ccitt:
    def test_empty_string_is_initial_value(self):
        assert crc16_ccitt("") == CRC16_INIT == 0xFFFF

    def test_standard_check_value(self):
        # CRC-16/CCITT-FALSE check value
        assert crc16_ccitt("123456789") == 0x29B1

    def test_deterministic(self):
        data = "00020101021229200016A0000006770101115204541153039526304"
        assert crc16_ccitt(data) == crc16_ccitt(data)

    def test_fits_sixteen_bits(self):
        assert 0 <= crc16_ccitt("x" * 500) <= 0xFFFF

    def test_single_character_change_alters_checksum(self):
        assert crc16_ccitt("5909Test Shop") != crc16_ccitt("5909Test Shoq")


class TestFormatCrc:
    def test_uppercase_hex(self):
        assert format_crc(0x29B1) == "29B1"
        assert format_crc(0xABCD) == "ABCD"

    def test_zero_padded(self):
        assert format_crc(0x00AF) == "00AF"
        assert format_crc(0) == "0000"
