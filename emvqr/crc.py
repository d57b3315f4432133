"""CRC-16/CCITT-FALSE implementation."""
from __future__ import annotations

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF


def crc16_ccitt(data: str) -> int:
    """Compute CRC-16/CCITT-FALSE over the UTF-8 bytes of ``data``.

    Polynomial 0x1021, initial value 0xFFFF, MSB first, no final XOR.
    """

    checksum = CRC16_INIT
    for byte in data.encode("utf-8"):
        checksum ^= byte << 8
        for _ in range(8):
            if checksum & 0x8000:
                checksum = (checksum << 1) ^ CRC16_POLY
            else:
                checksum <<= 1
            checksum &= 0xFFFF
    return checksum


def format_crc(checksum: int) -> str:
    return f"{checksum:04X}"
