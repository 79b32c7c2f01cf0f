"""CCITT/ITU CRC-16 (polynomial x^16 + x^12 + x^5 + 1, initial value 0)."""

_POLYNOMIAL = 0x1021


def _make_table() -> tuple[int, ...]:
    table = []
    for index in range(256):
        crc = index << 8
        for _ in range(8):
            crc = (crc << 1) ^ _POLYNOMIAL if crc & 0x8000 else crc << 1
        table.append(crc & 0xFFFF)
    return tuple(table)


_TABLE = _make_table()


def crc16(data) -> int:
    """Return the CRC-16 of a bytes-like object."""
    cs = 0
    for byte in bytes(data):
        cs = ((cs << 8) & 0xFFFF) ^ _TABLE[(cs >> 8) ^ byte]
    return cs