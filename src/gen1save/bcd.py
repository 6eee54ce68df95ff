"""
Gen 1 Save - Packed Decimal Module
Money and coins are stored as BCD: two decimal digits per byte, high nibble first.
"""

from .buffer import SaveBuffer
from .exceptions import ValueOutOfRangeError
from .layout import Gen1Layout

MONEY_MAX = 999999
COINS_MAX = 9999


def _digit(nibble):
    # Corrupt nibbles (A-F) read as 0
    return nibble if nibble <= 9 else 0


def decode_bcd(data):
    """
    Decode packed decimal bytes into an integer.

    Args:
        data: BCD bytes, most significant first

    Returns:
        int: Value formed by the 2 * len(data) digits
    """
    value = 0
    for byte in data:
        value = value * 10 + _digit(byte >> 4)
        value = value * 10 + _digit(byte & 0x0F)
    return value


def encode_bcd(value, width):
    """
    Encode an integer as `width` bytes of packed decimal.

    Raises:
        ValueOutOfRangeError: value negative or needs more than 2 * width digits
    """
    limit = 10 ** (2 * width) - 1
    if not 0 <= value <= limit:
        raise ValueOutOfRangeError(f"BCD value must be 0..{limit}, got {value}")

    digits = f"{value:0{2 * width}d}"
    return bytes(
        (int(digits[i]) << 4) | int(digits[i + 1]) for i in range(0, len(digits), 2)
    )


def read_money(buffer: SaveBuffer, offset: int = Gen1Layout.MONEY_OFFSET) -> int:
    return decode_bcd(buffer.slice(offset, Gen1Layout.MONEY_LENGTH))


def write_money(buffer: SaveBuffer, value: int, offset: int = Gen1Layout.MONEY_OFFSET) -> None:
    """Write money (0..999999) as 3-byte BCD."""
    buffer.write_bytes(offset, encode_bcd(value, Gen1Layout.MONEY_LENGTH))


def read_coins(buffer: SaveBuffer, offset: int = Gen1Layout.COINS_OFFSET) -> int:
    return decode_bcd(buffer.slice(offset, Gen1Layout.COINS_LENGTH))


def write_coins(buffer: SaveBuffer, value: int, offset: int = Gen1Layout.COINS_OFFSET) -> None:
    """Write coins (0..9999) as 2-byte BCD."""
    buffer.write_bytes(offset, encode_bcd(value, Gen1Layout.COINS_LENGTH))
