"""
Gen 1 Save - Text Module
Handles the in-game character set for names
"""

from .buffer import SaveBuffer

TERMINATOR = 0x50
SPACE = 0x7F
PLACEHOLDER = "?"

# Gen 1 character encoding table (names only)
GEN1_CHARSET = {
    # Uppercase letters (0x80-0x99)
    **{0x80 + i: chr(ord("A") + i) for i in range(26)},
    # Numbers (0xA0-0xA9)
    **{0xA0 + i: chr(ord("0") + i) for i in range(10)},
    SPACE: " ",
}

# Reverse mapping for encoding
CHARSET_TO_GEN1 = {v: k for k, v in GEN1_CHARSET.items()}


def byte_to_char(byte):
    """Map one byte to a character; unknown bytes decode as '?'."""
    return GEN1_CHARSET.get(byte, PLACEHOLDER)


def char_to_byte(char):
    """Map one character to a byte; lowercase is folded, anything else becomes space."""
    return CHARSET_TO_GEN1.get(char.upper(), SPACE)


def decode_text(data):
    """
    Decode Gen 1 text to a string.

    Args:
        data: bytes of encoded text

    Returns:
        str: Characters up to (not including) the first 0x50 terminator
    """
    result = []
    for byte in data:
        if byte == TERMINATOR:
            break
        result.append(byte_to_char(byte))
    return "".join(result)


def encode_text(text, length):
    """
    Encode a string into a fixed-length Gen 1 text field.

    At most length - 1 characters are kept so a terminator always
    follows the content; the rest of the field is 0x50.

    Args:
        text: String to encode
        length: Field size in bytes

    Returns:
        bytes: Exactly `length` bytes
    """
    if length <= 0:
        return b""

    result = bytearray([TERMINATOR] * length)
    content = text[: length - 1]
    for i, char in enumerate(content):
        result[i] = char_to_byte(char)
    result[len(content)] = TERMINATOR
    return bytes(result)


def decode_name(buffer: SaveBuffer, offset: int, length: int) -> str:
    return decode_text(buffer.slice(offset, length))


def encode_name(buffer: SaveBuffer, offset: int, length: int, name: str) -> None:
    """Write `name` into a name field; bounds are checked before writing."""
    if length <= 0:
        return
    buffer.require_range(offset, length)
    buffer.write_bytes(offset, encode_text(name, length))
