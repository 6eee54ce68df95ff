"""
Bounds-checked byte buffer for Gen 1 save data.

SaveBuffer owns a mutable copy of the save bytes. Every read and write
goes through require_range() first, so a bad offset raises
OutOfRangeError before any byte is touched.

Byte order is not uniform in this format:
- Most 16-bit fields are little-endian (read16_le / write16_le)
- The trainer ID is big-endian (read16_be / write16_be)
- 24-bit fields (money) are big-endian (read24_be / write24_be)

Check the per-field notes in layout.py before picking an accessor.
"""

import struct

from .exceptions import OutOfRangeError, ValueOutOfRangeError


class SaveBuffer:
    """
    Owned, mutable byte sequence with safe accessors.

    The buffer does not enforce the 32 KiB save size; see validator.py.
    Not thread-safe: one buffer per logical save, one operation at a time.
    """

    def __init__(self, data: bytes = b""):
        self._data = bytearray(data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SaveBuffer(size=0x{len(self._data):X})"

    @property
    def size(self) -> int:
        return len(self._data)

    def to_bytes(self) -> bytes:
        """Immutable copy of the whole buffer, for writing back to disk."""
        return bytes(self._data)

    # =========================================================================
    # BOUNDS CHECKING
    # =========================================================================

    def require_range(self, offset: int, length: int) -> None:
        """
        Ensure [offset, offset + length) lies inside the buffer.

        A zero-length range is always accepted.

        Raises:
            OutOfRangeError: offset/length negative or past the end
        """
        if length == 0:
            return
        if offset < 0 or length < 0:
            raise OutOfRangeError(
                f"SaveBuffer: negative range (offset={offset}, length={length})"
            )
        if offset > len(self._data) or offset + length > len(self._data):
            raise OutOfRangeError(
                f"SaveBuffer: range 0x{offset:X}+{length} exceeds size 0x{len(self._data):X}"
            )

    @staticmethod
    def _require_bit(bit: int) -> None:
        if not 0 <= bit <= 7:
            raise OutOfRangeError(f"SaveBuffer: bit index must be 0..7, got {bit}")

    @staticmethod
    def _require_width(value: int, bits: int) -> None:
        if not 0 <= value < (1 << bits):
            raise ValueOutOfRangeError(
                f"SaveBuffer: value {value} does not fit in {bits} bits"
            )

    # =========================================================================
    # READS
    # =========================================================================

    def read8(self, offset: int) -> int:
        self.require_range(offset, 1)
        return self._data[offset]

    def read16_le(self, offset: int) -> int:
        self.require_range(offset, 2)
        return struct.unpack_from("<H", self._data, offset)[0]

    def read16_be(self, offset: int) -> int:
        self.require_range(offset, 2)
        return struct.unpack_from(">H", self._data, offset)[0]

    def read24_be(self, offset: int) -> int:
        """Read 3 bytes as [hi][mid][lo]."""
        self.require_range(offset, 3)
        hi, mid, lo = self._data[offset : offset + 3]
        return (hi << 16) | (mid << 8) | lo

    def get_bit(self, offset: int, bit: int) -> bool:
        self._require_bit(bit)
        self.require_range(offset, 1)
        return bool(self._data[offset] & (1 << bit))

    def slice(self, offset: int, length: int) -> bytes:
        """Copy of `length` bytes starting at `offset`."""
        self.require_range(offset, length)
        return bytes(self._data[offset : offset + length])

    # =========================================================================
    # WRITES
    # =========================================================================

    def write8(self, offset: int, value: int) -> None:
        self._require_width(value, 8)
        self.require_range(offset, 1)
        self._data[offset] = value

    def write16_le(self, offset: int, value: int) -> None:
        self._require_width(value, 16)
        self.require_range(offset, 2)
        struct.pack_into("<H", self._data, offset, value)

    def write16_be(self, offset: int, value: int) -> None:
        self._require_width(value, 16)
        self.require_range(offset, 2)
        struct.pack_into(">H", self._data, offset, value)

    def write24_be(self, offset: int, value: int) -> None:
        self._require_width(value, 24)
        self.require_range(offset, 3)
        self._data[offset : offset + 3] = bytes(
            ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
        )

    def set_bit(self, offset: int, bit: int, value: bool = True) -> None:
        self._require_bit(bit)
        self.require_range(offset, 1)
        mask = 1 << bit
        if value:
            self._data[offset] |= mask
        else:
            self._data[offset] &= ~mask & 0xFF

    def write_bytes(self, offset: int, data: bytes) -> None:
        """Copy `data` into the buffer at `offset`, all or nothing."""
        self.require_range(offset, len(data))
        self._data[offset : offset + len(data)] = data
