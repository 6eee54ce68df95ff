"""
Gen 1 Save - Checksum Module

Every checksum in the format is the same primitive: add the bytes of an
inclusive range, keep the low 8 bits, and store the bitwise complement.

Three scopes use it:
- Main: bank 1 data 0x2598..0x3522, stored at 0x3523
- Bank-all: everything from a box bank's base up to its stored byte
- Per-box: one 0x462-byte box block, stored in the bank's 6-byte table

Fixing one scope never updates another. After editing box data, fix the
box and then its bank; after editing bank 1 data, fix main.
"""

import logging

from .buffer import SaveBuffer
from .exceptions import OutOfRangeError
from .layout import (
    BOX_BANKS,
    Gen1Layout,
    bank_base,
    bank_checksum_offset_for_bank,
    box_base_offset,
    box_checksum_offset,
)

logger = logging.getLogger(__name__)


def checksum_range(buffer: SaveBuffer, start: int, end: int) -> int:
    """
    One's-complement of the 8-bit sum over buffer[start..end] inclusive.

    Raises:
        OutOfRangeError: end < start, or range outside the buffer
    """
    if end < start:
        raise OutOfRangeError(f"checksum range end 0x{end:X} before start 0x{start:X}")
    total = sum(buffer.slice(start, end - start + 1))
    return ~total & 0xFF


def _store(buffer: SaveBuffer, offset: int, value: int, scope: str) -> int:
    old = buffer.read8(offset)
    buffer.write8(offset, value)
    if old != value:
        logger.debug(f"{scope} checksum at 0x{offset:04X}: 0x{old:02X} -> 0x{value:02X}")
    return value


# ============================================================
# MAIN (bank 1)
# ============================================================


def compute_main(buffer: SaveBuffer) -> int:
    return checksum_range(buffer, Gen1Layout.MAIN_CHECKSUM_START, Gen1Layout.MAIN_CHECKSUM_END)


def validate_main(buffer: SaveBuffer) -> bool:
    return buffer.read8(Gen1Layout.MAIN_CHECKSUM_OFFSET) == compute_main(buffer)


def fix_main(buffer: SaveBuffer) -> int:
    return _store(buffer, Gen1Layout.MAIN_CHECKSUM_OFFSET, compute_main(buffer), "main")


# ============================================================
# BANK-ALL (banks 2 and 3)
# ============================================================


def compute_bank(buffer: SaveBuffer, bank_index: int) -> int:
    """
    Checksum over a box bank, from its base up to its stored byte.

    Args:
        bank_index: 2 or 3
    """
    checksum_offset = bank_checksum_offset_for_bank(bank_index)
    return checksum_range(buffer, bank_base(bank_index), checksum_offset - 1)


def validate_bank(buffer: SaveBuffer, bank_index: int) -> bool:
    stored = buffer.read8(bank_checksum_offset_for_bank(bank_index))
    return stored == compute_bank(buffer, bank_index)


def fix_bank(buffer: SaveBuffer, bank_index: int) -> int:
    return _store(
        buffer,
        bank_checksum_offset_for_bank(bank_index),
        compute_bank(buffer, bank_index),
        f"bank {bank_index}",
    )


# ============================================================
# PER-BOX
# ============================================================


def compute_box(buffer: SaveBuffer, box_index: int) -> int:
    start = box_base_offset(box_index)
    return checksum_range(buffer, start, start + Gen1Layout.BOX_BLOCK_SIZE - 1)


def validate_box(buffer: SaveBuffer, box_index: int) -> bool:
    return buffer.read8(box_checksum_offset(box_index)) == compute_box(buffer, box_index)


def fix_box(buffer: SaveBuffer, box_index: int) -> int:
    return _store(
        buffer,
        box_checksum_offset(box_index),
        compute_box(buffer, box_index),
        f"box {box_index}",
    )


def fix_all(buffer: SaveBuffer) -> None:
    """Repair every per-box, bank-all and main checksum byte."""
    for box_index in range(1, Gen1Layout.BOX_COUNT + 1):
        fix_box(buffer, box_index)
    for bank_index in BOX_BANKS:
        fix_bank(buffer, bank_index)
    fix_main(buffer)
    logger.info("All checksums repaired")
