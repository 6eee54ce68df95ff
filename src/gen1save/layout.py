"""
Pokemon Generation 1 Save Layout.

Byte offsets for the 32 KiB SRAM save used by Pokemon Red/Blue.
All offsets are absolute file offsets (not bank-relative).

Primary sources:
- https://bulbapedia.bulbagarden.net/wiki/Save_data_structure_(Generation_I)
- https://github.com/pret/pokered (wram.asm / sram.asm)

Bank map:
- Bank 0 (0x0000): scratch data + Hall of Fame (NOT checksummed)
- Bank 1 (0x2000): main data, covered by the main checksum
- Bank 2 (0x4000): PC boxes 1-6 + bank/box checksums
- Bank 3 (0x6000): PC boxes 7-12 + bank/box checksums

Byte order notes:
- Trainer ID is a big-endian u16
- Money (3 bytes) and coins (2 bytes) are packed decimal, MSB first
"""

from dataclasses import dataclass
from typing import ClassVar

from .exceptions import InvalidIndexError


@dataclass(frozen=True)
class Gen1Layout:
    """Offsets and lengths for every field this package reads or writes."""

    # =========================================================================
    # FILE / BANKS
    # =========================================================================

    EXPECTED_SIZE: ClassVar[int] = 0x8000

    BANK_SIZE: ClassVar[int] = 0x2000
    BANK0_BASE: ClassVar[int] = 0x0000
    BANK1_BASE: ClassVar[int] = 0x2000
    BANK2_BASE: ClassVar[int] = 0x4000
    BANK3_BASE: ClassVar[int] = 0x6000

    # =========================================================================
    # BANK 1: MAIN DATA
    # =========================================================================

    PLAYER_NAME_OFFSET: ClassVar[int] = 0x2598
    NAME_LENGTH: ClassVar[int] = 11                  # includes 0x50 terminator

    POKEDEX_OWNED_OFFSET: ClassVar[int] = 0x25A3
    POKEDEX_SEEN_OFFSET: ClassVar[int] = 0x25B6
    POKEDEX_LENGTH: ClassVar[int] = 0x13             # 19 bytes = 152 bits, bit = dex# - 1
    POKEDEX_MAX: ClassVar[int] = 151

    BAG_ITEMS_OFFSET: ClassVar[int] = 0x25C9
    BAG_ITEMS_LENGTH: ClassVar[int] = 0x2A

    MONEY_OFFSET: ClassVar[int] = 0x25F3             # 3 bytes BCD
    MONEY_LENGTH: ClassVar[int] = 3

    RIVAL_NAME_OFFSET: ClassVar[int] = 0x25F6

    OPTIONS_OFFSET: ClassVar[int] = 0x2601
    BADGES_OFFSET: ClassVar[int] = 0x2602             # bit i = gym i (0 = Boulder)
    LETTER_DELAY_OFFSET: ClassVar[int] = 0x2604
    TRAINER_ID_OFFSET: ClassVar[int] = 0x2605         # u16 big-endian
    MUSIC_ID_OFFSET: ClassVar[int] = 0x2607
    MUSIC_BANK_OFFSET: ClassVar[int] = 0x2608
    CONTRAST_OFFSET: ClassVar[int] = 0x2609

    MAP_ID_OFFSET: ClassVar[int] = 0x260A
    # Some docs swap X/Y; these follow the Bulbapedia table
    Y_COORD_OFFSET: ClassVar[int] = 0x260D
    X_COORD_OFFSET: ClassVar[int] = 0x260E

    HALL_OF_FAME_COUNT_OFFSET: ClassVar[int] = 0x284E  # count hint for bank 0 records

    COINS_OFFSET: ClassVar[int] = 0x2850              # 2 bytes BCD
    COINS_LENGTH: ClassVar[int] = 2

    EVENT_FLAGS_OFFSET: ClassVar[int] = 0x29F3
    EVENT_FLAGS_LENGTH: ClassVar[int] = 0x140         # flag index = byte * 8 + bit

    PLAY_TIME_HOURS_OFFSET: ClassVar[int] = 0x2CED
    PLAY_TIME_MAXED_OFFSET: ClassVar[int] = 0x2CEE
    PLAY_TIME_MINUTES_OFFSET: ClassVar[int] = 0x2CEF
    PLAY_TIME_SECONDS_OFFSET: ClassVar[int] = 0x2CF0
    PLAY_TIME_FRAMES_OFFSET: ClassVar[int] = 0x2CF1

    # Main checksum: sum of 0x2598..0x3522 inclusive, stored right after
    MAIN_CHECKSUM_START: ClassVar[int] = 0x2598
    MAIN_CHECKSUM_END: ClassVar[int] = 0x3522
    MAIN_CHECKSUM_OFFSET: ClassVar[int] = 0x3523

    # =========================================================================
    # BANKS 2/3: PC BOXES
    # =========================================================================

    BOX_COUNT: ClassVar[int] = 12
    BOXES_PER_BANK: ClassVar[int] = 6
    BOX_BLOCK_SIZE: ClassVar[int] = 0x462

    BOX1_OFFSET: ClassVar[int] = 0x4000               # boxes 1-6, bank 2
    BOX7_OFFSET: ClassVar[int] = 0x6000               # boxes 7-12, bank 3

    BANK2_ALL_CHECKSUM_OFFSET: ClassVar[int] = 0x5A4C
    BANK2_BOX_CHECKSUMS_OFFSET: ClassVar[int] = 0x5A4D  # 6 bytes, one per box
    BANK3_ALL_CHECKSUM_OFFSET: ClassVar[int] = 0x7A4C
    BANK3_BOX_CHECKSUMS_OFFSET: ClassVar[int] = 0x7A4D

    # Box block sub-layout (relative to box base)
    BOX_COUNT_OFFSET: ClassVar[int] = 0x00            # 1 byte
    BOX_SPECIES_LIST_OFFSET: ClassVar[int] = 0x01     # 20 bytes (+ 0xFF terminator)
    BOX_CAPACITY: ClassVar[int] = 20
    BOX_MONS_OFFSET: ClassVar[int] = 0x16             # 1 + 20 + 1 padding
    BOX_MON_SIZE: ClassVar[int] = 0x21
    # Low confidence: level byte position inside the 0x21 box struct has not
    # been confirmed against a real save. Change it here only.
    BOX_MON_LEVEL_OFFSET: ClassVar[int] = 0x03

    # =========================================================================
    # BANK 0: HALL OF FAME (no checksum)
    # =========================================================================

    HALL_OF_FAME_OFFSET: ClassVar[int] = 0x0598
    HALL_OF_FAME_MAX_RECORDS: ClassVar[int] = 50
    HALL_OF_FAME_RECORD_SIZE: ClassVar[int] = 0x60
    HALL_OF_FAME_LENGTH: ClassVar[int] = 50 * 0x60
    HALL_OF_FAME_MONS_PER_RECORD: ClassVar[int] = 6
    HALL_OF_FAME_MON_SIZE: ClassVar[int] = 0x10
    HOF_MON_SPECIES_OFFSET: ClassVar[int] = 0x00
    HOF_MON_LEVEL_OFFSET: ClassVar[int] = 0x01
    HOF_MON_NAME_OFFSET: ClassVar[int] = 0x02         # 11 bytes


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

BOX_BANKS = (2, 3)


def _require_box_index(box_index: int) -> None:
    if not 1 <= box_index <= Gen1Layout.BOX_COUNT:
        raise InvalidIndexError(f"box index must be 1..12, got {box_index}")


def _require_bank_index(bank_index: int) -> None:
    if bank_index not in BOX_BANKS:
        raise InvalidIndexError(f"bank index must be 2 or 3, got {bank_index}")


def bank_for_box(box_index: int) -> int:
    """Bank holding a box: 2 for boxes 1-6, 3 for boxes 7-12."""
    _require_box_index(box_index)
    return 2 if box_index <= Gen1Layout.BOXES_PER_BANK else 3


def box_position_in_bank(box_index: int) -> int:
    """0-based slot of a box within its bank (0..5)."""
    _require_box_index(box_index)
    return (box_index - 1) % Gen1Layout.BOXES_PER_BANK


def box_base_offset(box_index: int) -> int:
    """
    Absolute offset of a box block.

    Args:
        box_index: 1..12

    Returns:
        Offset of the box's count byte

    Raises:
        InvalidIndexError: box_index outside 1..12
    """
    if bank_for_box(box_index) == 2:
        base = Gen1Layout.BOX1_OFFSET
    else:
        base = Gen1Layout.BOX7_OFFSET
    return base + box_position_in_bank(box_index) * Gen1Layout.BOX_BLOCK_SIZE


def bank_base(bank_index: int) -> int:
    _require_bank_index(bank_index)
    return Gen1Layout.BANK2_BASE if bank_index == 2 else Gen1Layout.BANK3_BASE


def bank_checksum_offset_for_bank(bank_index: int) -> int:
    """Offset of the bank-all checksum byte for bank 2 or 3."""
    _require_bank_index(bank_index)
    if bank_index == 2:
        return Gen1Layout.BANK2_ALL_CHECKSUM_OFFSET
    return Gen1Layout.BANK3_ALL_CHECKSUM_OFFSET


def bank_checksum_offset(box_index: int) -> int:
    """Offset of the bank-all checksum byte covering a box."""
    return bank_checksum_offset_for_bank(bank_for_box(box_index))


def box_checksum_table_base(box_index: int) -> int:
    """Start of the 6-byte per-box checksum table for a box's bank."""
    if bank_for_box(box_index) == 2:
        return Gen1Layout.BANK2_BOX_CHECKSUMS_OFFSET
    return Gen1Layout.BANK3_BOX_CHECKSUMS_OFFSET


def box_checksum_offset(box_index: int) -> int:
    """Offset of the per-box checksum byte for a box."""
    return box_checksum_table_base(box_index) + box_position_in_bank(box_index)


def box_mon_offset(box_index: int, slot: int) -> int:
    """Offset of the `slot`-th (0-based) member struct in a box."""
    if not 0 <= slot < Gen1Layout.BOX_CAPACITY:
        raise InvalidIndexError(f"box slot must be 0..19, got {slot}")
    return (
        box_base_offset(box_index)
        + Gen1Layout.BOX_MONS_OFFSET
        + slot * Gen1Layout.BOX_MON_SIZE
    )


def hall_of_fame_record_offset(record_index: int) -> int:
    """Offset of a Hall of Fame record (0-based)."""
    if not 0 <= record_index < Gen1Layout.HALL_OF_FAME_MAX_RECORDS:
        raise InvalidIndexError(f"record index must be 0..49, got {record_index}")
    return Gen1Layout.HALL_OF_FAME_OFFSET + record_index * Gen1Layout.HALL_OF_FAME_RECORD_SIZE
