"""Tests for main, bank-all and per-box checksums."""

import pytest

from gen1save import checksum
from gen1save.buffer import SaveBuffer
from gen1save.exceptions import InvalidIndexError, OutOfRangeError
from gen1save.layout import (
    Gen1Layout,
    bank_checksum_offset_for_bank,
    box_base_offset,
    box_checksum_offset,
)


def all_valid(buffer):
    return (
        checksum.validate_main(buffer)
        and all(checksum.validate_bank(buffer, b) for b in (2, 3))
        and all(checksum.validate_box(buffer, i) for i in range(1, 13))
    )


class TestPrimitive:
    def test_complement_of_sum(self):
        buf = SaveBuffer(bytes([1, 2, 3]))
        assert checksum.checksum_range(buf, 0, 2) == 0xF9

    def test_sum_wraps(self):
        buf = SaveBuffer(bytes([0xFF, 0xFF]))
        # 0x1FE -> 0xFE -> ~ = 0x01
        assert checksum.checksum_range(buf, 0, 1) == 0x01

    def test_single_byte(self):
        buf = SaveBuffer(bytes([0x00]))
        assert checksum.checksum_range(buf, 0, 0) == 0xFF

    def test_reversed_range(self):
        buf = SaveBuffer(bytes(4))
        with pytest.raises(OutOfRangeError):
            checksum.checksum_range(buf, 3, 1)

    def test_range_past_end(self):
        buf = SaveBuffer(bytes(4))
        with pytest.raises(OutOfRangeError):
            checksum.checksum_range(buf, 0, 4)


class TestMain:
    def test_blank_save_is_invalid(self, save):
        assert checksum.compute_main(save) == 0xFF
        assert not checksum.validate_main(save)

    def test_fix_then_validate(self, save):
        save.write8(Gen1Layout.PLAYER_NAME_OFFSET, 0x91)
        written = checksum.fix_main(save)
        assert save.read8(Gen1Layout.MAIN_CHECKSUM_OFFSET) == written
        assert checksum.validate_main(save)

    def test_fix_is_idempotent(self, save):
        checksum.fix_main(save)
        before = save.to_bytes()
        checksum.fix_main(save)
        assert save.to_bytes() == before

    def test_edit_invalidates(self, save):
        checksum.fix_main(save)
        save.write8(Gen1Layout.BADGES_OFFSET, 0x01)
        assert not checksum.validate_main(save)

    def test_byte_outside_range_ignored(self, save):
        checksum.fix_main(save)
        save.write8(Gen1Layout.MAIN_CHECKSUM_START - 1, 0x55)
        save.write8(Gen1Layout.MAIN_CHECKSUM_OFFSET + 1, 0x55)
        assert checksum.validate_main(save)

    def test_truncated_buffer(self):
        buf = SaveBuffer(bytes(Gen1Layout.MAIN_CHECKSUM_END))
        with pytest.raises(OutOfRangeError):
            checksum.validate_main(buf)


class TestBank:
    @pytest.mark.parametrize("bank", [2, 3])
    def test_fix_then_validate(self, save, bank):
        save.write8(bank_checksum_offset_for_bank(bank) - 1, 0x12)
        checksum.fix_bank(save, bank)
        assert checksum.validate_bank(save, bank)

    def test_covers_bank_base(self, save):
        checksum.fix_bank(save, 2)
        save.write8(Gen1Layout.BANK2_BASE, 0x01)
        assert not checksum.validate_bank(save, 2)

    @pytest.mark.parametrize("bank", [2, 3])
    def test_truncated_buffer(self, bank):
        buf = SaveBuffer(bytes(Gen1Layout.BANK2_ALL_CHECKSUM_OFFSET))
        with pytest.raises(OutOfRangeError):
            checksum.validate_bank(buf, bank)

    @pytest.mark.parametrize("bank", [0, 1, 4])
    def test_invalid_bank(self, save, bank):
        with pytest.raises(InvalidIndexError):
            checksum.validate_bank(save, bank)
        with pytest.raises(InvalidIndexError):
            checksum.fix_bank(save, bank)


class TestBox:
    @pytest.mark.parametrize("box", [1, 6, 7, 12])
    def test_truncated_buffer(self, box):
        buf = SaveBuffer(bytes(Gen1Layout.BANK2_ALL_CHECKSUM_OFFSET))
        with pytest.raises(OutOfRangeError):
            checksum.validate_box(buf, box)

    @pytest.mark.parametrize("box", [1, 6, 7, 12])
    def test_fix_then_validate(self, save, box):
        save.write8(box_base_offset(box), 3)
        checksum.fix_box(save, box)
        assert checksum.validate_box(save, box)
        assert save.read8(box_checksum_offset(box)) == checksum.compute_box(save, box)

    @pytest.mark.parametrize("box", [0, 13])
    def test_invalid_box(self, save, box):
        with pytest.raises(InvalidIndexError):
            checksum.fix_box(save, box)

    def test_boxes_independent(self, save):
        checksum.fix_all(save)
        save.write8(box_base_offset(2) + 5, 0x77)
        assert not checksum.validate_box(save, 2)
        assert checksum.validate_box(save, 1)
        assert checksum.validate_box(save, 8)


class TestFixAll:
    def test_blank_save(self, save):
        assert not all_valid(save)
        checksum.fix_all(save)
        assert all_valid(save)

    def test_no_cascade(self, save):
        checksum.fix_all(save)
        save.write8(box_base_offset(1) + 1, 0x99)

        checksum.fix_box(save, 1)
        assert checksum.validate_box(save, 1)
        assert not checksum.validate_bank(save, 2)
        assert checksum.validate_main(save)

        checksum.fix_bank(save, 2)
        assert all_valid(save)

    def test_idempotent(self, save):
        save.write_bytes(0x4100, b"\x01\x02\x03")
        save.write_bytes(0x2600, b"\x04\x05")
        checksum.fix_all(save)
        before = save.to_bytes()
        checksum.fix_all(save)
        assert save.to_bytes() == before
