"""Tests for save validation."""

import pytest

from gen1save import checksum
from gen1save.buffer import SaveBuffer
from gen1save.exceptions import Gen1SaveError
from gen1save.layout import Gen1Layout, box_base_offset
from gen1save.validator import (
    has_expected_size,
    has_valid_main_checksum,
    require_expected_size,
    validate_save,
)


class TestSize:
    def test_expected(self, save):
        assert has_expected_size(save)
        require_expected_size(save)

    @pytest.mark.parametrize("size", [0, 0x7FFF, 0x802C])
    def test_unexpected(self, size):
        buf = SaveBuffer(bytes(size))
        assert not has_expected_size(buf)
        with pytest.raises(Gen1SaveError):
            require_expected_size(buf)


class TestMainChecksum:
    def test_truncated_is_invalid(self):
        assert has_valid_main_checksum(SaveBuffer(b"")) is False

    def test_repaired(self, save):
        checksum.fix_main(save)
        assert has_valid_main_checksum(save) is True


class TestValidateSave:
    def test_blank_save_warns_for_every_scope(self, save):
        results = validate_save(save)
        assert results["valid"]
        assert results["errors"] == []
        assert len(results["warnings"]) == 1 + 2 + 12
        assert "main checksum mismatch" in results["warnings"]

    def test_repaired_save_is_clean(self, save):
        checksum.fix_all(save)
        results = validate_save(save)
        assert results["valid"]
        assert results["warnings"] == []
        assert all(results["checksums"].values())

    def test_reports_single_box(self, save):
        checksum.fix_all(save)
        save.write8(box_base_offset(9), 1)
        results = validate_save(save)
        assert results["checksums"]["box 9"] is False
        assert results["checksums"]["bank 3"] is False
        assert results["checksums"]["box 8"] is True
        assert results["checksums"]["main"] is True

    def test_too_small(self):
        results = validate_save(SaveBuffer(bytes(0x4000)))
        assert not results["valid"]
        assert results["errors"]
        assert results["checksums"] == {}

    def test_larger_file_warns(self):
        buf = SaveBuffer(bytes(Gen1Layout.EXPECTED_SIZE + 0x2C))
        checksum.fix_all(buf)
        results = validate_save(buf)
        assert results["valid"]
        assert len(results["warnings"]) == 1
        assert "larger" in results["warnings"][0]
