"""Tests for save file I/O and backups."""

import logging
from pathlib import Path

import pytest

from gen1save.buffer import SaveBuffer
from gen1save.exceptions import SaveFileError
from gen1save.files import (
    backup_file,
    load_save,
    make_backup_path,
    make_edited_path,
    write_save,
)


@pytest.fixture
def save_path(tmp_path):
    path = tmp_path / "Pokemon Red.sav"
    path.write_bytes(bytes(0x8000))
    return path


class TestPaths:
    def test_backup_path(self):
        assert make_backup_path("/saves/red.sav") == Path("/saves/(BACKUP) red.sav")

    def test_edited_path(self):
        assert make_edited_path(Path("red.sav")) == Path("(EDITED) red.sav")


class TestLoadWrite:
    def test_load(self, save_path):
        buffer = load_save(save_path)
        assert buffer.size == 0x8000

    def test_missing_file(self, tmp_path):
        with pytest.raises(SaveFileError):
            load_save(tmp_path / "missing.sav")

    def test_odd_size_warns(self, tmp_path, caplog):
        path = tmp_path / "short.sav"
        path.write_bytes(bytes(100))
        with caplog.at_level(logging.WARNING, logger="gen1save.files"):
            buffer = load_save(path)
        assert buffer.size == 100
        assert "may not be a Gen 1 save" in caplog.text

    def test_write_then_load(self, tmp_path):
        buffer = SaveBuffer(bytes(0x8000))
        buffer.write8(0x2598, 0x91)
        out = write_save(tmp_path / "out.sav", buffer)
        assert load_save(out).to_bytes() == buffer.to_bytes()

    def test_write_to_missing_dir(self, tmp_path):
        with pytest.raises(SaveFileError):
            write_save(tmp_path / "nope" / "out.sav", SaveBuffer(bytes(4)))


class TestBackup:
    def test_creates_copy(self, save_path):
        backup = backup_file(save_path)
        assert backup == make_backup_path(save_path)
        assert backup.read_bytes() == save_path.read_bytes()

    def test_existing_backup_kept(self, save_path):
        backup = backup_file(save_path)
        save_path.write_bytes(b"\x01" * 0x8000)
        assert backup_file(save_path) == backup
        assert backup.read_bytes() == bytes(0x8000)

    def test_missing_source(self, tmp_path):
        with pytest.raises(SaveFileError):
            backup_file(tmp_path / "missing.sav")
