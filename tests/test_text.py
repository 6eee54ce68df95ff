"""Tests for the Gen 1 name codec."""

import pytest

from gen1save.exceptions import OutOfRangeError
from gen1save.layout import Gen1Layout
from gen1save.text import (
    SPACE,
    TERMINATOR,
    byte_to_char,
    char_to_byte,
    decode_name,
    decode_text,
    encode_name,
    encode_text,
)


class TestCharset:
    def test_letters_and_digits(self):
        assert byte_to_char(0x80) == "A"
        assert byte_to_char(0x99) == "Z"
        assert byte_to_char(0xA0) == "0"
        assert byte_to_char(0xA9) == "9"
        assert byte_to_char(SPACE) == " "

    @pytest.mark.parametrize("byte", [0x00, 0x9A, 0xE0, 0xFF])
    def test_unknown_byte_is_placeholder(self, byte):
        assert byte_to_char(byte) == "?"

    def test_lowercase_folded(self):
        assert char_to_byte("a") == char_to_byte("A") == 0x80

    @pytest.mark.parametrize("char", ["-", "é", "!", "."])
    def test_unsupported_char_is_space(self, char):
        assert char_to_byte(char) == SPACE


class TestDecode:
    def test_stops_at_terminator(self):
        assert decode_text(bytes([0x91, 0x84, 0x83, TERMINATOR, 0x80])) == "RED"

    def test_no_terminator(self):
        assert decode_text(bytes([0x80, 0x81])) == "AB"

    def test_empty(self):
        assert decode_text(b"") == ""
        assert decode_text(bytes([TERMINATOR])) == ""

    def test_garbage_becomes_placeholder(self):
        assert decode_text(bytes([0x80, 0x00, TERMINATOR])) == "A?"


class TestEncode:
    def test_short_name_padded(self):
        encoded = encode_text("RED", 11)
        assert encoded == bytes([0x91, 0x84, 0x83]) + bytes([TERMINATOR] * 8)

    def test_full_length_name_keeps_terminator(self):
        encoded = encode_text("ABCDEFGHIJK", 11)
        assert len(encoded) == 11
        assert encoded[10] == TERMINATOR
        assert decode_text(encoded) == "ABCDEFGHIJ"

    def test_non_positive_length(self):
        assert encode_text("RED", 0) == b""
        assert encode_text("RED", -3) == b""

    def test_lowercase_and_unsupported(self):
        assert decode_text(encode_text("ash-1", 11)) == "ASH 1"

    @pytest.mark.parametrize("name", ["ASH", "GARY", "RED 2", "A", ""])
    def test_round_trip(self, name):
        assert decode_text(encode_text(name, Gen1Layout.NAME_LENGTH)) == name


class TestBufferNames:
    def test_encode_then_decode(self, save):
        encode_name(save, Gen1Layout.PLAYER_NAME_OFFSET, Gen1Layout.NAME_LENGTH, "blue")
        assert decode_name(save, Gen1Layout.PLAYER_NAME_OFFSET, Gen1Layout.NAME_LENGTH) == "BLUE"

    def test_does_not_touch_neighbours(self, save):
        offset = Gen1Layout.PLAYER_NAME_OFFSET
        encode_name(save, offset, Gen1Layout.NAME_LENGTH, "BLUE")
        assert save.read8(offset - 1) == 0
        assert save.read8(offset + Gen1Layout.NAME_LENGTH) == 0

    def test_out_of_range_write_is_rejected(self, save):
        before = save.to_bytes()
        with pytest.raises(OutOfRangeError):
            encode_name(save, save.size - 5, Gen1Layout.NAME_LENGTH, "RED")
        assert save.to_bytes() == before

    def test_out_of_range_read(self, save):
        with pytest.raises(OutOfRangeError):
            decode_name(save, save.size - 5, Gen1Layout.NAME_LENGTH)
