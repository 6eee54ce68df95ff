"""Tests for packed decimal money and coins."""

import pytest

from gen1save.bcd import (
    COINS_MAX,
    MONEY_MAX,
    decode_bcd,
    encode_bcd,
    read_coins,
    read_money,
    write_coins,
    write_money,
)
from gen1save.buffer import SaveBuffer
from gen1save.exceptions import OutOfRangeError, ValueOutOfRangeError
from gen1save.layout import Gen1Layout


class TestCodec:
    def test_decode(self):
        assert decode_bcd(bytes([0x12, 0x34, 0x56])) == 123456
        assert decode_bcd(bytes([0x00, 0x30, 0x00])) == 3000

    def test_encode(self):
        assert encode_bcd(123456, 3) == bytes([0x12, 0x34, 0x56])
        assert encode_bcd(42, 2) == bytes([0x00, 0x42])

    def test_invalid_nibble_reads_as_zero(self):
        assert decode_bcd(bytes([0x1F])) == 10
        assert decode_bcd(bytes([0xAB, 0xC5])) == 5
        assert decode_bcd(bytes([0xFF, 0xFF, 0xFF])) == 0

    @pytest.mark.parametrize("value,width", [
        (MONEY_MAX + 1, 3),
        (COINS_MAX + 1, 2),
        (-1, 3),
    ])
    def test_encode_out_of_range(self, value, width):
        with pytest.raises(ValueOutOfRangeError):
            encode_bcd(value, width)


class TestMoney:
    @pytest.mark.parametrize("value", [0, 1, 3000, 123456, MONEY_MAX])
    def test_round_trip(self, save, value):
        write_money(save, value)
        assert read_money(save) == value

    def test_stored_bytes(self, save):
        write_money(save, 123456)
        assert save.slice(Gen1Layout.MONEY_OFFSET, 3) == bytes([0x12, 0x34, 0x56])

    def test_too_large_leaves_buffer(self, save):
        write_money(save, 500)
        with pytest.raises(ValueOutOfRangeError):
            write_money(save, MONEY_MAX + 1)
        assert read_money(save) == 500

    def test_truncated_buffer(self):
        with pytest.raises(OutOfRangeError):
            read_money(SaveBuffer(bytes(Gen1Layout.MONEY_OFFSET + 2)))


class TestCoins:
    @pytest.mark.parametrize("value", [0, 50, COINS_MAX])
    def test_round_trip(self, save, value):
        write_coins(save, value)
        assert read_coins(save) == value

    def test_too_large_leaves_buffer(self, save):
        with pytest.raises(ValueOutOfRangeError):
            write_coins(save, COINS_MAX + 1)
        assert save.slice(Gen1Layout.COINS_OFFSET, 2) == bytes(2)

    def test_money_and_coins_independent(self, save):
        write_money(save, MONEY_MAX)
        write_coins(save, 1234)
        assert read_money(save) == MONEY_MAX
        assert read_coins(save) == 1234
