"""Tests for species and map lookup tables."""

from gen1save.maps import MAP_NAMES, get_map_name
from gen1save.species import (
    DEX_TO_INTERNAL,
    INVALID_NAME,
    MAX_INTERNAL_SPECIES,
    SPECIES_NAMES,
    dex_to_internal,
    get_dex_name,
    get_species_name,
    internal_to_dex,
)


class TestSpecies:
    def test_table_covers_internal_range(self):
        assert len(SPECIES_NAMES) == MAX_INTERNAL_SPECIES + 1

    def test_known_names(self):
        assert get_species_name(0x01) == "RHYDON"
        assert get_species_name(0x54) == "PIKACHU"
        assert get_species_name(0x99) == "BULBASAUR"

    def test_out_of_table(self):
        assert get_species_name(0xBF) == INVALID_NAME
        assert get_species_name(-1) == INVALID_NAME

    def test_dex_mapping(self):
        assert dex_to_internal(1) == 0x99
        assert dex_to_internal(25) == 0x54
        assert internal_to_dex(0x15) == 151
        assert internal_to_dex(0x1F) is None
        assert dex_to_internal(152) is None

    def test_dex_is_bijective(self):
        assert sorted(DEX_TO_INTERNAL) == list(range(1, 152))
        assert len(set(DEX_TO_INTERNAL.values())) == 151

    def test_dex_names_are_real(self):
        for dex_no in range(1, 152):
            assert get_dex_name(dex_no) not in (INVALID_NAME, "MISSINGNO")
        assert get_dex_name(0) == INVALID_NAME


class TestMaps:
    def test_table_size(self):
        assert len(MAP_NAMES) == 256

    def test_names(self):
        assert get_map_name(0x00) == "Pallet Town"
        assert get_map_name(0x01) == "Viridian City"
        assert get_map_name(300) == "INVALID"
