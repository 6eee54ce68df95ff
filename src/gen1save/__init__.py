"""
Gen 1 Pokemon Save Package

Bounds-checked access to the 32 KiB Pokemon Red/Blue save format.

Usage:
    from gen1save import checksum, load_save, read_trainer_summary

    buffer = load_save("Pokemon Red.sav")
    print(read_trainer_summary(buffer).trainer_name)
    if not checksum.validate_main(buffer):
        checksum.fix_main(buffer)
"""

from . import checksum

# BCD
from .bcd import decode_bcd, encode_bcd, read_coins, read_money, write_coins, write_money

# Buffer
from .buffer import SaveBuffer

# Errors
from .exceptions import (
    Gen1SaveError,
    InvalidIndexError,
    OutOfRangeError,
    SaveFileError,
    ValueOutOfRangeError,
)

# File helpers
from .files import backup_file, load_save, make_backup_path, make_edited_path, write_save

# Hall of Fame
from .hall_of_fame import HallOfFameEntry, HallOfFameMon, scan_hall_of_fame

# Layout
from .layout import (
    Gen1Layout,
    bank_checksum_offset,
    box_base_offset,
    box_checksum_offset,
    box_checksum_table_base,
)

# Lookups
from .maps import get_map_name
from .species import dex_to_internal, get_species_name, internal_to_dex

# Summaries
from .summary import (
    BoxStats,
    FlagSummary,
    PokedexSummary,
    TrainerSummary,
    read_box_stats,
    read_event_flags,
    read_pokedex,
    read_trainer_summary,
)

# Text
from .text import decode_name, decode_text, encode_name, encode_text

# Validation
from .validator import has_expected_size, has_valid_main_checksum, validate_save

__version__ = "0.1.0"

__all__ = [
    "SaveBuffer",
    "Gen1Layout",
    "checksum",
    "scan_hall_of_fame",
    "load_save",
    "write_save",
    "validate_save",
    "read_trainer_summary",
    "decode_name",
    "encode_name",
    "read_money",
    "write_money",
    "Gen1SaveError",
    "OutOfRangeError",
    "InvalidIndexError",
    "ValueOutOfRangeError",
]
