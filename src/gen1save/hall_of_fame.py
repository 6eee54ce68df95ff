"""
Gen 1 Save - Hall of Fame Module

Recovers Hall of Fame teams from bank 0. Bank 0 has no checksum and the
game reuses it as scratch space, so the region can hold stale or
unrelated bytes. Each record is validated slot by slot and anything
implausible is dropped instead of raised.

Record layout (0x60 bytes, 50 records from 0x0598):
    6 slots x 0x10 bytes: species (1), level (1), name (11), padding (3)

The count byte at 0x284E (bank 1, checksummed) is the game's own record
count and caps what is returned.
"""

import logging
from dataclasses import dataclass, field

from .buffer import SaveBuffer
from .layout import Gen1Layout, hall_of_fame_record_offset
from .species import get_species_name, internal_to_dex
from .text import PLACEHOLDER, decode_name

logger = logging.getLogger(__name__)

# Species bytes that end a team early
SENTINEL_SPECIES = (0x00, 0xFF)

MIN_LEVEL = 1
MAX_LEVEL = 100


@dataclass
class HallOfFameMon:
    """One team member as recorded in the Hall of Fame."""

    species_id: int
    species_name: str
    level: int
    name: str

    def to_string(self) -> str:
        text = f"Species ID={self.species_id} Species Name: {self.species_name} Lv {self.level}"
        if self.name:
            text += f' "{self.name}"'
        return text


@dataclass
class HallOfFameEntry:
    """A Hall of Fame team. entry_index is the display number (1-based)."""

    entry_index: int
    team: list[HallOfFameMon] = field(default_factory=list)

    def to_string(self) -> str:
        lines = [f"Entry #{self.entry_index}:"]
        for i, mon in enumerate(self.team, start=1):
            lines.append(f"  {i}) {mon.to_string()}")
        return "\n".join(lines) + "\n"


def is_plausible_species(species_id: int) -> bool:
    """True for internal indices that map to a real Dex entry (no MISSINGNO slots)."""
    return internal_to_dex(species_id) is not None


def is_plausible_level(level: int) -> bool:
    return MIN_LEVEL <= level <= MAX_LEVEL


def name_looks_reasonable(name: str) -> bool:
    """
    Heuristic for a real decoded name.

    Rejects empty or all-space names, and names where at least half the
    characters failed to decode.
    """
    if not name or not name.strip():
        return False
    failed = name.count(PLACEHOLDER)
    return failed * 2 < len(name)


def _read_mon(buffer: SaveBuffer, mon_offset: int):
    """
    Read and validate one slot.

    Returns:
        HallOfFameMon, or None if any field is implausible
    """
    species = buffer.read8(mon_offset + Gen1Layout.HOF_MON_SPECIES_OFFSET)
    level = buffer.read8(mon_offset + Gen1Layout.HOF_MON_LEVEL_OFFSET)

    if not is_plausible_species(species):
        return None
    if not is_plausible_level(level):
        return None

    name = decode_name(buffer, mon_offset + Gen1Layout.HOF_MON_NAME_OFFSET, Gen1Layout.NAME_LENGTH)
    if not name_looks_reasonable(name):
        return None

    return HallOfFameMon(
        species_id=species,
        species_name=get_species_name(species),
        level=level,
        name=name,
    )


def scan_record(buffer: SaveBuffer, record_index: int) -> list[HallOfFameMon]:
    """
    Scan one record and return its valid members.

    A sentinel species ends the team. An invalid first slot means the
    record is noise and an empty list is returned; an invalid later slot
    is skipped.
    """
    record_offset = hall_of_fame_record_offset(record_index)
    team = []

    for slot in range(Gen1Layout.HALL_OF_FAME_MONS_PER_RECORD):
        mon_offset = record_offset + slot * Gen1Layout.HALL_OF_FAME_MON_SIZE
        species = buffer.read8(mon_offset + Gen1Layout.HOF_MON_SPECIES_OFFSET)
        if species in SENTINEL_SPECIES:
            break

        mon = _read_mon(buffer, mon_offset)
        if mon is None:
            if slot == 0:
                logger.debug(f"Hall of Fame record {record_index}: slot 0 invalid, discarding")
                return []
            logger.debug(f"Hall of Fame record {record_index}: skipping slot {slot}")
            continue

        team.append(mon)

    return team


def read_count_hint(buffer: SaveBuffer) -> int:
    """Game's Hall of Fame count, clamped to 0..50."""
    raw = buffer.read8(Gen1Layout.HALL_OF_FAME_COUNT_OFFSET)
    return max(0, min(raw, Gen1Layout.HALL_OF_FAME_MAX_RECORDS))


def scan_hall_of_fame(buffer: SaveBuffer) -> list[HallOfFameEntry]:
    """
    Recover the Hall of Fame teams the game considers present.

    All 50 record slots are scanned. If the count hint is 0 nothing is
    returned. Otherwise the newest `hint` valid records (the last ones in
    storage order) are returned, renumbered from 1.

    Raises:
        OutOfRangeError: the Hall of Fame region or count byte is outside
            the buffer. Malformed content never raises.
    """
    count_hint = read_count_hint(buffer)
    buffer.require_range(Gen1Layout.HALL_OF_FAME_OFFSET, Gen1Layout.HALL_OF_FAME_LENGTH)

    valid = []
    for record_index in range(Gen1Layout.HALL_OF_FAME_MAX_RECORDS):
        team = scan_record(buffer, record_index)
        if team:
            valid.append(HallOfFameEntry(entry_index=record_index + 1, team=team))

    logger.debug(f"Hall of Fame: {len(valid)} valid records, count hint {count_hint}")

    if count_hint == 0:
        return []

    shown = valid[-count_hint:]
    for i, entry in enumerate(shown, start=1):
        entry.entry_index = i
    return shown
