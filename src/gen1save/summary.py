"""
Gen 1 Save - Summary Module

Read-only projections of a save buffer. Each summary copies the values
it needs out of the buffer; none keep a reference to it.
"""

from dataclasses import dataclass, field

from .bcd import read_coins, read_money
from .buffer import SaveBuffer
from .config import BADGE_NAMES, FLAG_INDEX_PREVIEW
from .hall_of_fame import is_plausible_level
from .layout import Gen1Layout, box_base_offset
from .maps import get_map_name
from .species import get_dex_name
from .text import decode_name


@dataclass
class TrainerSummary:
    """Player profile from bank 1."""

    trainer_name: str = ""
    rival_name: str = ""
    trainer_id: int = 0
    money: int = 0
    coins: int = 0
    badges: int = 0
    map_id: int = 0
    x: int = 0
    y: int = 0
    play_hours: int = 0
    play_minutes: int = 0
    play_seconds: int = 0

    @property
    def badge_list(self) -> list[bool]:
        """Badge ownership in gym order (bit 0 = Boulder)."""
        return [bool(self.badges & (1 << i)) for i in range(8)]

    @property
    def badge_count(self) -> int:
        return sum(self.badge_list)

    @property
    def location_name(self) -> str:
        return get_map_name(self.map_id)

    def to_string(self) -> str:
        lines = [
            f"Trainer Name: {self.trainer_name}",
            f"Rival Name:   {self.rival_name}",
            f"Trainer ID:   {self.trainer_id}",
            f"Money:        ₽{self.money}",
            f"Coins:        {self.coins}",
            "Badges List:",
        ]
        for i, (badge, owned) in enumerate(zip(BADGE_NAMES, self.badge_list), start=1):
            lines.append(f"{i}.{badge} ->{'Yes' if owned else 'No'}")
        lines.append("")
        lines.append(
            f"Location:     MapID={self.map_id}, Hex= (0x{self.map_id:02X}) {self.location_name}"
            f" X={self.x} Y={self.y}"
        )
        lines.append(f"Playtime:     {self.play_hours}h {self.play_minutes}m {self.play_seconds}s")
        return "\n".join(lines) + "\n"


@dataclass
class BoxStats:
    """Member count and mean level for one PC box."""

    box_index: int = 0
    pokemon_count: int = 0
    average_level: float = 0.0

    def to_string(self) -> str:
        text = f"Box {self.box_index}: {self.pokemon_count} Pokémon"
        if self.pokemon_count > 0:
            text += f", Avg Lv {self.average_level:.2f}"
        return text


@dataclass
class FlagSummary:
    total_flags_checked: int = 0
    total_flags_set: int = 0
    set_flag_indices: list[int] = field(default_factory=list)

    def to_string(self) -> str:
        lines = [
            f"Flags Checked: {self.total_flags_checked}",
            f"Flags Set:     {self.total_flags_set}",
        ]
        if self.set_flag_indices:
            preview = ", ".join(str(i) for i in self.set_flag_indices[:FLAG_INDEX_PREVIEW])
            if len(self.set_flag_indices) > FLAG_INDEX_PREVIEW:
                preview += " ..."
            lines.append(f"Set Flag Indices (first {FLAG_INDEX_PREVIEW}): {preview}")
        return "\n".join(lines) + "\n"


@dataclass
class PokedexSummary:
    owned_count: int = 0
    seen_count: int = 0
    owned_dex_nos: list[int] = field(default_factory=list)
    seen_dex_nos: list[int] = field(default_factory=list)
    owned_names: list[str] = field(default_factory=list)
    seen_names: list[str] = field(default_factory=list)

    def to_string(self) -> str:
        rule = "=" * 38
        lines = [
            f"Owned: {self.owned_count} / {Gen1Layout.POKEDEX_MAX}",
            f"Seen:  {self.seen_count} / {Gen1Layout.POKEDEX_MAX}",
            rule,
        ]
        if self.owned_names:
            lines.append(f"Owned List: {', '.join(self.owned_names)}")
        lines.append(rule)
        if self.seen_names:
            lines.append(f"Seen List:  {', '.join(self.seen_names)}")
        lines.append(rule)
        return "\n".join(lines) + "\n"


def count_bits_set(data_bytes):
    """Count number of bits set to 1 in a byte array."""
    return sum(bin(byte).count("1") for byte in data_bytes)


def get_set_bits(data_bytes, limit=None):
    """
    Indices of set bits, where index = byte * 8 + bit.

    Args:
        data_bytes: Bitfield bytes
        limit: Only report indices below this value

    Returns:
        list: Ascending bit indices
    """
    indices = []
    for byte_index, byte in enumerate(data_bytes):
        if not byte:
            continue
        for bit in range(8):
            if byte & (1 << bit):
                indices.append(byte_index * 8 + bit)
    if limit is not None:
        indices = [i for i in indices if i < limit]
    return indices


def read_trainer_summary(buffer: SaveBuffer) -> TrainerSummary:
    return TrainerSummary(
        trainer_name=decode_name(buffer, Gen1Layout.PLAYER_NAME_OFFSET, Gen1Layout.NAME_LENGTH),
        rival_name=decode_name(buffer, Gen1Layout.RIVAL_NAME_OFFSET, Gen1Layout.NAME_LENGTH),
        trainer_id=buffer.read16_be(Gen1Layout.TRAINER_ID_OFFSET),
        money=read_money(buffer),
        coins=read_coins(buffer),
        badges=buffer.read8(Gen1Layout.BADGES_OFFSET),
        map_id=buffer.read8(Gen1Layout.MAP_ID_OFFSET),
        x=buffer.read8(Gen1Layout.X_COORD_OFFSET),
        y=buffer.read8(Gen1Layout.Y_COORD_OFFSET),
        play_hours=buffer.read8(Gen1Layout.PLAY_TIME_HOURS_OFFSET),
        play_minutes=buffer.read8(Gen1Layout.PLAY_TIME_MINUTES_OFFSET),
        play_seconds=buffer.read8(Gen1Layout.PLAY_TIME_SECONDS_OFFSET),
    )


def read_box_stats(buffer: SaveBuffer, box_index: int) -> BoxStats:
    """
    Count and average level for one box.

    The count byte is clamped to the box capacity (20). Levels outside
    1..100 are left out of the average.

    Raises:
        InvalidIndexError: box_index outside 1..12
    """
    base = box_base_offset(box_index)
    count = min(buffer.read8(base + Gen1Layout.BOX_COUNT_OFFSET), Gen1Layout.BOX_CAPACITY)
    stats = BoxStats(box_index=box_index, pokemon_count=count)
    if count == 0:
        return stats

    mons_base = base + Gen1Layout.BOX_MONS_OFFSET
    levels = []
    for slot in range(count):
        level = buffer.read8(mons_base + slot * Gen1Layout.BOX_MON_SIZE + Gen1Layout.BOX_MON_LEVEL_OFFSET)
        if is_plausible_level(level):
            levels.append(level)

    stats.average_level = sum(levels) / len(levels) if levels else 0.0
    return stats


def read_event_flags(buffer: SaveBuffer) -> FlagSummary:
    data = buffer.slice(Gen1Layout.EVENT_FLAGS_OFFSET, Gen1Layout.EVENT_FLAGS_LENGTH)
    indices = get_set_bits(data)
    return FlagSummary(
        total_flags_checked=len(data) * 8,
        total_flags_set=count_bits_set(data),
        set_flag_indices=indices,
    )


def read_pokedex(buffer: SaveBuffer, include_names: bool = True) -> PokedexSummary:
    """
    Owned/seen counts for Dex #1..151.

    Args:
        include_names: Also resolve each Dex number to a species name
    """
    owned_bytes = buffer.slice(Gen1Layout.POKEDEX_OWNED_OFFSET, Gen1Layout.POKEDEX_LENGTH)
    seen_bytes = buffer.slice(Gen1Layout.POKEDEX_SEEN_OFFSET, Gen1Layout.POKEDEX_LENGTH)

    # Bit n is Dex #(n + 1); the 152nd bit is unused
    owned = [i + 1 for i in get_set_bits(owned_bytes, limit=Gen1Layout.POKEDEX_MAX)]
    seen = [i + 1 for i in get_set_bits(seen_bytes, limit=Gen1Layout.POKEDEX_MAX)]

    summary = PokedexSummary(
        owned_count=len(owned),
        seen_count=len(seen),
        owned_dex_nos=owned,
        seen_dex_nos=seen,
    )
    if include_names:
        summary.owned_names = [get_dex_name(n) for n in owned]
        summary.seen_names = [get_dex_name(n) for n in seen]
    return summary
