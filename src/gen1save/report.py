"""
Gen 1 Save - Report Module
Plain-text dump of everything the summary readers extract.
"""

from . import checksum
from .buffer import SaveBuffer
from .hall_of_fame import scan_hall_of_fame
from .layout import BOX_BANKS, Gen1Layout
from .summary import read_box_stats, read_event_flags, read_pokedex, read_trainer_summary


def _status(ok):
    return "VALID" if ok else "INVALID"


def build_report(buffer: SaveBuffer) -> str:
    """
    Full human-readable summary of a save.

    The Hall of Fame section is omitted when no teams are reported.
    """
    lines = ["=== Save Summary ===", ""]

    lines.append(read_trainer_summary(buffer).to_string())

    lines.append(f"Main Checksum: {_status(checksum.validate_main(buffer))}")
    for bank_index in BOX_BANKS:
        lines.append(
            f"Bank{bank_index} All Checksum: {_status(checksum.validate_bank(buffer, bank_index))}"
        )

    lines.append("--- Pokédex ---")
    lines.append(read_pokedex(buffer).to_string())

    hall_of_fame = scan_hall_of_fame(buffer)
    if hall_of_fame:
        lines.append("--- Hall of Fame ---")
        lines.extend(entry.to_string() for entry in hall_of_fame)

    lines.append("--- PC Boxes (Stats) ---")
    for box_index in range(1, Gen1Layout.BOX_COUNT + 1):
        lines.append(read_box_stats(buffer, box_index).to_string())
    lines.append("")

    lines.append("--- Event Flags (Summary) ---")
    lines.append(read_event_flags(buffer).to_string())

    return "\n".join(lines)
