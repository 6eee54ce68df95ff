"""
Gen 1 Save - Validation Module
Size and checksum checks for a loaded save
"""

import logging

from . import checksum
from .buffer import SaveBuffer
from .exceptions import Gen1SaveError, OutOfRangeError
from .layout import BOX_BANKS, Gen1Layout

logger = logging.getLogger(__name__)


def has_expected_size(buffer: SaveBuffer) -> bool:
    return buffer.size == Gen1Layout.EXPECTED_SIZE


def require_expected_size(buffer: SaveBuffer) -> None:
    """
    Raises:
        Gen1SaveError: buffer is not exactly 0x8000 bytes
    """
    if not has_expected_size(buffer):
        raise Gen1SaveError(
            f"Unexpected save size: 0x{buffer.size:X} (expected 0x{Gen1Layout.EXPECTED_SIZE:X})"
        )


def has_valid_main_checksum(buffer: SaveBuffer) -> bool:
    """Main checksum check that treats a truncated buffer as invalid."""
    try:
        return checksum.validate_main(buffer)
    except OutOfRangeError as e:
        logger.debug(f"Main checksum unreadable: {e}")
        return False


def validate_save(buffer: SaveBuffer) -> dict:
    """
    Validate the save buffer.

    A size mismatch is a warning when the buffer is larger (e.g. trailing
    RTC bytes) and an error when it is smaller. Checksum mismatches are
    warnings; callers decide whether to repair.

    Returns:
        dict: {
            'valid': bool,
            'errors': list of str,
            'warnings': list of str,
            'checksums': {scope name: bool}
        }
    """
    results = {
        "valid": True,
        "errors": [],
        "warnings": [],
        "checksums": {},
    }

    if buffer.size < Gen1Layout.EXPECTED_SIZE:
        results["valid"] = False
        results["errors"].append(
            f"Save file too small: {buffer.size} bytes (expected {Gen1Layout.EXPECTED_SIZE})"
        )
        return results

    if buffer.size > Gen1Layout.EXPECTED_SIZE:
        results["warnings"].append(
            f"Save file larger than expected: {buffer.size} bytes (expected {Gen1Layout.EXPECTED_SIZE})"
        )

    checks = {"main": checksum.validate_main(buffer)}
    for bank_index in BOX_BANKS:
        checks[f"bank {bank_index}"] = checksum.validate_bank(buffer, bank_index)
    for box_index in range(1, Gen1Layout.BOX_COUNT + 1):
        checks[f"box {box_index}"] = checksum.validate_box(buffer, box_index)

    for scope, ok in checks.items():
        if not ok:
            results["warnings"].append(f"{scope} checksum mismatch")

    results["checksums"] = checks
    return results
