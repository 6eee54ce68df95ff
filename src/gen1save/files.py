"""
Gen 1 Save - File Module

Disk I/O only: load a .sav into a SaveBuffer, write one back, and derive
the backup/edited sibling paths. No save-format knowledge lives here
beyond the expected size warning.
"""

import logging
import shutil
from pathlib import Path

from .buffer import SaveBuffer
from .config import BACKUP_PREFIX, EDITED_PREFIX
from .exceptions import SaveFileError
from .layout import Gen1Layout

logger = logging.getLogger(__name__)


def load_save(path) -> SaveBuffer:
    """
    Read a whole save file into a SaveBuffer.

    A size other than 0x8000 is logged, not rejected.

    Raises:
        SaveFileError: file missing or unreadable
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SaveFileError(f"could not read save file {path}: {e}") from e

    if len(data) != Gen1Layout.EXPECTED_SIZE:
        logger.warning(
            f"Save size is 0x{len(data):X}, not 0x{Gen1Layout.EXPECTED_SIZE:X}; "
            "this may not be a Gen 1 save"
        )
    logger.info(f"Loaded {len(data)} bytes from {path}")
    return SaveBuffer(data)


def write_save(path, buffer: SaveBuffer) -> Path:
    """Write the buffer to `path`, replacing any existing file."""
    path = Path(path)
    try:
        path.write_bytes(buffer.to_bytes())
    except OSError as e:
        raise SaveFileError(f"could not write save file {path}: {e}") from e
    logger.info(f"Wrote {buffer.size} bytes to {path}")
    return path


def make_backup_path(path) -> Path:
    path = Path(path)
    return path.with_name(BACKUP_PREFIX + path.name)


def make_edited_path(path) -> Path:
    path = Path(path)
    return path.with_name(EDITED_PREFIX + path.name)


def backup_file(path) -> Path:
    """
    Copy `path` to its "(BACKUP) " sibling.

    An existing backup is kept as-is so the oldest copy survives.

    Returns:
        Path of the backup file
    """
    backup_path = make_backup_path(path)
    if backup_path.exists():
        logger.info(f"Backup already exists, keeping it: {backup_path}")
        return backup_path

    try:
        shutil.copyfile(path, backup_path)
    except OSError as e:
        raise SaveFileError(f"could not create backup {backup_path} from {path}: {e}") from e
    logger.info(f"Backup created: {backup_path}")
    return backup_path
