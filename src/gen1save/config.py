"""
Configuration constants for gen1save.

Values the CLI and file helpers reference. Edit here, not inline.
"""

import logging
import os

# =============================================================================
# Logging
# =============================================================================
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
LOG_DATEFMT = '%H:%M:%S'

# Overridden by the GEN1SAVE_LOG_LEVEL environment variable (e.g. "DEBUG")
DEFAULT_LOG_LEVEL = os.environ.get("GEN1SAVE_LOG_LEVEL", "INFO").upper()


def resolve_log_level(name):
    """Numeric level for a level name; unknown names fall back to INFO."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


# =============================================================================
# Output Files
# =============================================================================
# "Pokemon Red.sav" -> "(BACKUP) Pokemon Red.sav" / "(EDITED) Pokemon Red.sav"
BACKUP_PREFIX = "(BACKUP) "
EDITED_PREFIX = "(EDITED) "

# =============================================================================
# Report
# =============================================================================
# Event flag indices listed before the report truncates with "..."
FLAG_INDEX_PREVIEW = 10

BADGE_NAMES = (
    "Boulder (Brock)",
    "Cascade (Misty)",
    "Thunder (Lt. Surge)",
    "Rainbow (Erika)",
    "Soul (Koga)",
    "Marsh (Sabrina)",
    "Volcano (Blaine)",
    "Earth (Giovanni)",
)
