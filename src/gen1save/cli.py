"""
gen1save - Pokemon Red/Blue save inspector

Loads a save, backs it up, validates it and prints a summary. With
--fix-checksums the repaired save is written to an "(EDITED) " copy;
the original file is never modified.

Usage:
    python -m gen1save SAVE [--no-backup] [--fix-checksums] [--output PATH] [-v]
"""

import argparse
import logging
import sys

from . import checksum
from .config import DEFAULT_LOG_LEVEL, LOG_DATEFMT, LOG_FORMAT, resolve_log_level
from .exceptions import Gen1SaveError
from .files import backup_file, load_save, make_edited_path, write_save
from .report import build_report
from .validator import validate_save

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gen1save",
        description="Inspect and repair Pokemon Red/Blue (Gen 1) save files",
    )
    parser.add_argument("save", help="Path to the .sav file")
    parser.add_argument("--no-backup", action="store_true",
                        help="Do not create a (BACKUP) copy before reading")
    parser.add_argument("--fix-checksums", action="store_true",
                        help="Repair all checksums and write an (EDITED) copy")
    parser.add_argument("--output", default=None,
                        help="Where to write the repaired save (default: (EDITED) <save>)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else resolve_log_level(DEFAULT_LOG_LEVEL),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    try:
        if not args.no_backup:
            backup_file(args.save)

        buffer = load_save(args.save)

        results = validate_save(buffer)
        for warning in results["warnings"]:
            logger.warning(warning)
        for error in results["errors"]:
            logger.error(error)
        if not results["valid"]:
            return 1

        print(build_report(buffer))

        if args.fix_checksums:
            checksum.fix_all(buffer)
            write_save(args.output or make_edited_path(args.save), buffer)

    except (Gen1SaveError, OSError) as e:
        logger.error(f"{e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
