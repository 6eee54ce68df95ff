"""
Custom exceptions for the Gen 1 save module.

Every error raised by this package derives from Gen1SaveError. The
range errors also subclass the matching builtin.
"""


class Gen1SaveError(Exception):
    """Base exception for the Gen 1 save module."""
    pass


class OutOfRangeError(Gen1SaveError, IndexError):
    """
    Raised when an offset/length falls outside the save buffer.

    Also raised for bit indices outside 0..7. The buffer is never
    touched when this is raised.
    """
    pass


class InvalidIndexError(Gen1SaveError, ValueError):
    """Raised for a box, bank, slot or record index outside its range."""
    pass


class ValueOutOfRangeError(Gen1SaveError, ValueError):
    """
    Raised when a value does not fit its on-disk width.

    Packed-decimal money above 999999, coins above 9999, or a raw
    integer too wide for an 8/16/24-bit write.
    """
    pass


class SaveFileError(Gen1SaveError):
    """Error loading or writing a save file on disk."""
    pass
