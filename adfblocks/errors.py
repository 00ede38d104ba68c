"""Exceptions raised when reading, writing or checking volume blocks."""

from __future__ import annotations


class AdfError(Exception):
    """Base class for every error raised by this package."""


class BlockOutOfRangeError(AdfError, IndexError):
    """A sector number lies outside the area of the volume or device."""

    def __init__(self, sector: int, first: int | None = None, last: int | None = None):
        self.sector = sector
        self.first = first
        self.last = last
        if first is not None and last is not None:
            message = f"sector {sector} out of range [{first}, {last}]"
        else:
            message = f"sector {sector} out of range"
        super().__init__(message)


class ReadOnlyError(AdfError):
    """A write was attempted on a read-only volume or device."""

    def __init__(self, message: str = "volume is read-only"):
        super().__init__(message)


class BlockFormatError(AdfError, ValueError):
    """A block has the wrong type, secondary type, checksum or header key."""

    def __init__(self, message: str, sector: int | None = None):
        self.sector = sector
        if sector is not None:
            message = f"{message} (sector {sector})"
        super().__init__(message)


class DirectoryNotEmptyError(AdfError):
    """A directory cannot be removed because it still holds entries."""

    def __init__(self, name: str = ""):
        self.name = name
        message = f"directory {name!r} is not empty" if name else "directory is not empty"
        super().__init__(message)