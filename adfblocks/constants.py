"""On-disk constants of the Amiga file system and helpers for the DOS type byte."""

from __future__ import annotations

from enum import IntEnum, IntFlag

LOGICAL_BLOCK_SIZE = 512

HT_SIZE = 72
BM_SIZE = 25
MAX_DATABLK = 72

MAXNAMELEN = 30
MAXCMMTLEN = 79

BM_VALID = -1
BM_INVALID = 0


class FsFlags(IntFlag):
    """Bits of the fourth byte of the DOS type ("DOS\\x00" .. "DOS\\x07")."""

    FFS = 1
    INTL = 2
    DIRCACHE = 4


class AccessFlags(IntFlag):
    """Protection bits of a file or directory entry."""

    D = 1 << 0
    E = 1 << 1
    W = 1 << 2
    R = 1 << 3
    A = 1 << 4
    P = 1 << 5
    S = 1 << 6
    H = 1 << 7


class BlockType(IntEnum):
    """Primary block types."""

    HEADER = 2
    DATA = 8
    LIST = 16
    DIRC = 33


class SecType(IntEnum):
    """Secondary block types of header blocks."""

    ROOT = 1
    DIR = 2
    LSOFT = 3
    LDIR = 4
    FILE = -3
    LFILE = -4


def is_ffs(dos_type: int) -> bool:
    """True when the volume uses the Fast File System."""
    return bool(dos_type & FsFlags.FFS)


def is_ofs(dos_type: int) -> bool:
    """True when the volume uses the Old File System."""
    return not dos_type & FsFlags.FFS


def is_intl(dos_type: int) -> bool:
    """True when the volume uses international name hashing."""
    return bool(dos_type & FsFlags.INTL)


def is_dircache(dos_type: int) -> bool:
    """True when the volume keeps directory cache blocks."""
    return bool(dos_type & FsFlags.DIRCACHE)