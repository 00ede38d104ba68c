"""Generic inspection of raw blocks, used to find deleted entries on a volume."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from .constants import LOGICAL_BLOCK_SIZE, MAXNAMELEN, BlockType, SecType

_NAMED_SEC_TYPES = frozenset({SecType.FILE, SecType.DIR, SecType.LFILE, SecType.LDIR})
_DELETABLE_SEC_TYPES = frozenset({SecType.FILE, SecType.DIR})

_INT32 = struct.Struct(">i")


@dataclass
class GenBlock:
    """The type, secondary type, name and parent found in any block.

    ``name`` and ``parent`` are only set for header blocks of files,
    directories and hard links; otherwise they are ``None``.
    """

    sector: int
    block_type: int
    sec_type: int
    name: str | None = None
    parent: int | None = None


def read_gen_block(data: bytes, sector: int) -> GenBlock:
    """Decode the generic fields of the raw block ``data`` read from ``sector``."""
    data = bytes(data)
    size = len(data)
    if size != LOGICAL_BLOCK_SIZE:
        raise ValueError(f"a block needs {LOGICAL_BLOCK_SIZE} bytes, got {size}")

    (block_type,) = _INT32.unpack_from(data, 0)
    (sec_type,) = _INT32.unpack_from(data, size - 4)
    block = GenBlock(sector=sector, block_type=block_type, sec_type=sec_type)

    if block_type == BlockType.HEADER and sec_type in _NAMED_SEC_TYPES:
        length = min(MAXNAMELEN, data[size - 80])
        raw_name = data[size - 79 : size - 79 + length]
        block.name = raw_name.split(b"\0", 1)[0].decode("latin-1")
        (block.parent,) = _INT32.unpack_from(data, size - 12)
    return block


def is_deleted_entry(block: GenBlock) -> bool:
    """True when a block found among free blocks looks like a deleted file or directory."""
    return block.block_type == BlockType.HEADER and block.sec_type in _DELETABLE_SEC_TYPES