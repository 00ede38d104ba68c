"""Block counts needed to store a file of a given size."""

from __future__ import annotations

from .constants import MAX_DATABLK


def _check_block_size(block_size: int) -> None:
    if block_size <= 0:
        raise ValueError(f"block size must be positive: {block_size}")


def datablock_index(pos: int, block_size: int) -> int:
    """Index of the data block that holds byte offset ``pos``."""
    _check_block_size(block_size)
    return pos // block_size


def data_blocks(size: int, block_size: int) -> int:
    """Number of data blocks needed for ``size`` bytes."""
    _check_block_size(block_size)
    return -(-size // block_size)


def ext_blocks_for_data(n_data_blocks: int) -> int:
    """Number of file extension blocks needed to list ``n_data_blocks`` blocks."""
    if n_data_blocks < 1:
        return 0
    return (n_data_blocks - 1) // MAX_DATABLK


def ext_blocks(size: int, block_size: int) -> int:
    """Number of file extension blocks needed for ``size`` bytes."""
    return ext_blocks_for_data(data_blocks(size, block_size))


def total_blocks(size: int, block_size: int) -> int:
    """All blocks a file occupies: data, extension and the header block."""
    n_data = data_blocks(size, block_size)
    return n_data + ext_blocks_for_data(n_data) + 1