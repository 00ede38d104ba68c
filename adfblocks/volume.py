"""Geometry of a volume inside a device and creation of its boot block."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .blocks import BootBlock
from .constants import is_ffs
from .errors import BlockOutOfRangeError

BOOT_HEADER_SIZE = 12
BOOT_CODE_SIZE = BootBlock.SIZE - BOOT_HEADER_SIZE

FFS_DATABLOCK_SIZE = 512
OFS_DATABLOCK_SIZE = 488


@dataclass(frozen=True)
class VolumeLayout:
    """Where a volume lies on its device.

    ``first_block`` and ``last_block`` are physical sectors counted from the
    start of the device; ``root_block`` is counted from ``first_block``.
    """

    first_block: int
    last_block: int
    root_block: int

    def __post_init__(self) -> None:
        if self.first_block < 0:
            raise ValueError(f"first block must not be negative: {self.first_block}")
        if self.last_block < self.first_block:
            raise ValueError(
                f"last block {self.last_block} lies before first block {self.first_block}"
            )

    @classmethod
    def for_partition(cls, heads: int, sectors: int, start: int, length: int) -> VolumeLayout:
        """Layout of a volume of ``length`` cylinders beginning at cylinder ``start``."""
        if heads <= 0 or sectors <= 0:
            raise ValueError("heads and sectors must be positive")
        if start < 0:
            raise ValueError(f"start cylinder must not be negative: {start}")
        if length <= 0:
            raise ValueError(f"volume length must be positive: {length}")
        per_cylinder = heads * sectors
        first = per_cylinder * start
        last = first + per_cylinder * length - 1
        root = (last - first + 1) // 2
        return cls(first_block=first, last_block=last, root_block=root)

    @property
    def block_count(self) -> int:
        """Number of blocks in the volume, boot blocks included."""
        return self.last_block - self.first_block + 1

    @property
    def bitmap_block_count(self) -> int:
        """Number of blocks tracked by the free-space bitmap (all but the boot blocks)."""
        return self.block_count - 2

    def is_sector_valid(self, sector: int) -> bool:
        """True when ``sector`` is a logical sector inside the volume."""
        return 0 <= sector <= self.last_block - self.first_block

    def physical_sector(self, sector: int) -> int:
        """Translate a logical sector of the volume into a device sector."""
        if not self.is_sector_valid(sector):
            raise BlockOutOfRangeError(sector, 0, self.last_block - self.first_block)
        return sector + self.first_block


def datablock_size(dos_type: int) -> int:
    """Payload bytes of a data block: 512 on FFS, 488 on OFS."""
    return FFS_DATABLOCK_SIZE if is_ffs(dos_type) else OFS_DATABLOCK_SIZE


def _dos_signature(dos_type: int) -> bytes:
    if not 0 <= dos_type <= 0xFF:
        raise ValueError(f"DOS type must fit in one byte: {dos_type}")
    return b"DOS" + bytes([dos_type])


def install_boot_code(boot: BootBlock, layout: VolumeLayout, code: bytes) -> BootBlock:
    """Return ``boot`` with ``code`` placed after its header and the root pointer set.

    ``code`` is the program stored after the 12-byte header; it is padded
    with zero bytes to fill the boot area.  The checksum is left unchanged.
    """
    code = bytes(code)
    if len(code) > BOOT_CODE_SIZE:
        raise ValueError(
            f"boot code holds at most {BOOT_CODE_SIZE} bytes, got {len(code)}"
        )
    return replace(
        boot,
        root_block=layout.block_count // 2,
        data=code.ljust(BOOT_CODE_SIZE, b"\0"),
    )


def make_boot_block(layout: VolumeLayout, dos_type: int, code: bytes | None = None) -> BootBlock:
    """Create the boot block of a freshly formatted volume.

    Without ``code`` the boot area is empty and the root pointer is zero;
    with it, the code is installed as by :func:`install_boot_code`.
    """
    boot = BootBlock(
        dos_type=_dos_signature(dos_type),
        checksum=0,
        root_block=0,
        data=bytes(BOOT_CODE_SIZE),
    )
    if code is not None:
        boot = install_boot_code(boot, layout, code)
    return boot