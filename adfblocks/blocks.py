"""Big-endian on-disk layouts of the blocks of an Amiga OFS/FFS volume.

Every block class is a dataclass whose fields follow the on-disk order.
``from_bytes`` decodes a raw block of exactly ``SIZE`` bytes and ``to_bytes``
encodes it again.  Fixed-size byte fields are padded with zero bytes when
encoded. Reserved areas are kept, so decoding and encoding any block gives
back the same bytes.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field, fields
from itertools import islice
from typing import Any, Callable, ClassVar, TypeVar

from .constants import (
    HT_SIZE,
    LOGICAL_BLOCK_SIZE,
    MAX_DATABLK,
    MAXCMMTLEN,
    MAXNAMELEN,
    BM_SIZE,
    BlockType,
    SecType,
)

NAME_FIELD = MAXNAMELEN + 1
COMMENT_FIELD = MAXCMMTLEN + 1
_COMMENT_GAP = 91 - COMMENT_FIELD
OFS_DATA_SIZE = 488
BITMAP_MAP_SIZE = 127

_T = TypeVar("_T", bound="_BlockStruct")


def _scalar(code: str, default: int = 0) -> Any:
    return field(default=default, metadata={"fmt": code})


def _i32(default: int = 0) -> Any:
    return _scalar("i", default)


def _u32(default: int = 0) -> Any:
    return _scalar("I", default)


def _u8(default: int = 0) -> Any:
    return _scalar("B", default)


def _i16(default: int = 0) -> Any:
    return _scalar("h", default)


def _array(code: str, count: int, default: int = 0) -> Any:
    return field(
        default_factory=lambda: [default] * count,
        metadata={"fmt": f"{count}{code}", "count": count},
    )


def _i32s(count: int, default: int = 0) -> Any:
    return _array("i", count, default)


def _u32s(count: int, default: int = 0) -> Any:
    return _array("I", count, default)


def _raw(size: int, default: bytes = b"") -> Any:
    return field(
        default=default.ljust(size, b"\0"),
        metadata={"fmt": f"{size}s", "size": size},
    )


def _converted(
    code: str,
    count: int,
    factory: Callable[[], Any],
    decode: Callable[[list[int]], Any],
    encode: Callable[[Any], list[int]],
) -> Any:
    return field(
        default_factory=factory,
        metadata={
            "fmt": f"{count}{code}",
            "count": count,
            "decode": decode,
            "encode": encode,
        },
    )


class _BlockStruct:
    """Shared decoding and encoding for fixed-layout blocks."""

    SIZE: ClassVar[int] = 0
    _struct: ClassVar[struct.Struct]
    _specs: ClassVar[tuple]

    @classmethod
    def _decode(cls: type[_T], data: bytes) -> _T:
        data = bytes(data)
        if len(data) != cls.SIZE:
            raise ValueError(
                f"{cls.__name__} needs {cls.SIZE} bytes, got {len(data)}"
            )
        values = iter(cls._struct.unpack(data))
        kwargs: dict[str, Any] = {}
        for spec in cls._specs:
            count = spec.metadata.get("count")
            value: Any = next(values) if count is None else list(islice(values, count))
            decode = spec.metadata.get("decode")
            if decode is not None:
                value = decode(value)
            kwargs[spec.name] = value
        return cls(**kwargs)

    def _encode(self) -> bytes:
        flat: list[Any] = []
        for spec in self._specs:
            value = getattr(self, spec.name)
            encode = spec.metadata.get("encode")
            if encode is not None:
                value = encode(value)
            count = spec.metadata.get("count")
            if count is not None:
                items = list(value)
                if len(items) != count:
                    raise ValueError(
                        f"{spec.name} must hold {count} items, got {len(items)}"
                    )
                flat.extend(items)
                continue
            size = spec.metadata.get("size")
            if size is not None and len(value) > size:
                raise ValueError(
                    f"{spec.name} holds at most {size} bytes, got {len(value)}"
                )
            flat.append(value)
        try:
            return self._struct.pack(*flat)
        except struct.error as exc:
            raise ValueError(f"cannot encode {type(self).__name__}: {exc}") from exc


def _block(cls: type[_T]) -> type[_T]:
    cls = dataclass(cls)
    specs = tuple(f for f in fields(cls) if "fmt" in f.metadata)
    cls._specs = specs
    cls._struct = struct.Struct(">" + "".join(f.metadata["fmt"] for f in specs))
    cls.SIZE = cls._struct.size
    return cls


@_block
class BootBlock(_BlockStruct):
    """The two boot blocks at the start of a volume (1024 bytes)."""

    dos_type: bytes = _raw(4, b"DOS\0")
    checksum: int = _u32()
    root_block: int = _i32()
    data: bytes = _raw(2 * LOGICAL_BLOCK_SIZE - 12)

    @classmethod
    def from_bytes(cls, data: bytes) -> BootBlock:
        """Decode the 1024 bytes of the boot blocks."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the boot blocks."""
        return self._encode()


@_block
class RootBlock(_BlockStruct):
    """The root block holding the volume name and root directory."""

    block_type: int = _i32(BlockType.HEADER)
    header_key: int = _i32()
    high_seq: int = _i32()
    hash_table_size: int = _i32(HT_SIZE)
    first_data: int = _i32()
    checksum: int = _u32()
    hash_table: list = _i32s(HT_SIZE)
    bm_flag: int = _i32()
    bm_pages: list = _i32s(BM_SIZE)
    bm_ext: int = _i32()
    c_days: int = _i32()
    c_mins: int = _i32()
    c_ticks: int = _i32()
    name_len: int = _u8()
    disk_name: bytes = _raw(NAME_FIELD)
    reserved2: bytes = _raw(8)
    days: int = _i32()
    mins: int = _i32()
    ticks: int = _i32()
    co_days: int = _i32()
    co_mins: int = _i32()
    co_ticks: int = _i32()
    next_same_hash: int = _i32()
    parent: int = _i32()
    extension: int = _i32()
    sec_type: int = _i32(SecType.ROOT)

    @classmethod
    def from_bytes(cls, data: bytes) -> RootBlock:
        """Decode a root block."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the root block."""
        return self._encode()


@_block
class EntryBlock(_BlockStruct):
    """The fields common to every header block of a file, directory or link."""

    block_type: int = _i32()
    header_key: int = _i32()
    reserved1: list = _i32s(3)
    checksum: int = _u32()
    hash_table: list = _i32s(HT_SIZE)
    reserved2: list = _i32s(2)
    access: int = _i32()
    byte_size: int = _u32()
    comm_len: int = _u8()
    comment: bytes = _raw(COMMENT_FIELD)
    reserved3: bytes = _raw(_COMMENT_GAP)
    days: int = _i32()
    mins: int = _i32()
    ticks: int = _i32()
    name_len: int = _u8()
    name: bytes = _raw(NAME_FIELD)
    reserved4: int = _i32()
    real_entry: int = _i32()
    next_link: int = _i32()
    reserved5: list = _i32s(5)
    next_same_hash: int = _i32()
    parent: int = _i32()
    extension: int = _i32()
    sec_type: int = _i32()

    @classmethod
    def from_bytes(cls, data: bytes) -> EntryBlock:
        """Decode an entry block."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the entry block."""
        return self._encode()


@_block
class FileHeaderBlock(_BlockStruct):
    """The header block of a file."""

    block_type: int = _i32(BlockType.HEADER)
    header_key: int = _i32()
    high_seq: int = _i32()
    data_size: int = _i32()
    first_data: int = _i32()
    checksum: int = _u32()
    data_blocks: list = _i32s(MAX_DATABLK)
    reserved1: int = _i32()
    reserved2: int = _i32()
    access: int = _i32()
    byte_size: int = _u32()
    comm_len: int = _u8()
    comment: bytes = _raw(COMMENT_FIELD)
    reserved3: bytes = _raw(_COMMENT_GAP)
    days: int = _i32()
    mins: int = _i32()
    ticks: int = _i32()
    name_len: int = _u8()
    file_name: bytes = _raw(NAME_FIELD)
    reserved4: int = _i32()
    real: int = _i32()
    next_link: int = _i32()
    reserved5: list = _i32s(5)
    next_same_hash: int = _i32()
    parent: int = _i32()
    extension: int = _i32()
    sec_type: int = _i32(SecType.FILE)

    @classmethod
    def from_bytes(cls, data: bytes) -> FileHeaderBlock:
        """Decode a file header block."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the file header block."""
        return self._encode()


@_block
class FileExtBlock(_BlockStruct):
    """A file extension block listing further data blocks."""

    block_type: int = _i32(BlockType.LIST)
    header_key: int = _i32()
    high_seq: int = _i32()
    data_size: int = _i32()
    first_data: int = _i32()
    checksum: int = _u32()
    data_blocks: list = _i32s(MAX_DATABLK)
    reserved: list = _i32s(45)
    info: int = _i32()
    next_same_hash: int = _i32()
    parent: int = _i32()
    extension: int = _i32()
    sec_type: int = _i32(SecType.FILE)

    @classmethod
    def from_bytes(cls, data: bytes) -> FileExtBlock:
        """Decode a file extension block."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the file extension block."""
        return self._encode()


@_block
class DirBlock(_BlockStruct):
    """The header block of a directory."""

    block_type: int = _i32(BlockType.HEADER)
    header_key: int = _i32()
    high_seq: int = _i32()
    hash_table_size: int = _i32()
    reserved1: int = _i32()
    checksum: int = _u32()
    hash_table: list = _i32s(HT_SIZE)
    reserved2: list = _i32s(2)
    access: int = _i32()
    reserved4: int = _i32()
    comm_len: int = _u8()
    comment: bytes = _raw(COMMENT_FIELD)
    reserved5: bytes = _raw(_COMMENT_GAP)
    days: int = _i32()
    mins: int = _i32()
    ticks: int = _i32()
    name_len: int = _u8()
    dir_name: bytes = _raw(NAME_FIELD)
    reserved6: int = _i32()
    real: int = _i32()
    next_link: int = _i32()
    reserved7: list = _i32s(5)
    next_same_hash: int = _i32()
    parent: int = _i32()
    extension: int = _i32()
    sec_type: int = _i32(SecType.DIR)

    @classmethod
    def from_bytes(cls, data: bytes) -> DirBlock:
        """Decode a directory block."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the directory block."""
        return self._encode()


@_block
class OFSDataBlock(_BlockStruct):
    """A data block of the Old File System, with its 24-byte header."""

    block_type: int = _i32(BlockType.DATA)
    header_key: int = _i32()
    seq_num: int = _u32()
    data_size: int = _u32()
    next_data: int = _i32()
    checksum: int = _u32()
    data: bytes = _raw(OFS_DATA_SIZE)

    @classmethod
    def from_bytes(cls, data: bytes) -> OFSDataBlock:
        """Decode an OFS data block."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the OFS data block."""
        return self._encode()


@_block
class BitmapBlock(_BlockStruct):
    """A block of the free-space bitmap."""

    checksum: int = _u32()
    map: list = _u32s(BITMAP_MAP_SIZE)

    @classmethod
    def from_bytes(cls, data: bytes) -> BitmapBlock:
        """Decode a bitmap block."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the bitmap block."""
        return self._encode()


@_block
class BitmapExtBlock(_BlockStruct):
    """A block listing further bitmap blocks."""

    bm_pages: list = _i32s(BITMAP_MAP_SIZE)
    next_block: int = _i32()

    @classmethod
    def from_bytes(cls, data: bytes) -> BitmapExtBlock:
        """Decode a bitmap extension block."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the bitmap extension block."""
        return self._encode()


@_block
class LinkBlock(_BlockStruct):
    """The header block of a hard or soft link."""

    block_type: int = _i32(BlockType.HEADER)
    header_key: int = _i32()
    reserved1: list = _i32s(3)
    checksum: int = _u32()
    real_name: bytes = _raw(64)
    reserved2: list = _i32s(83)
    days: int = _i32()
    mins: int = _i32()
    ticks: int = _i32()
    name_len: int = _u8()
    name: bytes = _raw(NAME_FIELD)
    reserved3: int = _i32()
    real_entry: int = _i32()
    next_link: int = _i32()
    reserved4: list = _i32s(5)
    next_same_hash: int = _i32()
    parent: int = _i32()
    reserved5: int = _i32()
    sec_type: int = _i32()

    @classmethod
    def from_bytes(cls, data: bytes) -> LinkBlock:
        """Decode a link block."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the link block."""
        return self._encode()


@_block
class DirCacheBlock(_BlockStruct):
    """A directory cache block of a DIRCACHE volume."""

    block_type: int = _i32(BlockType.DIRC)
    header_key: int = _i32()
    parent: int = _i32()
    records_nb: int = _i32()
    next_dirc: int = _i32()
    checksum: int = _u32()
    records: bytes = _raw(OFS_DATA_SIZE)

    @classmethod
    def from_bytes(cls, data: bytes) -> DirCacheBlock:
        """Decode a directory cache block."""
        return cls._decode(data)

    def to_bytes(self) -> bytes:
        """Encode the directory cache block."""
        return self._encode()