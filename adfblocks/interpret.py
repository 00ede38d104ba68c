"""Readable summaries of root, directory and file header blocks."""

from __future__ import annotations

import warnings
from datetime import datetime, timedelta, timezone
from typing import Any

from .blocks import DirBlock, FileHeaderBlock, RootBlock
from .constants import (
    BM_VALID,
    MAXCMMTLEN,
    MAXNAMELEN,
    AccessFlags,
    BlockType,
    SecType,
)

# 1978-01-01 00:00 UTC, 252460800 seconds after the Unix epoch.
AMIGA_EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=252460800)

_HEADER_TYPE_NAMES = {
    0: "NULL",
    BlockType.HEADER: "HEADER",
    BlockType.LIST: "LIST",
    BlockType.DATA: "DATA",
    BlockType.DIRC: "DIRC",
}

_SEC_TYPE_NAMES = {
    0: "NULL",
    SecType.ROOT: "ROOT",
    SecType.DIR: "DIR",
    SecType.FILE: "FILE",
    SecType.LFILE: "LFILE",
    SecType.LDIR: "LDIR",
    SecType.LSOFT: "LSOFT",
}

_BOOTABLE_CODE = bytes([
    0x43, 0xFA, 0x00, 0x3E, 0x70, 0x25, 0x4E, 0xAE, 0xFD, 0xD8, 0x4A, 0x80, 0x67, 0x0C,
    0x22, 0x40, 0x08, 0xE9, 0x00, 0x06, 0x00, 0x22, 0x4E, 0xAE, 0xFE, 0x62, 0x43, 0xFA,
    0x00, 0x18, 0x4E, 0xAE, 0xFF, 0xA0, 0x4A, 0x80, 0x67, 0x0A, 0x20, 0x40, 0x20, 0x68,
    0x00, 0x16, 0x70, 0x00, 0x4E, 0x75, 0x70, 0xFF, 0x4E, 0x75, 0x64, 0x6F, 0x73, 0x2E,
    0x6C, 0x69, 0x62, 0x72, 0x61, 0x72, 0x79, 0x00, 0x22, 0x65, 0x78, 0x70, 0x61, 0x6E,
    0x73, 0x69, 0x6F, 0x6E, 0x2E, 0x6C, 0x69, 0x62, 0x72, 0x61, 0x72, 0x79,
])


def header_type_name(header_type: int) -> str:
    """Name of a primary block type, or ``"Unknown"``."""
    return _HEADER_TYPE_NAMES.get(header_type, "Unknown")


def sec_type_name(sec_type: int) -> str:
    """Name of a secondary block type, or ``"Unknown"``."""
    return _SEC_TYPE_NAMES.get(sec_type, "Unknown")


def access_flags(access: int) -> dict[str, bool]:
    """Map each protection bit letter (D, E, W, R, A, P, S, H) to whether it is set."""
    return {flag.name: bool(access & flag) for flag in AccessFlags}


def stamp_to_datetime(days: int, minutes: int, ticks: int) -> datetime:
    """Convert an Amiga date stamp into an aware UTC datetime.

    Ticks are truncated to whole seconds.  A warning is issued when the
    minutes or ticks are out of their normal range.
    """
    if minutes > 1440 or ticks > 3000:
        warnings.warn("Corrupt date time data", RuntimeWarning, stacklevel=2)
    return AMIGA_EPOCH_UTC + timedelta(
        days=days, minutes=minutes, seconds=int(ticks / 50)
    )


def _text(raw: bytes, length: int, limit: int, what: str) -> str:
    if length > limit:
        length = limit
        warnings.warn(f"Faulty {what} length. Text is truncated", RuntimeWarning, stacklevel=3)
    return raw[:length].split(b"\0", 1)[0].decode("latin-1")


def interpret_file_header(data: bytes) -> dict[str, Any]:
    """Summarise a 512-byte file header block."""
    block = FileHeaderBlock.from_bytes(data)
    return {
        "type": header_type_name(block.block_type),
        "header_key": block.header_key,
        "high_seq": block.high_seq,
        "data_size": block.data_size,
        "first_data": block.first_data,
        "checksum": block.checksum,
        "data_blocks": list(block.data_blocks),
        "access": access_flags(block.access),
        "byte_size": block.byte_size,
        "comment": _text(block.comment, block.comm_len, MAXCMMTLEN, "comment"),
        "modified": stamp_to_datetime(block.days, block.mins, block.ticks),
        "filename": _text(block.file_name, block.name_len, MAXNAMELEN, "file name"),
        "real": block.real,
        "next_link": block.next_link,
        "next_same_hash": block.next_same_hash,
        "parent": block.parent,
        "extension": block.extension,
        "sec_type": sec_type_name(block.sec_type),
    }


def interpret_dir_header(data: bytes) -> dict[str, Any]:
    """Summarise a 512-byte directory header block."""
    block = DirBlock.from_bytes(data)
    return {
        "type": header_type_name(block.block_type),
        "sector": block.header_key,
        "high_seq": block.high_seq,
        "checksum": block.checksum,
        "hash_table": list(block.hash_table),
        "access": access_flags(block.access),
        "comment": _text(block.comment, block.comm_len, MAXCMMTLEN, "comment"),
        "modified": stamp_to_datetime(block.days, block.mins, block.ticks),
        "dirname": _text(block.dir_name, block.name_len, MAXNAMELEN, "directory name"),
        "real": block.real,
        "next_link": block.next_link,
        "next_same_hash": block.next_same_hash,
        "parent": block.parent,
        "extension": block.extension,
        "sec_type": sec_type_name(block.sec_type),
    }


def interpret_root_header(data: bytes) -> dict[str, Any]:
    """Summarise a 512-byte root block."""
    block = RootBlock.from_bytes(data)
    return {
        "type": header_type_name(block.block_type),
        "header_key": block.header_key,
        "high_seq": block.high_seq,
        "first_data": block.first_data,
        "checksum": block.checksum,
        "hash_table": list(block.hash_table),
        "bitmap_flag": block.bm_flag == BM_VALID,
        "bm_pages": list(block.bm_pages),
        "bm_ext": block.bm_ext,
        "creation": stamp_to_datetime(block.c_days, block.c_mins, block.c_ticks),
        "disk_name": _text(block.disk_name, block.name_len, MAXNAMELEN, "disk name"),
        "access": stamp_to_datetime(block.days, block.mins, block.ticks),
        "creation_o": stamp_to_datetime(block.co_days, block.co_mins, block.co_ticks),
        "next_same_hash": block.next_same_hash,
        "parent": block.parent,
        "extension": block.extension,
        "sec_type": sec_type_name(block.sec_type),
    }


def bootable_code() -> bytes:
    """Standard boot code placed after the 12-byte boot block header."""
    return _BOOTABLE_CODE