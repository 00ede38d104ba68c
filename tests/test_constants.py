import pytest

from adfblocks.constants import (
    AccessFlags,
    BlockType,
    FsFlags,
    SecType,
    is_dircache,
    is_ffs,
    is_intl,
    is_ofs,
)


@pytest.mark.parametrize("dos_type", range(8))
def test_ffs_and_ofs_are_exclusive(dos_type):
    assert is_ffs(dos_type) != is_ofs(dos_type)


def test_ffs_intl_combination():
    dos_type = FsFlags.FFS | FsFlags.INTL
    assert is_ffs(dos_type) is True
    assert is_intl(dos_type) is True
    assert is_dircache(dos_type) is False


def test_plain_ofs_has_no_flags():
    assert is_ofs(0) is True
    assert is_intl(0) is False
    assert is_dircache(0) is False


def test_dircache_flag():
    assert is_dircache(FsFlags.DIRCACHE) is True
    assert is_ffs(FsFlags.DIRCACHE) is False


@pytest.mark.parametrize("dos_type", range(8))
def test_flags_rebuild_dos_type(dos_type):
    rebuilt = (
        (FsFlags.FFS if is_ffs(dos_type) else 0)
        | (FsFlags.INTL if is_intl(dos_type) else 0)
        | (FsFlags.DIRCACHE if is_dircache(dos_type) else 0)
    )
    assert rebuilt == dos_type


def test_access_flags_decode_from_int():
    flags = AccessFlags(AccessFlags.D.value | AccessFlags.R.value)
    assert AccessFlags.D in flags
    assert AccessFlags.R in flags
    assert AccessFlags.W not in flags


def test_all_access_bits_fit_one_byte():
    combined = AccessFlags(0)
    for flag in AccessFlags:
        combined |= flag
    assert int(combined) == 0xFF


def test_block_and_sec_types_from_values():
    assert BlockType(33) is BlockType.DIRC
    assert SecType(-3) is SecType.FILE
    assert SecType(1) is SecType.ROOT
    with pytest.raises(ValueError):
        SecType(99)