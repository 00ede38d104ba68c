import pytest

from adfblocks.constants import MAX_DATABLK
from adfblocks.filesize import (
    data_blocks,
    datablock_index,
    ext_blocks,
    ext_blocks_for_data,
    total_blocks,
)

BLOCK_SIZES = [488, 512]


@pytest.mark.parametrize("block_size", BLOCK_SIZES)
@pytest.mark.parametrize("count", [1, 2, 72, 73, 500])
def test_exact_multiples(block_size, count):
    assert data_blocks(count * block_size, block_size) == count
    assert data_blocks(count * block_size + 1, block_size) == count + 1


@pytest.mark.parametrize("block_size", BLOCK_SIZES)
def test_empty_file_is_header_only(block_size):
    assert data_blocks(0, block_size) == 0
    assert ext_blocks(0, block_size) == 0
    assert total_blocks(0, block_size) == 1


@pytest.mark.parametrize("block_size", BLOCK_SIZES)
@pytest.mark.parametrize("pos", [0, 1, 487, 488, 511, 512, 100000])
def test_datablock_index_brackets_position(block_size, pos):
    index = datablock_index(pos, block_size)
    assert index * block_size <= pos < (index + 1) * block_size


def test_header_block_holds_max_datablocks():
    assert ext_blocks_for_data(MAX_DATABLK) == 0
    assert ext_blocks_for_data(MAX_DATABLK + 1) == 1
    assert ext_blocks_for_data(2 * MAX_DATABLK) == 1
    assert ext_blocks_for_data(2 * MAX_DATABLK + 1) == 2


@pytest.mark.parametrize("n", [-5, 0])
def test_no_extension_without_data(n):
    assert ext_blocks_for_data(n) == 0


@pytest.mark.parametrize("block_size", BLOCK_SIZES)
@pytest.mark.parametrize("size", [1, 488, 512, 35000, 901120])
def test_total_is_sum_of_parts(block_size, size):
    assert total_blocks(size, block_size) == (
        data_blocks(size, block_size) + ext_blocks(size, block_size) + 1
    )


@pytest.mark.parametrize("size", [0, 1000, 50000, 901120])
def test_ofs_needs_at_least_as_many_blocks_as_ffs(size):
    assert total_blocks(size, 488) >= total_blocks(size, 512)


@pytest.mark.parametrize("func", [datablock_index, data_blocks, ext_blocks, total_blocks])
@pytest.mark.parametrize("block_size", [0, -512])
def test_non_positive_block_size_rejected(func, block_size):
    with pytest.raises(ValueError):
        func(100, block_size)