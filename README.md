# adfblocks

Pure-Python tools for the raw blocks of Amiga OFS/FFS volumes, as found
in ADF disk images and hard files: decoding and encoding the boot, root,
directory, file header, extension, data, bitmap, link and directory
cache blocks, readable summaries of header blocks, Amiga date stamps,
file size arithmetic and volume layout arithmetic.

The package has no runtime dependencies.

## Installation

```
pip install adfblocks
```

## Overview

| Module | Contents |
| --- | --- |
| `adfblocks.constants` | `FsFlags`, `AccessFlags`, `BlockType`, `SecType`, size constants, and `is_ffs`, `is_ofs`, `is_intl`, `is_dircache` |
| `adfblocks.errors` | `AdfError` and its subclasses `BlockOutOfRangeError`, `ReadOnlyError`, `BlockFormatError`, `DirectoryNotEmptyError` |
| `adfblocks.amigatime` | `AmigaStamp`, `is_leap`, `days_to_date`, `datetime_to_amiga`, `amiga_to_datetime`, `current_amiga_time` |
| `adfblocks.filesize` | `datablock_index`, `data_blocks`, `ext_blocks_for_data`, `ext_blocks`, `total_blocks` |
| `adfblocks.blocks` | `BootBlock`, `RootBlock`, `EntryBlock`, `FileHeaderBlock`, `FileExtBlock`, `DirBlock`, `OFSDataBlock`, `BitmapBlock`, `BitmapExtBlock`, `LinkBlock`, `DirCacheBlock` |
| `adfblocks.interpret` | `interpret_root_header`, `interpret_dir_header`, `interpret_file_header`, `header_type_name`, `sec_type_name`, `access_flags`, `stamp_to_datetime`, `bootable_code` |
| `adfblocks.salvage` | `GenBlock`, `read_gen_block`, `is_deleted_entry` |
| `adfblocks.volume` | `VolumeLayout`, `datablock_size`, `make_boot_block`, `install_boot_code` |

Every block class in `adfblocks.blocks` is a dataclass with a `SIZE`
attribute, a `from_bytes` class method that decodes a raw block of
exactly `SIZE` bytes, and a `to_bytes` method that encodes it again.
Reserved areas are kept, so decoding and re-encoding gives back the same
bytes. A wrong length or a value that does not fit its field raises
`ValueError`.

## Examples

Read the root block of a double-density floppy image and summarise it:

```python
from adfblocks.interpret import interpret_root_header
from adfblocks.volume import VolumeLayout

layout = VolumeLayout.for_partition(heads=2, sectors=11, start=0, length=80)

with open("workbench.adf", "rb") as image:
    image.seek(layout.physical_sector(layout.root_block) * 512)
    root = interpret_root_header(image.read(512))

print(root["disk_name"], root["creation"])
```

`physical_sector` raises `BlockOutOfRangeError` for a sector outside the
volume. The summaries issue a `RuntimeWarning` when a name or comment
length is too large or a date stamp looks corrupt; dates come back as
timezone-aware UTC datetimes.

Work out how many blocks a file takes up, counting its header and
extension blocks:

```python
from adfblocks.constants import FsFlags
from adfblocks.filesize import total_blocks
from adfblocks.volume import datablock_size

print(total_blocks(100_000, datablock_size(0)))             # OFS
print(total_blocks(100_000, datablock_size(FsFlags.FFS)))   # FFS
```

Build a bootable boot block for a new FFS floppy:

```python
from adfblocks.constants import FsFlags
from adfblocks.interpret import bootable_code
from adfblocks.volume import VolumeLayout, make_boot_block

layout = VolumeLayout.for_partition(heads=2, sectors=11, start=0, length=80)
boot = make_boot_block(layout, FsFlags.FFS, bootable_code())
raw = boot.to_bytes()  # 1024 bytes; the checksum field is left at zero
```

Look for a deleted file or directory header in a raw block:

```python
from adfblocks.salvage import is_deleted_entry, read_gen_block

block = read_gen_block(raw_block, sector=1234)
if is_deleted_entry(block):
    print(block.name, block.parent)
```

Convert Amiga date stamps:

```python
from datetime import datetime
from adfblocks.amigatime import amiga_to_datetime, datetime_to_amiga

stamp = datetime_to_amiga(datetime(1997, 2, 18, 12, 30, 15))
print(stamp)
print(amiga_to_datetime(stamp.days, stamp.minutes, stamp.ticks))
```

## What it does not do

The package works on single blocks and on layout arithmetic. It does not
open, mount or format disk images, walk directories, read or write file
contents, manage the free-space bitmap, or compute block checksums; the
caller reads and writes the bytes. It does not handle the Rigid Disk
Block structures of partitioned hard disks, and it has no command-line
tool.

## Running the tests

```
pip install "adfblocks[test]"
pytest
```