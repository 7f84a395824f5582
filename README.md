# fatvolume

Building blocks for reading the on-disk structures of FAT12, FAT16 and FAT32
volumes from seekable binary streams. The package has no third-party
dependencies.

## What it covers

- **`fatvolume.table_kind`**: `AllocationTableKind` has the members `FAT12`,
  `FAT16` and `FAT32`. `AllocationTableKind.from_cluster_count` picks a kind
  from the data cluster count. Each kind also gives its `bad_sector_value()`,
  `end_of_chain_value()`, `entry_mask()` and `entry_bits`.
- **`fatvolume.table_entry`**: `AllocationTableEntry` is the logical meaning of a
  table entry. Its `kind` is an `EntryKind`: `FREE`, `RESERVED`, `NEXT_CLUSTER`,
  `END_OF_FILE` or `BAD_SECTOR`, and `cluster_number` is set for next-cluster
  entries only. `AllocationTableEntry.from_value` decodes a raw value and
  `to_physical` encodes it again. `to_physical` raises `ValueError` when the
  cluster number is too large for the table kind.
  `PhysicalAllocationTableEntry` is the raw, masked value. `from_bytes` reads it
  from little-endian bytes and `write` stores it into a buffer without touching
  the neighbouring bits. Both handle FAT12 nibble-offset entries and raise
  `ValueError` if a nibble offset is asked of another kind.
- **`fatvolume.allocation_table`**: `AllocationTable(kind, base_address)` locates
  entries with `resolve_entry_offset`, which returns an `EntryOffset`. It reads
  them with `read_entry`, or with `read_entry_async` for streams whose `seek`
  and `read` are awaitable. A stream that ends too early raises
  `StreamEndReachedError`. An `OSError` from the stream is raised as
  `StreamError`. Both are subclasses of `AllocationTableError`.
- **`fatvolume.boot_sector_fields`**: `BootSectorFields` holds the raw, unchecked
  BIOS parameter block fields. `from_bytes` reads them from a 512-byte boot
  sector. `to_bytes` and `write` put them back into one.
- **`fatvolume.bios_parameter_block`**: `BiosParameterBlock.from_boot_sector`
  checks a 512-byte boot sector and works out the allocation table kind, the
  last cluster number and the FAT32-only fields. It also gives
  `allocation_table_base_address()`, `directory_table_base_address()`,
  `data_region_base_address()`, `fs_info_base_address()` and
  `bytes_per_cluster()`.
  A malformed sector raises `BiosParameterBlockError`, a subclass of
  `ValueError`. Its `problem` is a `BpbProblem` that names the failed check.
  If the reserved, table and root directory sectors together exceed the total
  sector count, it raises a plain `ValueError`.
- **`fatvolume.bpb_errors`**: `BpbProblem` and `BiosParameterBlockError`.
- **`fatvolume.device`**: `SingleAccessDevice` wraps a stream so that only one
  operation can use it at a time, through `with_stream` or `with_stream_async`.
  A nested use raises `StreamInUseError`. `flush` and `flush_async` raise
  `FlushFailedError` when the stream's flush raises `OSError`. Both errors are
  subclasses of `SingleAccessDeviceError`.

## Example

```python
import io

from fatvolume.allocation_table import AllocationTable
from fatvolume.bios_parameter_block import BiosParameterBlock
from fatvolume.device import SingleAccessDevice

with open("disk.img", "rb") as image:
    bpb = BiosParameterBlock.from_boot_sector(image.read(512))
    image.seek(0)
    device = SingleAccessDevice(io.BytesIO(image.read()))

table = AllocationTable(bpb.allocation_table_kind, bpb.allocation_table_base_address())

entry = device.with_stream(lambda stream: table.read_entry(stream, 2))
print(bpb.allocation_table_kind, entry)
```

## What it does not do

The package reads boot sector geometry and single allocation table entries.
It does not do the following:

- read directories or directory entries
- look up files by path or handle long file names
- open or read files
- follow cluster chains for you
- write anything back to a volume

The only writing it does is into in-memory buffers, through
`PhysicalAllocationTableEntry.write` and `BootSectorFields.write`.
There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```