"""Raw BIOS parameter block fields as they sit in a volume's boot sector."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields
from typing import Union

BOOT_SECTOR_SIZE = 512

_Buffer = Union[bytes, bytearray, memoryview]

# Field name -> (struct format, byte offset within the boot sector).
_LAYOUT = {
    "bytes_per_sector": ("<H", 11),
    "sectors_per_cluster": ("<B", 13),
    "reserved_sector_count": ("<H", 14),
    "allocation_table_count": ("<B", 16),
    "root_directory_entry_count": ("<H", 17),
    "total_sector_count_16bit": ("<H", 19),
    "media_type": ("<B", 21),
    "sectors_per_allocation_table_16bit": ("<H", 22),
    "total_sector_count_32bit": ("<I", 32),
    "sectors_per_allocation_table_32bit": ("<I", 36),
    "ext_flags": ("<H", 40),
    "filesystem_version_minor": ("<B", 42),
    "filesystem_version_major": ("<B", 43),
    "root_directory_file_cluster_number": ("<I", 44),
    "fs_info_sector_index": ("<H", 48),
}


@dataclass
class BootSectorFields:
    """The BIOS parameter block fields of a boot sector, unvalidated.

    FAT12 and FAT16 volumes leave the 32-bit extension fields at zero.
    """

    bytes_per_sector: int = 0
    sectors_per_cluster: int = 0
    reserved_sector_count: int = 0
    allocation_table_count: int = 0
    root_directory_entry_count: int = 0
    total_sector_count_16bit: int = 0
    media_type: int = 0
    sectors_per_allocation_table_16bit: int = 0
    total_sector_count_32bit: int = 0
    sectors_per_allocation_table_32bit: int = 0
    ext_flags: int = 0
    filesystem_version_minor: int = 0
    filesystem_version_major: int = 0
    root_directory_file_cluster_number: int = 0
    fs_info_sector_index: int = 0

    def __post_init__(self) -> None:
        for field in fields(self):
            fmt, _ = _LAYOUT[field.name]
            limit = 1 << (8 * struct.calcsize(fmt))
            value = getattr(self, field.name)
            if not 0 <= value < limit:
                raise ValueError(
                    f"{field.name} must be in 0..{limit - 1}, got {value}"
                )

    @classmethod
    def from_bytes(cls, data: _Buffer) -> BootSectorFields:
        """Read the fields out of a whole 512-byte boot sector."""
        if len(data) != BOOT_SECTOR_SIZE:
            raise ValueError(
                f"boot sector must be {BOOT_SECTOR_SIZE} bytes, got {len(data)}"
            )
        values = {
            name: struct.unpack_from(fmt, data, offset)[0]
            for name, (fmt, offset) in _LAYOUT.items()
        }
        return cls(**values)

    def to_bytes(self) -> bytes:
        """A 512-byte boot sector holding these fields and zeros elsewhere."""
        buffer = bytearray(BOOT_SECTOR_SIZE)
        self.write(buffer)
        return bytes(buffer)

    def write(self, buffer: bytearray) -> None:
        """Store the fields into a 512-byte ``buffer``, leaving other bytes alone."""
        if len(buffer) != BOOT_SECTOR_SIZE:
            raise ValueError(
                f"boot sector must be {BOOT_SECTOR_SIZE} bytes, got {len(buffer)}"
            )
        for name, (fmt, offset) in _LAYOUT.items():
            struct.pack_into(fmt, buffer, offset, getattr(self, name))