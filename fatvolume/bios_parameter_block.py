"""Validated volume geometry taken from a boot sector's BIOS parameter block."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .boot_sector_fields import BootSectorFields
from .bpb_errors import BiosParameterBlockError, BpbProblem
from .table_kind import AllocationTableKind

DIRECTORY_ENTRY_SIZE = 32

_VALID_BYTES_PER_SECTOR = frozenset({512, 1024, 2048, 4096})
_VALID_SECTORS_PER_CLUSTER = frozenset({1, 2, 4, 8, 16, 32, 64, 128})
_ACTIVE_TABLE_MASK = 0b111
_MIRRORING_FLAG = 1 << 7

_Buffer = Union[bytes, bytearray, memoryview]


def _ensure(condition: bool, problem: BpbProblem) -> None:
    if not condition:
        raise BiosParameterBlockError(problem)


@dataclass(frozen=True)
class BiosParameterBlock:
    """The layout of a FAT volume as described by its boot sector.

    ``fs_info_sector_index`` and ``root_directory_file_cluster_number`` are
    set only for FAT32 volumes.
    """

    allocation_table_kind: AllocationTableKind
    active_allocation_table_index: int
    allocation_table_mirroring_enabled: bool
    bytes_per_sector: int
    sectors_per_cluster: int
    reserved_sector_count: int
    fs_info_sector_index: Optional[int]
    allocation_table_count: int
    root_directory_entry_count: int
    root_directory_file_cluster_number: Optional[int]
    last_cluster_number: int
    sectors_per_allocation_table: int

    @classmethod
    def from_boot_sector(cls, data: _Buffer) -> BiosParameterBlock:
        """Parse and validate the 512-byte boot sector ``data``.

        Raises BiosParameterBlockError naming the first problem found.
        """
        raw = BootSectorFields.from_bytes(data)

        _ensure(
            raw.bytes_per_sector in _VALID_BYTES_PER_SECTOR,
            BpbProblem.BYTES_PER_SECTOR_INVALID,
        )
        _ensure(
            raw.sectors_per_cluster in _VALID_SECTORS_PER_CLUSTER,
            BpbProblem.SECTORS_PER_CLUSTER_INVALID,
        )
        _ensure(
            raw.reserved_sector_count != 0, BpbProblem.RESERVED_SECTOR_COUNT_INVALID
        )
        _ensure(
            raw.allocation_table_count != 0,
            BpbProblem.ALLOCATION_TABLE_COUNT_INVALID,
        )
        _ensure(
            raw.media_type == 0xF0 or 0xF8 <= raw.media_type <= 0xFF,
            BpbProblem.MEDIA_TYPE_INVALID,
        )

        if raw.total_sector_count_16bit > 0:
            total_sector_count = raw.total_sector_count_16bit
        else:
            _ensure(
                raw.total_sector_count_32bit != 0,
                BpbProblem.TOTAL_SECTOR_COUNT_NOT_SET,
            )
            total_sector_count = raw.total_sector_count_32bit

        if raw.sectors_per_allocation_table_16bit > 0:
            sectors_per_table = raw.sectors_per_allocation_table_16bit
        else:
            _ensure(
                raw.sectors_per_allocation_table_32bit != 0,
                BpbProblem.SECTORS_PER_ALLOCATION_TABLE_NOT_SET,
            )
            sectors_per_table = raw.sectors_per_allocation_table_32bit

        root_directory_sectors = -(
            -(raw.root_directory_entry_count * DIRECTORY_ENTRY_SIZE)
            // raw.bytes_per_sector
        )
        metadata_sectors = (
            raw.reserved_sector_count
            + raw.allocation_table_count * sectors_per_table
            + root_directory_sectors
        )
        if metadata_sectors > total_sector_count:
            raise ValueError(
                f"reserved, table and root directory sectors ({metadata_sectors}) "
                f"exceed the total sector count ({total_sector_count})"
            )
        data_cluster_count = (
            total_sector_count - metadata_sectors
        ) // raw.sectors_per_cluster

        kind = AllocationTableKind.from_cluster_count(data_cluster_count)

        active_index = 0
        mirroring = True
        root_cluster: Optional[int] = None
        fs_info_index: Optional[int] = None

        if kind is AllocationTableKind.FAT32:
            _ensure(
                raw.root_directory_entry_count == 0,
                BpbProblem.ROOT_DIRECTORY_ENTRY_COUNT_INVALID,
            )
            _ensure(
                raw.total_sector_count_16bit == 0,
                BpbProblem.TOTAL_SECTOR_COUNT_16BIT_INVALID,
            )
            _ensure(
                raw.sectors_per_allocation_table_16bit == 0,
                BpbProblem.SECTORS_PER_ALLOCATION_TABLE_16BIT_INVALID,
            )
            active_index = raw.ext_flags & _ACTIVE_TABLE_MASK
            mirroring = bool(raw.ext_flags & _MIRRORING_FLAG)
            _ensure(
                raw.filesystem_version_minor == 0
                and raw.filesystem_version_major == 0,
                BpbProblem.FILESYSTEM_VERSION_UNSUPPORTED,
            )
            _ensure(
                raw.root_directory_file_cluster_number >= 2,
                BpbProblem.ROOT_DIRECTORY_FILE_CLUSTER_NUMBER_INVALID,
            )
            root_cluster = raw.root_directory_file_cluster_number
            _ensure(
                raw.fs_info_sector_index >= 1,
                BpbProblem.FS_INFO_SECTOR_NUMBER_INVALID,
            )
            fs_info_index = raw.fs_info_sector_index
        else:
            _ensure(
                raw.sectors_per_allocation_table_16bit != 0,
                BpbProblem.SECTORS_PER_ALLOCATION_TABLE_16BIT_INVALID,
            )
            _ensure(
                raw.root_directory_entry_count > 0,
                BpbProblem.ROOT_DIRECTORY_ENTRY_COUNT_INVALID,
            )

        table_bytes = sectors_per_table * raw.bytes_per_sector
        if kind is AllocationTableKind.FAT12:
            table_entry_count = table_bytes * 3 // 2
        elif kind is AllocationTableKind.FAT16:
            table_entry_count = table_bytes // 2
        else:
            table_entry_count = table_bytes // 4
        _ensure(
            table_entry_count >= data_cluster_count + 2,
            BpbProblem.ALLOCATION_TABLE_TOO_SMALL,
        )

        return cls(
            allocation_table_kind=kind,
            active_allocation_table_index=active_index,
            allocation_table_mirroring_enabled=mirroring,
            bytes_per_sector=raw.bytes_per_sector,
            sectors_per_cluster=raw.sectors_per_cluster,
            reserved_sector_count=raw.reserved_sector_count,
            fs_info_sector_index=fs_info_index,
            allocation_table_count=raw.allocation_table_count,
            root_directory_entry_count=raw.root_directory_entry_count,
            root_directory_file_cluster_number=root_cluster,
            last_cluster_number=data_cluster_count + 1,
            sectors_per_allocation_table=sectors_per_table,
        )

    @property
    def directory_table_entry_count(self) -> int:
        """Number of entries in the fixed root directory table (zero on FAT32)."""
        return self.root_directory_entry_count

    def allocation_table_base_address(self) -> int:
        """Byte address of the first allocation table."""
        return self.bytes_per_sector * self.reserved_sector_count

    def bytes_per_cluster(self) -> int:
        """Size of one data cluster in bytes."""
        return self.bytes_per_sector * self.sectors_per_cluster

    def directory_table_base_address(self) -> int:
        """Byte address just past the allocation tables."""
        return self.allocation_table_base_address() + (
            self.bytes_per_sector
            * self.sectors_per_allocation_table
            * self.allocation_table_count
        )

    def data_region_base_address(self) -> int:
        """Byte address where the data region begins."""
        return self.directory_table_base_address() + (
            self.root_directory_entry_count * DIRECTORY_ENTRY_SIZE
        )

    def fs_info_base_address(self) -> Optional[int]:
        """Byte address of the FSInfo sector, or None on FAT12 and FAT16."""
        if self.fs_info_sector_index is None:
            return None
        return self.fs_info_sector_index * self.bytes_per_sector