"""Reasons a boot sector's BIOS parameter block is rejected."""

from __future__ import annotations

from enum import Enum


class BpbProblem(Enum):
    """A specific way in which a BIOS parameter block is invalid.

    Each member's value is a human-readable description of the problem.
    """

    ALLOCATION_TABLE_COUNT_INVALID = "BPB_NumFATs must not be zero"
    ALLOCATION_TABLE_TOO_SMALL = (
        "The allocation table size defined in BPB_FATSz16 or BPB_FATSz32 isn't "
        "large enough to fit entries for all possible data clusters"
    )
    BYTES_PER_SECTOR_INVALID = "BPB_BytsPerSec must be one of the allowed values"
    FILESYSTEM_VERSION_UNSUPPORTED = "BPB_FSVer must be 0:0"
    FS_INFO_SECTOR_NUMBER_INVALID = "BPB_FSInfo must be greater than 0"
    MEDIA_TYPE_INVALID = "BPB_Media must be one of the allowed values"
    RESERVED_SECTOR_COUNT_INVALID = "BPB_RsvdSecCnt must not be zero"
    ROOT_DIRECTORY_ENTRY_COUNT_INVALID = (
        "BPB_RootEntCnt must be zero for FAT32 volumes and non-zero for FAT12 "
        "or FAT16 volumes"
    )
    ROOT_DIRECTORY_FILE_CLUSTER_NUMBER_INVALID = "BPB_RootClus must be greater than 1"
    SECTORS_PER_CLUSTER_INVALID = "BPB_SecPerClus must be a positive power of 2"
    SECTORS_PER_ALLOCATION_TABLE_16BIT_INVALID = (
        "BPB_FATSz16 must be zero for FAT32 volumes and non-zero for FAT12 "
        "or FAT16 volumes"
    )
    SECTORS_PER_ALLOCATION_TABLE_NOT_SET = (
        "Either BPB_FATSz16 or BPB_FATSz32 must be non-zero"
    )
    TOTAL_SECTOR_COUNT_16BIT_INVALID = "BPB_TotSec16 must be zero for FAT32 volumes"
    TOTAL_SECTOR_COUNT_NOT_SET = "Either BPB_TotSec16 or BPB_TotSec32 must be non-zero"

    @property
    def message(self) -> str:
        """Description of the problem."""
        return self.value


class BiosParameterBlockError(ValueError):
    """A boot sector's BIOS parameter block failed validation."""

    def __init__(self, problem: BpbProblem) -> None:
        super().__init__(problem.message)
        self.problem = problem

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.problem})"