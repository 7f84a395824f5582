"""The three allocation table variants and the constants tied to each."""

from __future__ import annotations

from enum import Enum

_FAT12_CLUSTER_LIMIT = 4085
_FAT16_CLUSTER_LIMIT = 65525


class AllocationTableKind(Enum):
    """Width of the entries in a volume's allocation table."""

    FAT12 = "FAT12"
    FAT16 = "FAT16"
    FAT32 = "FAT32"

    @classmethod
    def from_cluster_count(cls, data_cluster_count: int) -> AllocationTableKind:
        """Pick the table kind a volume with this many data clusters must use."""
        if data_cluster_count < 0:
            raise ValueError(
                f"data cluster count must not be negative: {data_cluster_count}"
            )
        # The thresholds look odd, but they are the ones the specification fixes.
        if data_cluster_count < _FAT12_CLUSTER_LIMIT:
            return cls.FAT12
        if data_cluster_count < _FAT16_CLUSTER_LIMIT:
            return cls.FAT16
        return cls.FAT32

    @property
    def entry_bits(self) -> int:
        """Number of significant bits in one table entry."""
        return _ENTRY_BITS[self]

    def bad_sector_value(self) -> int:
        """Entry value that marks a cluster as bad."""
        return _BAD_SECTOR_VALUES[self]

    def end_of_chain_value(self) -> int:
        """Entry value written to mark the last cluster of a chain."""
        return _END_OF_CHAIN_VALUES[self]

    def entry_mask(self) -> int:
        """Mask selecting the significant bits of an entry."""
        return (1 << self.entry_bits) - 1


_ENTRY_BITS = {
    AllocationTableKind.FAT12: 12,
    AllocationTableKind.FAT16: 16,
    AllocationTableKind.FAT32: 28,
}

_BAD_SECTOR_VALUES = {
    AllocationTableKind.FAT12: 0x0000_0FF7,
    AllocationTableKind.FAT16: 0x0000_FFF7,
    AllocationTableKind.FAT32: 0x0FFF_0FF7,
}

_END_OF_CHAIN_VALUES = {
    AllocationTableKind.FAT12: 0x0000_0FF8,
    AllocationTableKind.FAT16: 0x0000_FFF8,
    AllocationTableKind.FAT32: 0x0FFF_FFF8,
}