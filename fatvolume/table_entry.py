"""Logical and on-disk representations of allocation table entries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .table_kind import AllocationTableKind

_RAW_WIDTH = 4
_NIBBLE_SHIFT = 4
_U32_MASK = 0xFFFF_FFFF


class EntryKind(Enum):
    """What an allocation table entry says about its cluster."""

    FREE = "free"
    RESERVED = "reserved"
    NEXT_CLUSTER = "next_cluster"
    END_OF_FILE = "end_of_file"
    BAD_SECTOR = "bad_sector"


@dataclass(frozen=True)
class AllocationTableEntry:
    """A single logical entry in the allocation table.

    ``cluster_number`` is set only for ``EntryKind.NEXT_CLUSTER`` entries.
    """

    kind: EntryKind
    cluster_number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind is EntryKind.NEXT_CLUSTER:
            if self.cluster_number is None or self.cluster_number < 0:
                raise ValueError("a next-cluster entry needs a non-negative cluster number")
        elif self.cluster_number is not None:
            raise ValueError(f"a {self.kind.value} entry carries no cluster number")

    @classmethod
    def next_cluster(cls, cluster_number: int) -> AllocationTableEntry:
        """Entry pointing at the following cluster of a chain."""
        return cls(EntryKind.NEXT_CLUSTER, cluster_number)

    @classmethod
    def from_value(
        cls, table_kind: AllocationTableKind, entry_value: int
    ) -> AllocationTableEntry:
        """Interpret a raw entry value for the given table kind."""
        if entry_value == 0:
            return cls(EntryKind.FREE)
        if entry_value == 1:
            return cls(EntryKind.RESERVED)
        bad_sector = table_kind.bad_sector_value()
        if entry_value < bad_sector:
            return cls.next_cluster(entry_value)
        if entry_value == bad_sector:
            return cls(EntryKind.BAD_SECTOR)
        return cls(EntryKind.END_OF_FILE)

    def to_physical(self, table_kind: AllocationTableKind) -> PhysicalAllocationTableEntry:
        """Encode this entry for the given table kind.

        Raises ValueError if the cluster number does not fit the table's entries.
        """
        if self.kind is EntryKind.FREE:
            value = 0
        elif self.kind is EntryKind.RESERVED:
            value = 1
        elif self.kind is EntryKind.BAD_SECTOR:
            value = table_kind.bad_sector_value()
        elif self.kind is EntryKind.END_OF_FILE:
            value = table_kind.end_of_chain_value()
        else:
            value = self.cluster_number
        return PhysicalAllocationTableEntry(table_kind, value)


@dataclass(frozen=True)
class PhysicalAllocationTableEntry:
    """An entry value as stored in a table of a particular kind."""

    table_kind: AllocationTableKind
    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= self.table_kind.entry_mask():
            raise ValueError(
                f"value 0x{self.value:X} does not fit a {self.table_kind.value} entry"
            )

    @classmethod
    def from_bytes(
        cls,
        table_kind: AllocationTableKind,
        data: bytes,
        is_nibble_offset: bool,
    ) -> PhysicalAllocationTableEntry:
        """Decode an entry from up to four little-endian bytes.

        ``is_nibble_offset`` marks a FAT12 entry that starts in the upper half
        of its first byte.
        """
        if len(data) > _RAW_WIDTH:
            raise ValueError(f"at most {_RAW_WIDTH} bytes expected, got {len(data)}")
        value = int.from_bytes(bytes(data), "little")
        if is_nibble_offset:
            _require_fat12(table_kind)
            value >>= _NIBBLE_SHIFT
        return cls(table_kind, value & table_kind.entry_mask())

    def to_logical(self) -> AllocationTableEntry:
        """The logical meaning of this entry."""
        return AllocationTableEntry.from_value(self.table_kind, self.value)

    def write(self, buffer: bytearray, is_nibble_offset: bool) -> None:
        """Store the entry in the first four bytes of ``buffer``.

        Bits outside the entry are left as they were.
        """
        if len(buffer) < _RAW_WIDTH:
            raise ValueError(f"buffer must hold at least {_RAW_WIDTH} bytes")
        mask = self.table_kind.entry_mask()
        entry_value = self.value
        if is_nibble_offset:
            _require_fat12(self.table_kind)
            mask <<= _NIBBLE_SHIFT
            entry_value <<= _NIBBLE_SHIFT

        current = int.from_bytes(bytes(buffer[:_RAW_WIDTH]), "little")
        updated = ((current & ~mask) | entry_value) & _U32_MASK
        buffer[:_RAW_WIDTH] = updated.to_bytes(_RAW_WIDTH, "little")


def _require_fat12(table_kind: AllocationTableKind) -> None:
    if table_kind is not AllocationTableKind.FAT12:
        raise ValueError("only FAT12 tables can have nibble-offset entries")