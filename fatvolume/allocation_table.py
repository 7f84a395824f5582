"""Reading entries out of an on-disk allocation table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .table_entry import AllocationTableEntry, PhysicalAllocationTableEntry
from .table_kind import AllocationTableKind


class AllocationTableError(Exception):
    """Base class for failures while reading the allocation table."""


class StreamEndReachedError(AllocationTableError):
    """The stream ended before a whole entry could be read."""

    def __init__(self) -> None:
        super().__init__("stream end was reached when not expected")


class StreamError(AllocationTableError):
    """The underlying stream reported an error."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(str(error) or type(error).__name__)
        self.error = error


@dataclass(frozen=True)
class EntryOffset:
    """Where an entry lives relative to the start of its table."""

    byte_offset: int
    is_nibble_offset: bool


@dataclass(frozen=True)
class AllocationTable:
    """One allocation table of a given kind, starting at ``base_address``."""

    kind: AllocationTableKind
    base_address: int

    def resolve_entry_offset(self, cluster_number: int) -> EntryOffset:
        """Locate the entry for ``cluster_number`` within the table."""
        if cluster_number < 0:
            raise ValueError(f"cluster number must not be negative: {cluster_number}")
        if self.kind is AllocationTableKind.FAT12:
            byte_offset = cluster_number + cluster_number // 2
        elif self.kind is AllocationTableKind.FAT16:
            byte_offset = cluster_number * 2
        else:
            byte_offset = cluster_number * 4
        return EntryOffset(
            byte_offset=byte_offset,
            is_nibble_offset=self.kind is AllocationTableKind.FAT12
            and cluster_number % 2 == 1,
        )

    def _read_width(self) -> int:
        return 4 if self.kind is AllocationTableKind.FAT32 else 2

    def _decode(self, data: bytes, offset: EntryOffset) -> AllocationTableEntry:
        return PhysicalAllocationTableEntry.from_bytes(
            self.kind, data, offset.is_nibble_offset
        ).to_logical()

    def read_entry(self, stream: Any, cluster_number: int) -> AllocationTableEntry:
        """Read the entry for ``cluster_number`` from a seekable binary stream.

        Raises StreamEndReachedError if the stream is too short and StreamError
        if the stream itself fails.
        """
        offset = self.resolve_entry_offset(cluster_number)
        width = self._read_width()
        try:
            stream.seek(self.base_address + offset.byte_offset)
            data = bytearray()
            while len(data) < width:
                chunk = stream.read(width - len(data))
                if not chunk:
                    raise StreamEndReachedError()
                data += chunk
        except OSError as error:
            raise StreamError(error) from error
        return self._decode(bytes(data), offset)

    async def read_entry_async(
        self, stream: Any, cluster_number: int
    ) -> AllocationTableEntry:
        """Like ``read_entry``, for a stream whose seek and read are awaitable."""
        offset = self.resolve_entry_offset(cluster_number)
        width = self._read_width()
        try:
            await stream.seek(self.base_address + offset.byte_offset)
            data = bytearray()
            while len(data) < width:
                chunk = await stream.read(width - len(data))
                if not chunk:
                    raise StreamEndReachedError()
                data += chunk
        except OSError as error:
            raise StreamError(error) from error
        return self._decode(bytes(data), offset)