import pytest

from fatvolume.table_kind import AllocationTableKind


@pytest.mark.parametrize(
    ("count", "expected"),
    [
        (1, AllocationTableKind.FAT12),
        (1024, AllocationTableKind.FAT12),
        (4000, AllocationTableKind.FAT12),
        (4084, AllocationTableKind.FAT12),
        (4085, AllocationTableKind.FAT16),
        (4096, AllocationTableKind.FAT16),
        (65000, AllocationTableKind.FAT16),
        (65524, AllocationTableKind.FAT16),
        (65525, AllocationTableKind.FAT32),
        (65536, AllocationTableKind.FAT32),
        (131_072, AllocationTableKind.FAT32),
        (1_000_000, AllocationTableKind.FAT32),
    ],
)
def test_from_cluster_count_maps_correctly(count, expected):
    assert AllocationTableKind.from_cluster_count(count) is expected


def test_from_cluster_count_zero_is_fat12():
    assert AllocationTableKind.from_cluster_count(0) is AllocationTableKind.FAT12


def test_from_cluster_count_negative_raises():
    with pytest.raises(ValueError):
        AllocationTableKind.from_cluster_count(-1)


@pytest.mark.parametrize("count", [1, 4085, 65525])
def test_bad_sector_value_matches_expectations(count):
    kind = AllocationTableKind.from_cluster_count(count)
    bad_sector = kind.bad_sector_value()
    assert bad_sector > 2
    assert bad_sector < kind.end_of_chain_value()
    assert bad_sector <= kind.entry_mask()


@pytest.mark.parametrize("count", [1, 4085, 65525])
def test_end_of_chain_value_matches_expectations(count):
    kind = AllocationTableKind.from_cluster_count(count)
    end_of_chain = kind.end_of_chain_value()
    assert end_of_chain > kind.bad_sector_value()
    assert end_of_chain <= kind.entry_mask()


def test_entry_mask_values():
    assert AllocationTableKind.FAT12.entry_mask() == 0x0000_0FFF
    assert AllocationTableKind.FAT16.entry_mask() == 0x0000_FFFF
    assert AllocationTableKind.FAT32.entry_mask() == 0x0FFF_FFFF


def test_pinned_special_values():
    assert AllocationTableKind.FAT12.bad_sector_value() == 0x0FF7
    assert AllocationTableKind.FAT16.end_of_chain_value() == 0xFFF8
    assert AllocationTableKind.FAT32.end_of_chain_value() == 0x0FFF_FFF8