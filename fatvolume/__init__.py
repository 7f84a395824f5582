"""FAT12/16/32 boot sector parameters, allocation table entries and single-access stream devices."""

__version__ = "0.1.0"