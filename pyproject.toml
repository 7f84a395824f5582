[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fatvolume"
version = "0.1.0"
description = "Parsing of FAT12/16/32 volume structures: boot sector parameters, allocation table entries and single-access device streams"
requires-python = ">=3.10"
dependencies = []
keywords = ["fat", "fat12", "fat16", "fat32", "filesystem", "allocation-table", "boot-sector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["fatvolume"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
