[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "unlu"
version = "0.1.0"
description = "List, test and extract LU (.lbr) library archives from the CP/M and MS-DOS era"
requires-python = ">=3.10"
dependencies = []
keywords = ["lbr", "lu", "cp/m", "msdos", "archive", "extract", "crc16"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
unlu = "unlu.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["unlu"]

[tool.pytest.ini_options]
addopts = "-ra"
