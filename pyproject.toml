[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timemachinelogs"
version = "1.0"
description = "Pack a directory into a single archive that stores duplicate files once, and unpack it again."
requires-python = ">=3.10"
dependencies = []
keywords = ["archive", "deduplication", "backup", "pack", "unpack"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
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
timemachinelogs = "timemachinelogs.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["timemachinelogs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
