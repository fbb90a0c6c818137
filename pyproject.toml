[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mpicollide"
version = "0.1.0"
description = "Elastic circle-collision simulation, serial and space-partitioned, with a toy hash-preimage search"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = [
    "simulation",
    "collision",
    "physics",
    "domain decomposition",
    "partitioning",
    "hash",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mpicollide-serial = "mpicollide.serial:main"
mpicollide-partitioned = "mpicollide.partitioned:main"
mpicollide-hash = "mpicollide.hashcrack:main"

[tool.hatch.build.targets.wheel]
packages = ["mpicollide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
