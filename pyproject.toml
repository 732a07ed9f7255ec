[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terraincache"
version = "0.1.0"
description = "Building blocks for serving Cesium terrain tiles: tile coordinates, an LRU cache with expiry, and an append-only command log"
requires-python = ">=3.10"
dependencies = []
keywords = ["cesium", "terrain", "tiles", "gis", "lru-cache", "append-only-file"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["terraincache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
