[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgewkb"
version = "0.1.0"
description = "Read and write PostGIS EWKB points and line strings, with hex encoding for database drivers"
requires-python = ">=3.10"
dependencies = []
keywords = ["postgis", "ewkb", "wkb", "gis", "geometry", "postgresql"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pgewkb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
