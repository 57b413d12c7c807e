[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pal"
version = "0.9.10"
description = "Positional astronomy routines: spherical geometry, calendars, sexagesimal conversion, apparent places and observatory data"
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "astrometry", "coordinates", "calendar", "observatory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
