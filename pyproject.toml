[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "vinacore"
version = "1.1.2"
description = "Core numerics, atom typing, scoring tables and PDBQT splitting for molecular docking"
requires-python = ">=3.10"
dependencies = []
keywords = ["docking", "pdbqt", "molecular modelling", "scoring function", "chemistry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vina-split = "vinacore.split:main"

[tool.setuptools.packages.find]
include = ["vinacore*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
