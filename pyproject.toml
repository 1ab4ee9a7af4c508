[build-system]
requires = ["setuptools>=68", "wheel"]
build-backend = "setuptools.build_meta"

[project]
name = "racesim"
version = "0.1.0"
description = "A small racing simulation: cars, tracks, driving techniques and ranked reports."
requires-python = ">=3.10"
dependencies = []
keywords = ["racing", "simulation", "cars", "tracks", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
racesim = "racesim.cli:main"

[tool.setuptools.packages.find]
include = ["racesim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
