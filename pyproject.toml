[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "yulepuzzles"
version = "0.1.0"
description = "Solvers for the first fifteen days of a December programming puzzle calendar, with a command that fetches, caches and solves each day's input."
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
]
keywords = ["puzzles", "advent", "solver", "grid", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
yulepuzzles = "yulepuzzles.cli:main"

[tool.setuptools.packages.find]
include = ["yulepuzzles*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
