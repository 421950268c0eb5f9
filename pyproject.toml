[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eulerkit"
version = "0.1.0"
description = "Solutions to Project Euler problems 1 to 12, with a small command-line runner, benchmark and file scaffolding."
requires-python = ">=3.10"
dependencies = []
keywords = ["project-euler", "mathematics", "number-theory", "puzzles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
eulerkit = "eulerkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eulerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
