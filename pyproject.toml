[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contest_solvers"
version = "0.1.0"
description = "Solutions to short competitive-programming problems, plus a small toolbox of number helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "puzzles", "number-theory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["contest_solvers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
