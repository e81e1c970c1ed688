[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solvebook"
version = "0.1.0"
description = "Solvers for classic number-theory, combinatorics, string and graph puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "puzzles",
    "number theory",
    "primes",
    "divisors",
    "combinatorics",
    "permutations",
    "dijkstra",
    "kmp",
    "palindromes",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
solvebook-triangle = "solvebook.triangle:main"

[tool.hatch.build.targets.wheel]
packages = ["solvebook"]

[tool.pytest.ini_options]
addopts = "-ra"
