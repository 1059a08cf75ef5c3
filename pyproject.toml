[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numtinker"
version = "0.1.0"
description = "Small number-theory helpers, worked puzzle solutions, dice prime odds and a toy Lisp tokenizer"
requires-python = ">=3.10"
dependencies = []
keywords = ["number theory", "primes", "puzzles", "collatz", "calendar", "dice", "lisp", "tokenizer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numtinker-euler = "numtinker.problems_c:main"
numtinker-dice = "numtinker.dice:main"
numtinker-algebra = "numtinker.algebra:main"
numtinker-lisp = "numtinker.scanner:main"

[tool.hatch.build.targets.wheel]
packages = ["numtinker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
