[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuzzycoll"
version = "0.1.0"
description = "Collections for fuzzy string search: BK-trees, Levenshtein automata and SymSpell"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy", "search", "levenshtein", "bk-tree", "symspell", "automaton", "edit-distance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Indexing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["fuzzycoll"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
