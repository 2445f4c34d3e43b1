[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plaincsv"
version = "0.1.0"
description = "A small, dependency-free CSV reader and writer with configurable delimiters, quoting and byte-order marks."
requires-python = ">=3.10"
dependencies = []
keywords = ["csv", "reader", "writer", "parser", "delimited", "bom"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plaincsv"]

[tool.pytest.ini_options]
addopts = "-ra"
