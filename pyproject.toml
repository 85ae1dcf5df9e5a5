[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ratedtables"
version = "0.1.0"
description = "Keyed record tables (scan and sorted) that count the work each operation costs"
requires-python = ">=3.10"
dependencies = []
keywords = ["table", "records", "search", "sorting", "efficiency", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ratedtables"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
