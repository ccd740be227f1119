[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kwaymerge"
version = "1.1.0"
description = "Merge any number of sorted integer lists into one sorted list with a priority queue."
requires-python = ">=3.10"
dependencies = []
keywords = ["merge", "k-way merge", "priority queue", "heap", "sorting"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kwaymerge = "kwaymerge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kwaymerge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
