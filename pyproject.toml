[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "algonotes"
version = "0.1.0"
description = "Classic algorithm exercises: arrays, linked lists, dynamic programming, backtracking and puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "dynamic-programming", "backtracking", "linked-list", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.setuptools.packages.find]
include = ["algonotes*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
