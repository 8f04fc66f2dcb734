[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "streamkit"
version = "0.1.0"
description = "List containers with pluggable equality, pull-style suppliers and simple iterator streams"
requires-python = ">=3.10"
dependencies = []
keywords = ["list", "linked-list", "stream", "iterator", "supplier", "collections"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["streamkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
