[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pctoolkit"
version = "0.1.0"
description = "Small utilities for bit-level pin analysis, character ring buffers, a cursor list, file handling and a learning finite state machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["bits", "edge-detection", "circular-buffer", "linked-list", "state-machine", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pctoolkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
