[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "teakit"
version = "0.1.0"
description = "Building blocks for terminal user interfaces: key, mouse, paste and focus input decoding, control messages, and logging to a file."
requires-python = ">=3.10"
keywords = ["terminal", "tui", "ansi", "keyboard", "mouse", "input"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["teakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
