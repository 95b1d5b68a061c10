[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labdevices"
version = "0.1.0"
description = "Console tool for managing a lab's device inventory and device borrowing"
requires-python = ">=3.10"
dependencies = []
keywords = ["inventory", "lab", "devices", "borrowing", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labdevices = "labdevices.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["labdevices"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
