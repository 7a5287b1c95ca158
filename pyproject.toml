[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "promptparts"
version = "0.1.0"
description = "Building blocks for a shell prompt: directory contraction, durations, clock, toolchain versions and environment details"
requires-python = ">=3.11"
dependencies = [
    "pyyaml",
]
keywords = ["prompt", "shell", "terminal", "toolchain", "version"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["promptparts"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
