[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minibill"
version = "0.1.0"
description = "A tiny top-down billiard table simulation with a charge-and-release shot"
requires-python = ">=3.10"
keywords = ["billiard", "pool", "game", "physics", "pygame"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minibill = "minibill.engine:main"

[tool.hatch.build.targets.wheel]
packages = ["minibill"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
