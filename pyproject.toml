[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kae"
version = "0.1.0"
description = "A small terminal to-do list manager with an interactive list view"
requires-python = ">=3.10"
dependencies = []
keywords = ["todo", "tasks", "terminal", "curses", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kae = "kae.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kae"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
