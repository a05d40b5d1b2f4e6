[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lumon-mdr"
version = "0.1.0"
description = "A terminal game of refining macrodata: sort drifting numbers into five data bins"
requires-python = ">=3.10"
keywords = ["terminal", "tui", "game", "macrodata", "refinement"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lumon-mdr = "lumon_mdr.terminal:main"

[tool.hatch.build.targets.wheel]
packages = ["lumon_mdr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
