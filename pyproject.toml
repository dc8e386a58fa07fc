[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakesladders"
version = "0.1.0"
description = "A console game of snakes and ladders, played turn by turn or automatically."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "board-game", "snakes-and-ladders", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
snakesladders = "snakesladders.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["snakesladders"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
