[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cavecrawl"
version = "0.1.0"
description = "A turn-based, five-floor dungeon crawler played in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "roguelike", "dungeon", "rpg", "terminal"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cavecrawl = "cavecrawl.game:main"

[tool.hatch.build.targets.wheel]
packages = ["cavecrawl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
