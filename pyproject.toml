[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazmorra"
version = "0.1.0"
description = "A turn-based dungeon crawler for the terminal: pick three heroes, fight through the rooms and record your score."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "dungeon", "rpg", "terminal", "turn-based"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
mazmorra = "mazmorra.game:main"

[tool.hatch.build.targets.wheel]
packages = ["mazmorra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
