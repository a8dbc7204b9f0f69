[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gbtetris"
version = "0.1.0"
description = "A handheld-console style falling-block puzzle game with an emulated tile and sprite display"
requires-python = ">=3.10"
keywords = ["tetris", "puzzle", "game", "tiles", "sprites", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gbtetris = "gbtetris.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gbtetris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
