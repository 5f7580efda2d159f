[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "molecularity"
version = "0.1.0"
description = "Game-side logic for a first-person physics puzzle game: events, settings, localised text, sound state and menu widgets"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "ui", "widgets", "event-system", "settings", "localisation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["molecularity"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
