[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rabbitrun"
version = "0.1.0"
description = "A side-scrolling rabbit jumping game, plus a small number guessing game"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "arcade", "side-scroller", "pygame", "guessing-game"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rabbitrun = "rabbitrun.game:main"
rabbitrun-guess = "rabbitrun.guess:main"

[tool.hatch.build.targets.wheel]
packages = ["rabbitrun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
