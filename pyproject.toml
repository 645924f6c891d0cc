[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hearthdeck"
version = "1.0.0"
description = "Card catalogue, deck selection, turn rules, board layout and screen flow for a small collectible card game"
requires-python = ">=3.10"
keywords = ["card game", "deck builder", "turn based", "board game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hearthdeck = "hearthdeck.navigation:main"

[tool.hatch.build.targets.wheel]
packages = ["hearthdeck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
