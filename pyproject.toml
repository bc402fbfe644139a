[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "euchregame"
version = "0.1.0"
description = "A four-player Euchre card game with simple computer players and human players"
requires-python = ">=3.10"
dependencies = []
keywords = ["euchre", "card game", "trick-taking", "game"]
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
euchre = "euchregame.cli:main"

[tool.setuptools.packages.find]
include = ["euchregame*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
