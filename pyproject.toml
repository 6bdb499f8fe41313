[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aeda"
version = "1.0.0"
description = "Game of Life on bordered grids and hash tables with open and closed dispersion"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "game of life",
    "cellular automaton",
    "hash table",
    "open addressing",
    "data structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aeda-life = "aeda.life_cli:main"
aeda-hash = "aeda.hash_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aeda"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
