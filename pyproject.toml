[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolver"
version = "0.1.0"
description = "Solvers for a series of daily grid, graph and simulation puzzles, with a command line runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "grid", "graph", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.scripts]
adventsolver = "adventsolver.cli:main"
adventsolver-stones = "adventsolver.stones:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolver"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
