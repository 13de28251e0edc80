[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc24"
version = "0.1.0"
description = "Solvers for the 2024 Advent of Code puzzles, with small grid, graph and parser-combinator helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "parser-combinators", "graphs", "grids"]
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
aoc24-day01 = "aoc24.day01:main"
aoc24-day02 = "aoc24.day02:main"
aoc24-day03 = "aoc24.day03:main"
aoc24-day04 = "aoc24.day04:main"
aoc24-day05 = "aoc24.day05:main"
aoc24-day06 = "aoc24.day06:main"
aoc24-day07 = "aoc24.day07:main"
aoc24-day08 = "aoc24.day08:main"
aoc24-day09 = "aoc24.day09:main"
aoc24-day10 = "aoc24.day10:main"
aoc24-day11 = "aoc24.day11:main"
aoc24-day12 = "aoc24.day12:main"
aoc24-day13 = "aoc24.day13:main"
aoc24-day15 = "aoc24.day15:main"
aoc24-day16 = "aoc24.day16:main"
aoc24-day18 = "aoc24.day18:main"
aoc24-day19 = "aoc24.day19:main"
aoc24-day20 = "aoc24.day20:main"
aoc24-day22 = "aoc24.day22:main"
aoc24-day23 = "aoc24.day23:main"
aoc24-day25 = "aoc24.day25:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc24"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
