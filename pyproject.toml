[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytechess"
version = "0.1.2"
description = "A compact chess engine with min-max and alpha-beta search, a console game and SQLite move history"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "minimax", "alpha-beta", "negamax", "game", "engine", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
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
bytechess = "bytechess.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bytechess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
