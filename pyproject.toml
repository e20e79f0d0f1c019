[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sfwrap"
version = "0.2.11"
description = "Light, easy-to-use wrapper for the Stockfish chess engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "engine", "stockfish", "uci"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sfwrap-demo = "sfwrap.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["sfwrap"]

[tool.pytest.ini_options]
addopts = "-ra"
