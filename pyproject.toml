[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labirinto"
version = "0.1.0"
description = "Load a text maze, walk a random population of move sequences through it and score each one"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "genetic-algorithm", "fitness", "simulation", "population"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labirinto = "labirinto.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["labirinto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
