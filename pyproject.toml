[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "citybuild"
version = "0.4.0"
description = "Game logic for a pixel-art city-building simulation: map layers, settings serialization, a message queue and menu state"
requires-python = ">=3.10"
dependencies = []
keywords = ["city-builder", "simulation", "game", "isometric"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["citybuild"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
