[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadkit"
version = "0.1.0"
description = "Game building blocks without rendering: colors, cameras, a frame-stepped executor, platformer physics, particle simulation and small game rules"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["game", "gamedev", "camera", "particles", "platformer", "physics", "color", "game-of-life", "snake"]
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
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadkit"]

[tool.pytest.ini_options]
addopts = "-ra"
