[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubescape"
version = "0.1.0"
description = "A small raycasting maze explorer driven by .cub scene files"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "maze", "cub", "first-person", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubescape = "cubescape.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cubescape"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
