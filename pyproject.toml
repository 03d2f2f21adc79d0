[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "balloondefense"
version = "0.1.0"
description = "A tile-based balloon tower defense game with XML level files"
requires-python = ">=3.10"
keywords = ["game", "tower-defense", "pygame", "balloons", "xml-levels"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
balloondefense = "balloondefense.app:main"

[tool.hatch.build.targets.wheel]
packages = ["balloondefense"]

[tool.pytest.ini_options]
addopts = "-ra"
