[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelblast"
version = "1.0.0"
description = "A small top-down tile-map game built on a minimal entity-component system"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "ecs", "entity-component-system", "tilemap", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelblast = "pixelblast.main:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelblast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
