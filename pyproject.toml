[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "terrainwalk"
version = "0.1.0"
description = "Endless procedural chunked terrain with trees and a walking player, shown as a map view"
requires-python = ">=3.10"
keywords = ["procedural", "terrain", "perlin", "heightmap", "chunks", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
terrainwalk = "terrainwalk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["terrainwalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
