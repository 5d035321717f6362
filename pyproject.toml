[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alpha"
version = "0.1.0"
description = "Small 3D geometry toolkit: vectors, lines, orientations, and a simple coloured logger."
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "geometry", "3d", "rotation", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["alpha"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
