[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbitsim"
version = "0.1.0"
description = "A small gravitational n-body simulation of bodies orbiting a common centre, with a live animated view."
requires-python = ">=3.10"
dependencies = []
keywords = ["n-body", "gravity", "simulation", "orbits", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
orbitsim = "orbitsim.display:main"

[tool.hatch.build.targets.wheel]
packages = ["orbitsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
