[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boids3d"
version = "0.1.0"
description = "Three-dimensional boids flocking simulation with group targets, obstacles and an orbit camera model"
requires-python = ">=3.10"
dependencies = []
keywords = ["boids", "flocking", "simulation", "artificial-life", "3d", "kd-tree"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Life",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
boids3d = "boids3d.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["boids3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
