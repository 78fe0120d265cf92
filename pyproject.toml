[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orbgeo"
version = "0.1.0"
description = "2D geometry types with planar measures, projections, line simplification and a point quadtree"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "geometry",
    "gis",
    "mercator",
    "projection",
    "simplification",
    "douglas-peucker",
    "visvalingam",
    "quadtree",
    "centroid",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["orbgeo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
