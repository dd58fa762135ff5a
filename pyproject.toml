[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mstlab"
version = "0.1.0"
description = "Minimum spanning trees with Kruskal and Prim over adjacency-list and incidence-matrix graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "minimum spanning tree", "kruskal", "prim", "heap sort", "union-find", "incidence matrix", "adjacency list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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

[project.scripts]
mstlab = "mstlab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mstlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
